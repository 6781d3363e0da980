"""
High-level generation API.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Union

from .config import PRESETS, GenerationPlan, Mode, PasswordOptions, resolve_plan
from .entropy import Strength, calculate_entropy, strength_level
from .mapping import plan_to_passphrase, plan_to_password
from .random_engine import DEFAULT_ENGINE, RandomEngine

OptionsArg = Union[PasswordOptions, Mapping[str, Any], int, float, None]


@dataclass
class GenerationResult:
    """
    Full result of one generation.
    """

    password: str

    # Bits, rounded to two decimals.
    entropy: float

    strength: Strength

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["strength"] = self.strength.value
        return data


class PasswordGenerator:
    """
    Resolves options once, then generates as many secrets as needed.

    Raises ConfigError from the constructor if the options are invalid;
    generation itself cannot fail.
    """

    PRESETS = PRESETS

    def __init__(
        self,
        options: OptionsArg = None,
        engine: RandomEngine | None = None,
    ) -> None:
        self.plan: GenerationPlan = resolve_plan(options)
        self.engine = engine or DEFAULT_ENGINE

    def generate_full(self) -> GenerationResult:
        plan = self.plan
        if plan.mode is Mode.PASSPHRASE:
            password = plan_to_passphrase(plan, self.engine)
            entropy = calculate_entropy(plan.length, len(plan.wordlist))
        else:
            password = plan_to_password(plan, self.engine)
            entropy = calculate_entropy(plan.length, len(plan.alphabet))

        return GenerationResult(
            password=password,
            entropy=entropy,
            strength=strength_level(entropy),
        )

    def generate(self) -> str:
        return self.generate_full().password


def generate_full(options: OptionsArg = None) -> GenerationResult:
    """
    Generate one password or passphrase with its entropy and strength.

    `options` may be PasswordOptions, a mapping of its fields, or a bare
    length.
    """
    return PasswordGenerator(options).generate_full()


def generate(options: OptionsArg = None) -> str:
    """
    Generate one password or passphrase and return just the secret.
    """
    return PasswordGenerator(options).generate()
