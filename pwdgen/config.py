"""
Configuration for the password generator.

A caller describes what it wants with `PasswordOptions`. `resolve_plan`
validates those options, merges any named preset and produces an immutable
`GenerationPlan` that the sampling code can use without further checks.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Sequence

from .wordlist import DEFAULT_WORDLIST

logger = logging.getLogger(__name__)


LOWER = "abcdefghijklmnopqrstuvwxyz"
UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SPECIAL = "!@#$%^&*()_+-=[]{}|;':\",./<>?"

# Characters that are easy to confuse when read aloud or retyped.
SIMILAR_CHARS = frozenset("il1Lo0O")

MIN_LENGTH = 8
MAX_LENGTH = 128
DEFAULT_LENGTH = 12

MIN_WORDS = 3
MAX_WORDS = 20
DEFAULT_WORDS = 5

DEFAULT_SEPARATOR = "-"


class Mode(str, Enum):
    RANDOM = "random"
    PASSPHRASE = "passphrase"


PRESETS: Mapping[str, Mapping[str, object]] = MappingProxyType(
    {
        "wifi": MappingProxyType(
            {"length": 16, "is_special": False, "exclude_similar": True}
        ),
        "enterprise": MappingProxyType(
            {"length": 20, "min_special": 2, "min_digit": 2, "min_upper": 2}
        ),
        "legacy": MappingProxyType({"length": 8, "is_special": True}),
        "ultra": MappingProxyType(
            {"length": 64, "min_special": 10, "min_digit": 10}
        ),
    }
)


class ConfigError(ValueError):
    """Generation options that cannot be turned into a plan."""


class InvalidLengthError(ConfigError):
    pass


class EmptyCharsetError(ConfigError):
    pass


class EmptyCharsetAfterExclusionError(EmptyCharsetError):
    pass


class MinimumsExceedLengthError(ConfigError):
    pass


class InvalidPassphraseLengthError(ConfigError):
    pass


class InvalidMinimumError(ConfigError):
    pass


class UnknownPresetError(ConfigError):
    pass


class UnknownModeError(ConfigError):
    pass


@dataclass(frozen=True)
class PasswordOptions:
    """
    What the caller asked for.

    Every field defaults to None, meaning "not given". That lets a preset
    fill the gaps without overriding anything the caller set explicitly.
    """

    # "random" (default) or "passphrase".
    mode: Mode | str | None = None

    # Characters for random mode, words for passphrase mode.
    length: int | float | None = None

    # Include the special-character set (random mode, default True).
    is_special: bool | None = None

    # Replaces the built-in alphabet entirely.
    custom_charset: str | None = None

    # Drop look-alike characters (i, l, 1, L, o, 0, O).
    exclude_similar: bool | None = None

    # Per-category minimums (random mode only).
    min_lower: int | None = None
    min_upper: int | None = None
    min_digit: int | None = None
    min_special: int | None = None

    # Passphrase mode only.
    separator: str | None = None
    wordlist: Sequence[str] | None = None

    # Name of an entry in PRESETS.
    preset: str | None = None


DEFAULT_OPTIONS = PasswordOptions()


@dataclass(frozen=True)
class GenerationPlan:
    """
    Validated, fully resolved generation settings.

    Invariants: the alphabet is non-empty in random mode, the minimums sum
    to no more than `length`, and `length` lies in the range for `mode`.
    """

    mode: Mode
    length: int
    alphabet: str = ""
    exclude_similar: bool = False
    min_lower: int = 0
    min_upper: int = 0
    min_digit: int = 0
    min_special: int = 0
    separator: str = DEFAULT_SEPARATOR
    wordlist: tuple[str, ...] = ()

    @property
    def required_count(self) -> int:
        return self.min_lower + self.min_upper + self.min_digit + self.min_special


def coerce_options(
    options: PasswordOptions | Mapping[str, object] | int | float | None = None,
) -> PasswordOptions:
    """
    Normalize the accepted argument shapes into a PasswordOptions.

    A bare number is shorthand for ``PasswordOptions(length=n)``.
    """
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, PasswordOptions):
        return options
    if isinstance(options, (int, float)) and not isinstance(options, bool):
        return PasswordOptions(length=options)
    if isinstance(options, Mapping):
        known = {f.name for f in fields(PasswordOptions)}
        unknown = set(options) - known
        if unknown:
            raise TypeError(
                f"Unknown option(s): {', '.join(sorted(map(str, unknown)))}"
            )
        return PasswordOptions(**options)
    raise TypeError(
        "options must be PasswordOptions, a mapping, a length or None, "
        f"not {type(options).__name__}"
    )


def apply_preset(options: PasswordOptions) -> PasswordOptions:
    """
    Return a copy of `options` with the named preset filled in.

    Fields the caller set explicitly are left alone.
    """
    if options.preset is None:
        return options

    preset = PRESETS.get(options.preset)
    if preset is None:
        raise UnknownPresetError(
            f"Unknown preset: {options.preset}. "
            f"Available: {', '.join(PRESETS)}"
        )

    missing = {
        name: value
        for name, value in preset.items()
        if getattr(options, name) is None
    }
    return replace(options, **missing)


def _as_count(value: object) -> int | None:
    """
    Return `value` as an int if it is an integer-valued number, else None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return None


def _resolve_mode(mode: Mode | str | None) -> Mode:
    if mode is None:
        return Mode.RANDOM
    try:
        return Mode(mode)
    except ValueError:
        raise UnknownModeError(
            f"Unknown mode: {mode}. Available: random, passphrase"
        ) from None


def filter_similar(chars: str) -> str:
    return "".join(c for c in chars if c not in SIMILAR_CHARS)


def resolve_alphabet(options: PasswordOptions) -> str:
    """
    Work out the effective random-mode alphabet for `options`.
    """
    is_special = True if options.is_special is None else options.is_special

    if options.custom_charset is not None:
        if not options.custom_charset:
            raise EmptyCharsetError("Custom charset cannot be empty.")
        # Duplicates would weight a character more than once.
        alphabet = "".join(dict.fromkeys(options.custom_charset))
    else:
        alphabet = LOWER + UPPER + DIGITS
        if is_special:
            alphabet += SPECIAL

    if options.exclude_similar:
        alphabet = filter_similar(alphabet)
        if not alphabet:
            raise EmptyCharsetAfterExclusionError(
                "Charset is empty after excluding similar characters."
            )

    return alphabet


def _resolve_minimum(name: str, value: int | None, length: int, floor: int) -> int:
    if value is None:
        value = 0
    count = _as_count(value)
    if count is None or count < 0:
        raise InvalidMinimumError(
            f"Minimum {name} count must be a non-negative integer, got {value!r}."
        )
    return max(min(count, length), floor)


def _resolve_random(options: PasswordOptions) -> GenerationPlan:
    raw_length = DEFAULT_LENGTH if options.length is None else options.length
    length = _as_count(raw_length)
    if length is None or not MIN_LENGTH <= length <= MAX_LENGTH:
        raise InvalidLengthError(
            f"Password length must be an integer between {MIN_LENGTH} and "
            f"{MAX_LENGTH} characters."
        )

    alphabet = resolve_alphabet(options)

    is_special = True if options.is_special is None else options.is_special
    # Strong by default: one of each category unless the caller chose
    # their own alphabet or turned special characters off.
    floor = 1 if options.custom_charset is None and is_special else 0

    minimums = {
        name: _resolve_minimum(name, getattr(options, f"min_{name}"), length, floor)
        for name in ("lower", "upper", "digit", "special")
    }
    if sum(minimums.values()) > length:
        raise MinimumsExceedLengthError(
            "Minimum requirements exceed the requested password length "
            f"({sum(minimums.values())} > {length})."
        )

    return GenerationPlan(
        mode=Mode.RANDOM,
        length=length,
        alphabet=alphabet,
        exclude_similar=bool(options.exclude_similar),
        min_lower=minimums["lower"],
        min_upper=minimums["upper"],
        min_digit=minimums["digit"],
        min_special=minimums["special"],
    )


def _resolve_passphrase(options: PasswordOptions) -> GenerationPlan:
    raw_length = DEFAULT_WORDS if options.length is None else options.length
    length = _as_count(raw_length)
    if length is None or not MIN_WORDS <= length <= MAX_WORDS:
        raise InvalidPassphraseLengthError(
            f"Passphrase length must be between {MIN_WORDS} and {MAX_WORDS} words."
        )

    wordlist = tuple(options.wordlist) if options.wordlist else DEFAULT_WORDLIST

    return GenerationPlan(
        mode=Mode.PASSPHRASE,
        length=length,
        separator=options.separator or DEFAULT_SEPARATOR,
        wordlist=wordlist,
    )


def resolve_plan(
    options: PasswordOptions | Mapping[str, object] | int | float | None = None,
) -> GenerationPlan:
    """
    Validate `options` and turn them into a GenerationPlan.

    Raises a ConfigError subclass describing the first problem found.
    """
    opts = apply_preset(coerce_options(options))
    mode = _resolve_mode(opts.mode)

    if mode is Mode.PASSPHRASE:
        plan = _resolve_passphrase(opts)
        logger.debug(
            "Resolved passphrase plan: %d words from a %d-word list",
            plan.length,
            len(plan.wordlist),
        )
    else:
        plan = _resolve_random(opts)
        logger.debug(
            "Resolved random plan: length=%d alphabet=%d required=%d",
            plan.length,
            len(plan.alphabet),
            plan.required_count,
        )
    return plan
