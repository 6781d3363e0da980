"""
Mapping logic: turn a GenerationPlan and a RandomEngine into a password or
passphrase.
"""

from __future__ import annotations

from .config import (
    DIGITS,
    LOWER,
    SPECIAL,
    UPPER,
    GenerationPlan,
    filter_similar,
)
from .random_engine import RandomEngine


def _pick(source: str, engine: RandomEngine, exclude_similar: bool) -> str:
    """
    Draw one character from `source`, skipping look-alikes when asked.

    If filtering would leave nothing to draw from, the unfiltered source
    is used instead.
    """
    if exclude_similar:
        source = filter_similar(source) or source
    return engine.choice(source)


def plan_to_password(plan: GenerationPlan, engine: RandomEngine) -> str:
    """
    Build a random-mode password in three steps:

    - Guarantee: draw each category's minimum from that category's own
      characters.
    - Fill: draw the remaining positions from the full plan alphabet.
    - Shuffle: Fisher-Yates over the whole list so the guaranteed
      characters do not sit at predictable positions.
    """
    chars: list[str] = []

    for count, category in (
        (plan.min_lower, LOWER),
        (plan.min_upper, UPPER),
        (plan.min_digit, DIGITS),
        (plan.min_special, SPECIAL),
    ):
        for _ in range(count):
            chars.append(_pick(category, engine, plan.exclude_similar))

    for _ in range(plan.length - len(chars)):
        chars.append(_pick(plan.alphabet, engine, plan.exclude_similar))

    return "".join(engine.shuffle(chars))


def plan_to_passphrase(plan: GenerationPlan, engine: RandomEngine) -> str:
    """
    Draw `plan.length` words independently and join them with the separator.
    """
    words = [engine.choice(plan.wordlist) for _ in range(plan.length)]
    return plan.separator.join(words)
