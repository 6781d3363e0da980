"""
Entropy estimate and strength classification for generated secrets.
"""

from __future__ import annotations

import math
from enum import Enum


class Strength(str, Enum):
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"


# (exclusive upper bound in bits, tier), checked in order.
STRENGTH_THRESHOLDS: tuple[tuple[float, Strength], ...] = (
    (40.0, Strength.WEAK),
    (60.0, Strength.MEDIUM),
    (80.0, Strength.STRONG),
)


def bytes_to_int(data: bytes) -> int:
    """
    Interpret `data` as a big-endian unsigned integer (b"" is 0).
    """
    return int.from_bytes(data, "big")


def round_half_up(value: float, digits: int = 2) -> float:
    """
    Round to `digits` decimals, halves away from zero for positive values.

    Python's round() uses banker's rounding, which would give different
    results from the published numbers at exact .xx5 boundaries.
    """
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def calculate_entropy(length: int, pool_size: int) -> float:
    """
    Entropy in bits of `length` independent draws from `pool_size` symbols.

    This is `length * log2(pool_size)` rounded to two decimals. For random
    passwords the pool is the full alphabet even when per-category minimums
    constrain the draw; the figure is kept that way for compatibility with
    existing consumers.
    """
    if pool_size <= 0 or length <= 0:
        return 0.0
    return round_half_up(length * math.log2(pool_size))


def strength_level(entropy: float) -> Strength:
    """Map an entropy value in bits onto a strength tier."""
    for bound, tier in STRENGTH_THRESHOLDS:
        if entropy < bound:
            return tier
    return Strength.VERY_STRONG
