"""
Random engine: turns bytes from a cryptographic source into unbiased
integers, choices and shuffles.
"""

from __future__ import annotations

import secrets
from typing import Callable, Sequence, TypeVar

from .entropy import bytes_to_int

T = TypeVar("T")

ByteSource = Callable[[int], bytes]


class RandomEngine:
    """
    Encapsulates every use of the random byte source.

    `source(n)` must return `n` bytes. The default, `secrets.token_bytes`,
    reads from the operating system CSPRNG and is safe to share between
    threads; the engine itself keeps no state between draws.
    """

    def __init__(self, source: ByteSource | None = None) -> None:
        self.source = source or secrets.token_bytes

    def draw_uniform(self, upper: int) -> int:
        """
        Return an integer in [0, upper) with every value equally likely.

        Draws the fewest whole bytes that can represent `upper` values and
        rejects anything at or above the largest multiple of `upper` that
        fits, so the final modulo cannot favour low values. Each attempt is
        rejected with probability below 1/2; there is deliberately no cap
        on attempts, since stopping early would bias the result.
        """
        if upper <= 0:
            raise ValueError(f"upper bound must be positive, got {upper}")

        num_bytes = ((upper - 1).bit_length() + 7) // 8
        max_value = 256 ** num_bytes
        limit = max_value - (max_value % upper)

        while True:
            value = bytes_to_int(self.source(num_bytes))
            if value < limit:
                return value % upper

    def choice(self, seq: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence."""
        if not seq:
            raise IndexError("cannot choose from an empty sequence")
        return seq[self.draw_uniform(len(seq))]

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """
        Return a Fisher-Yates shuffled copy of `items`.
        """
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.draw_uniform(i + 1)
            result[i], result[j] = result[j], result[i]
        return result


# Shared engine for callers that do not bring their own source.
DEFAULT_ENGINE = RandomEngine()
