# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Seeded random number generator for puzzle generation.

Uses Mulberry32, a small 32-bit PRNG, seeded from a string hash so that
the same seed produces the same stream on every client. Nothing here
touches platform entropy; every generation run owns its own instance.
"""

from typing import List, MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")

MASK_32 = 0xFFFFFFFF
MULBERRY_INCREMENT = 0x6D2B79F5
TWO_POW_32 = 4294967296.0


def _to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= MASK_32
    if value & 0x80000000:
        value -= 0x100000000
    return value


def hash_string(text: str) -> int:
    """
    Hash a seed string to a non-negative 32-bit integer.

    Rolling ``hash * 31 + code`` over UTF-16 code units, truncated to a
    signed 32-bit value after every step, then made non-negative.
    """
    hash_value = 0
    if not text:
        return hash_value

    data = text.encode("utf-16-le", errors="surrogatepass")
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        hash_value = _to_int32((hash_value << 5) - hash_value + code_unit)

    return abs(hash_value)


class SeededRNG:
    """
    Deterministic float stream plus the helpers the generator needs.

    Usage:
        rng = create_rng("post123:4")
        value = rng.next()
        words = rng.shuffle(list(words))
    """

    def __init__(self, seed: str):
        self.seed = seed
        self._state = hash_string(seed) & MASK_32

    def _mulberry32(self) -> float:
        self._state = (self._state + MULBERRY_INCREMENT) & MASK_32
        t = self._state
        t = ((t ^ (t >> 15)) * (t | 1)) & MASK_32
        t = ((t + (((t ^ (t >> 7)) * (t | 61)) & MASK_32)) & MASK_32) ^ t
        return ((t ^ (t >> 14)) & MASK_32) / TWO_POW_32

    def next(self) -> float:
        """Get next random number in [0, 1)."""
        return self._mulberry32()

    def next_int(self, min_value: int, max_value: int) -> int:
        """Get random integer between min_value and max_value (inclusive)."""
        if min_value > max_value:
            raise ValueError(
                f"Invalid range: min ({min_value}) > max ({max_value})"
            )
        return int(self._mulberry32() * (max_value - min_value + 1)) + min_value

    def pick(self, items: Sequence[T]) -> Optional[T]:
        """Pick a random element, or None for an empty sequence."""
        if len(items) == 0:
            return None
        index = int(self._mulberry32() * len(items))
        return items[index]

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Fisher-Yates shuffle in place; returns the same sequence."""
        for i in range(len(items) - 1, 0, -1):
            j = int(self._mulberry32() * (i + 1))
            items[i], items[j] = items[j], items[i]
        return items

    def next_bool(self, probability: float = 0.5) -> bool:
        """Get random boolean that is True with the given probability."""
        return self._mulberry32() < probability

    def take(self, count: int) -> List[float]:
        """Draw ``count`` successive values."""
        return [self._mulberry32() for _ in range(count)]


def create_rng(seed: str) -> SeededRNG:
    """
    Create a seeded RNG.

    Args:
        seed: String seed for deterministic generation

    Returns:
        SeededRNG instance
    """
    return SeededRNG(seed)


def seeded_uuid(seed: str, counter: int = 0) -> str:
    """
    Generate a deterministic UUID-shaped string from a seed.

    Args:
        seed: Base seed
        counter: Optional counter for uniqueness

    Returns:
        32 hex digits grouped 8-4-4-4-12
    """
    rng = create_rng(f"{seed}_{counter}")
    digits = []
    for i in range(32):
        if i in (8, 12, 16, 20):
            digits.append("-")
        digits.append(format(int(rng.next() * 16), "x"))
    return "".join(digits)
