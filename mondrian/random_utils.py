"""
Random sources for composition generation.
Seeded runs use random.Random so a composition can be reproduced; unseeded runs use
the secrets module's SystemRandom to avoid bias between calls.
"""
import random
import secrets
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything with uniform random() in [0, 1) and choice(); random.Random qualifies."""

    def random(self) -> float:
        ...

    def choice(self, seq: Sequence[T]) -> T:
        ...


def make_rng(seed: int | None = None) -> random.Random:
    """Reproducible random.Random when seed is given, else cryptographically secure SystemRandom."""
    if seed is None:
        return secrets.SystemRandom()
    return random.Random(seed)


def chance(rng: RandomSource, probability: float) -> bool:
    """True with the given probability (one uniform draw)."""
    return rng.random() < probability


def secure_choice(sequence):
    """Cryptographically secure random choice. Returns None for an empty sequence."""
    if not sequence:
        return None
    return secrets.choice(list(sequence))
