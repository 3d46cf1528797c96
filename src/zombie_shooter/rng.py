"""Random number sources for spawn rolls."""

from __future__ import annotations

import random
import secrets
from typing import Protocol


class RandomSource(Protocol):
    """Subset of :class:`random.Random` the spawn director draws from."""

    def random(self) -> float: ...

    def randrange(self, stop: int) -> int: ...


def generate_seed() -> int:
    """Return a positive 63-bit seed for ad-hoc runs."""
    return secrets.randbits(63) or 1


_GLOBAL_RNG = random.Random(generate_seed())


def get_rng() -> random.Random:
    return _GLOBAL_RNG


def seed_rng(seed: int | None) -> int:
    if seed is None:
        seed = generate_seed()
    try:
        normalized = int(seed)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid seed value: {seed}") from exc
    _GLOBAL_RNG.seed(normalized)
    return normalized


__all__ = [
    "RandomSource",
    "generate_seed",
    "get_rng",
    "seed_rng",
]
