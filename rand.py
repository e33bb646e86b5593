# rand.py
"""
Random helpers for picking human-friendly operands.

Every helper takes the random source explicitly (anything with the
`random.Random` interface) so pattern output is reproducible under a seed.
"""
from __future__ import annotations

import random
from typing import Sequence, TypeVar

from formatting import Number, exact, round_half_up

T = TypeVar("T")

# Percentages that are easy to work with mentally
ROUND_PERCENTAGES = (10, 15, 20, 25, 30, 40, 50, 60, 75)


def random_int(rng: random.Random, low: int, high: int) -> int:
    """Uniform integer in the closed range [low, high]."""
    return rng.randint(low, high)


def random_choice(rng: random.Random, seq: Sequence[T]) -> T:
    # Empty input raises IndexError from the random source
    return rng.choice(seq)


def round_to_nearest(value: Number, step: int) -> int:
    """round_to_nearest(3737, 100) == 3700; ties go up."""
    return round_half_up(exact(value) / step) * step


def random_round_int(rng: random.Random, low: int, high: int, step: int = 1) -> int:
    # Snapping can land slightly outside [low, high]; that is accepted.
    return round_to_nearest(random_int(rng, low, high), step)


def random_round_percent(rng: random.Random, low: int, high: int) -> int:
    candidates = [p for p in ROUND_PERCENTAGES if low <= p <= high]
    if not candidates:
        raise ValueError(f"No round percentage between {low} and {high}.")
    return random_choice(rng, candidates)
