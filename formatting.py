# formatting.py
"""
Exact rounding and en-US number rendering for flashcard answers.

All arithmetic goes through sympy rationals so that half-up rounding of
values like 1000 * 1.05**3 or x.xx5 never depends on binary float error.
"""
from __future__ import annotations

from typing import Union

from sympy import Integer, Rational, ceiling, floor

Number = Union[int, float, Rational]

_HALF = Rational(1, 2)


def exact(value: Number) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, float):
        # repr gives the shortest decimal that round-trips, e.g. 8.5 -> "8.5"
        return Rational(repr(value))
    return Rational(value)


def to_number(value: Number) -> Union[int, float]:
    """Collapse a rational to int when integral, float otherwise."""
    r = exact(value)
    if r.is_integer:
        return int(r)
    return float(r)


def round_half_up(value: Number, places: int = 0) -> Union[int, float]:
    """Round to `places` decimals, ties towards +infinity (Math.round semantics)."""
    scale = Integer(10) ** places
    scaled = floor(exact(value) * scale + _HALF)
    if places == 0:
        return int(scaled)
    return to_number(Rational(scaled, scale))


def round_up(value: Number) -> int:
    return int(ceiling(exact(value)))


def format_number(value: Number) -> str:
    """Group thousands with commas, keep at most three decimals."""
    n = to_number(value)
    if isinstance(n, int):
        return f"{n:,}"
    return f"{n:,.3f}".rstrip("0").rstrip(".")


def format_currency(value: Number) -> str:
    n = to_number(value)
    if isinstance(n, int):
        return f"${n:,}"
    return f"${n:,.2f}"


def format_percent(value: Number) -> str:
    return f"{format_number(value)}%"
