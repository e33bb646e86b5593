# patterns.py
"""
Question patterns for business mental maths.

Each pattern takes a random source and returns one QuestionResult. Operands
are drawn from small sets of round numbers so the sums stay doable in your
head; answers are computed exactly and rounded half-up at the end.
"""
from __future__ import annotations

import random
from typing import Callable, List, Sequence, Union

from sympy import Rational

from formatting import (
    exact,
    format_currency,
    format_number,
    format_percent,
    round_half_up,
    round_up,
)
from rand import (
    random_choice,
    random_int,
    random_round_int,
    random_round_percent,
    round_to_nearest,
)
from schemas.cards import FormattedAnswer, NumericAnswer, QuestionResult

PatternFn = Callable[[random.Random], QuestionResult]


def _numeric(question: str, value: Union[int, float]) -> QuestionResult:
    return QuestionResult(question=question, answer=NumericAnswer(value=value))


def _formatted(question: str, text: str) -> QuestionResult:
    return QuestionResult(question=question, answer=FormattedAnswer(text=text))


def _pct(p: int) -> Rational:
    return Rational(p, 100)


# --- Arithmetic ------------------------------------------------------------------

_ROUND_MULTIPLIERS = (20, 25, 30, 40, 50, 60, 70, 75, 80, 90)
_DECIMALS = (1.5, 2.5, 3.5, 4.5, 5.5, 6.5, 7.5, 8.5, 9.5, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0)


def decomposition_multiplication(rng: random.Random) -> QuestionResult:
    """Two-digit multiplication by decomposition: (10k + d) × n."""
    k = random_int(rng, 1, 9)
    d = random_int(rng, 1, 9)
    n = random_choice(rng, _ROUND_MULTIPLIERS)
    a = k * 10
    return _numeric(f"What is ({a} + {d}) × {n}?", (a + d) * n)


def scaled_division(rng: random.Random) -> QuestionResult:
    """Division of a large number by scaling: (a × 1000) ÷ b."""
    a = random_choice(rng, (20, 30, 40, 50, 60, 70, 80, 90))
    b = random_choice(rng, (2, 4, 5, 8))
    large = a * 1000
    return _numeric(f"What is {format_number(large)} ÷ {b}?", round_half_up(Rational(large, b)))


def decimal_multiplication(rng: random.Random) -> QuestionResult:
    """Decimal multiplication by shift-and-multiply: a.b × n."""
    decimal = random_choice(rng, _DECIMALS)
    n = random_choice(rng, (2, 3, 4, 5, 6, 8, 10, 12))
    return _numeric(f"What is {decimal:.1f} × {n}?", round_half_up(exact(decimal) * n, 1))


# --- Percentages -----------------------------------------------------------------


def percentage_of(rng: random.Random) -> QuestionResult:
    """Percentage of a large number: p% of Y."""
    p = random_choice(rng, (10, 15, 20, 25, 30, 50, 75))
    y = random_round_int(rng, 1000, 10000, 1000)
    return _numeric(f"What is {p}% of {format_number(y)}?", round_half_up(y * _pct(p)))


def percentage_increase(rng: random.Random) -> QuestionResult:
    """Percentage increase: X × (1 + p)."""
    x = random_round_int(rng, 100, 900, 10)
    p = random_choice(rng, (10, 15, 20, 25, 50))
    return _numeric(f"What is {x} increased by {p}%?", round_half_up(x * (1 + _pct(p))))


def sequential_percentage_changes(rng: random.Random) -> QuestionResult:
    """Sequential percentage changes: P × (1 - a) × (1 + b)."""
    price = random_round_int(rng, 100, 1000, 10)
    a = random_round_percent(rng, 10, 30)
    b = random_round_percent(rng, 5, 25)
    final = price * (1 - _pct(a)) * (1 + _pct(b))
    return _numeric(
        f"A product costs ${price}. Its price is reduced by {a}% during an offer, "
        f"then increased by {b}%. What is its final price?",
        round_half_up(final, 2),
    )


def compound_growth(rng: random.Random) -> QuestionResult:
    """Compound growth over several years: V0 × (1 + g)^t."""
    v0 = random_round_int(rng, 1000, 10000, 1000)
    g = random_choice(rng, (5, 10, 15, 20))
    t = random_choice(rng, (2, 3, 4, 5))
    return _numeric(
        f"A market is worth ${format_number(v0)} and grows {g}% annually for {t} years. "
        f"What is its value after {t} years?",
        round_half_up(v0 * (1 + _pct(g)) ** t),
    )


# --- Unit economics --------------------------------------------------------------


def break_even_units(rng: random.Random) -> QuestionResult:
    """Break-even analysis in units: F ÷ (P - V)."""
    fixed = random_round_int(rng, 10000, 50000, 5000)
    price = random_round_int(rng, 50, 200, 10)
    # price is a multiple of 10, so the snapped variable cost stays <= price - 20
    variable = random_round_int(rng, 20, price - 20, 5)
    return _numeric(
        f"A product has fixed costs of ${format_number(fixed)}, variable costs of ${variable}, "
        f"and a price of ${price}. How many units are needed to break even?",
        round_up(Rational(fixed, price - variable)),
    )


def profit_margin(rng: random.Random) -> QuestionResult:
    """Profit and profit margin: R - C and (R - C) ÷ R."""
    revenue = random_round_int(rng, 20000, 100000, 10000)
    costs = random_round_int(rng, 10000, revenue * 8 // 10, 5000)
    profit = revenue - costs
    margin = round_half_up(Rational(profit * 100, revenue))
    return _formatted(
        f"A firm's revenue is ${format_number(revenue)}, with costs of ${format_number(costs)}. "
        "Find the profit and profit margin.",
        f"{format_currency(profit)} profit, {margin}% margin",
    )


def cost_reduction_profit(rng: random.Random) -> QuestionResult:
    """Profit per unit after a cost reduction: P - C × (1 - r)."""
    price = random_round_int(rng, 50, 200, 5)
    cost = random_round_int(rng, price * 4 // 10, price * 8 // 10, 5)
    r = random_choice(rng, (10, 15, 20, 25))
    new_profit = price - cost * (1 - _pct(r))
    return _formatted(
        f"A product is sold for ${price}. Its cost is ${cost}. The cost is reduced by {r}%. "
        "What is the new profit per unit?",
        format_currency(round_half_up(new_profit, 2)),
    )


def consulting_billing(rng: random.Random) -> QuestionResult:
    """Consulting project billing: rate × days × hours × weeks × consultants."""
    rate = random_choice(rng, (100, 150, 200, 250, 300))
    days = random_choice(rng, (3, 4, 5))
    hours = random_choice(rng, (6, 7, 8))
    weeks = random_choice(rng, (2, 3, 4, 5, 6, 7, 8))
    consultants = random_choice(rng, (2, 3, 4, 5))
    return _formatted(
        f"A team of {consultants} consultants works for ${rate}/hour, {days} days/week, "
        f"{hours} hours/day, {weeks} weeks. What is the total fee?",
        format_currency(rate * days * hours * weeks * consultants),
    )


# --- Estimation and weighted averages --------------------------------------------


def market_size(rng: random.Random) -> QuestionResult:
    """Market size estimation by consumption: N × s × u × 12."""
    people = random_round_int(rng, 10, 100, 10)
    share = random_choice(rng, (10, 15, 20, 25, 30, 40, 50))
    units = random_choice(rng, (1, 2, 3, 4, 5))
    total = round_half_up(people * _pct(share) * units * 12)
    return _formatted(
        f"A country has {people} million people. {share}% use a product daily, "
        f"on average {units} units/month each. What is the total annual consumption?",
        f"{format_number(total)} million units",
    )


def car_ownership(rng: random.Random) -> QuestionResult:
    """Asset counts by ownership share: 2 × H × a + H × b."""
    households = random_round_int(rng, 1000, 10000, 100)
    a = random_round_percent(rng, 10, 40)
    b = random_round_percent(rng, 20, 50)
    cars = households * _pct(a) * 2 + households * _pct(b)
    return _numeric(
        f"Of {format_number(households)} households in a city, {a}% own 2 cars, {b}% own 1 car. "
        "How many total cars are there?",
        round_half_up(cars),
    )


def normalize_weights(weights: Sequence[int], step: int = 5) -> List[int]:
    """
    Rescale percentage weights to sum to 100, each snapped to `step`.

    The last weight absorbs whatever residual the snapping leaves, so the
    result always sums to exactly 100. The residual is not bounded.
    """
    total = sum(weights)
    out = [round_to_nearest(Rational(w * 100, total), step) for w in weights]
    out[-1] += 100 - sum(out)
    return out


def weighted_average_margin(rng: random.Random) -> QuestionResult:
    """Weighted average margin: Σ w_i × m_i with revenue weights summing to 100."""
    count = random_int(rng, 2, 3)
    raw_weights: List[int] = []
    margins: List[int] = []
    for _ in range(count):
        raw_weights.append(random_round_percent(rng, 20, 50))
        margins.append(random_round_percent(rng, 10, 40))

    weights = normalize_weights(raw_weights)
    average = sum(_pct(w) * m for w, m in zip(weights, margins))
    products = ", ".join(
        f"Product {i}: {w}% revenue, {m}% margin"
        for i, (w, m) in enumerate(zip(weights, margins), start=1)
    )
    return _formatted(
        f"What is the weighted average margin of the following products: {products}",
        format_percent(round_half_up(average, 1)),
    )


def weighted_average_cost(rng: random.Random) -> QuestionResult:
    """Weighted average cost: (q1 c1 + q2 c2) ÷ (q1 + q2)."""
    q1 = random_round_int(rng, 100, 500, 50)
    c1 = random_round_int(rng, 10, 50, 5)
    q2 = random_round_int(rng, 100, 500, 50)
    c2 = random_round_int(rng, 10, 50, 5)
    average = Rational(q1 * c1 + q2 * c2, q1 + q2)
    return _numeric(
        f"Factory A produces {q1} units at ${c1}/unit. Factory B produces {q2} units at ${c2}/unit. "
        "What is the average cost?",
        round_half_up(average, 2),
    )


# Registration order is the card deck order
ALL_PATTERNS: List[PatternFn] = [
    decomposition_multiplication,
    scaled_division,
    decimal_multiplication,
    percentage_of,
    percentage_increase,
    break_even_units,
    profit_margin,
    market_size,
    car_ownership,
    compound_growth,
    sequential_percentage_changes,
    weighted_average_margin,
    weighted_average_cost,
    consulting_billing,
    cost_reduction_profit,
]
