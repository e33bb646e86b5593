import itertools
import math
import random
import re

import pytest

from patterns import (
    ALL_PATTERNS,
    break_even_units,
    car_ownership,
    compound_growth,
    consulting_billing,
    cost_reduction_profit,
    decimal_multiplication,
    decomposition_multiplication,
    market_size,
    normalize_weights,
    percentage_increase,
    percentage_of,
    profit_margin,
    scaled_division,
    sequential_percentage_changes,
    weighted_average_cost,
    weighted_average_margin,
)
from schemas.cards import FormattedAnswer, NumericAnswer


def test_decomposition_multiplication(scripted):
    r = decomposition_multiplication(scripted([5, 5, 50]))
    assert r.question == "What is (50 + 5) × 50?"
    assert r.answer == NumericAnswer(value=2750)


def test_percentage_of(scripted):
    r = percentage_of(scripted([25, 4000]))
    assert r.question == "What is 25% of 4,000?"
    assert r.answer.value == 1000


def test_scaled_division(scripted):
    r = scaled_division(scripted([90, 8]))
    assert r.question == "What is 90,000 ÷ 8?"
    assert r.answer.value == 11250


def test_decimal_multiplication(scripted):
    r = decimal_multiplication(scripted([2.5, 3]))
    assert r.question == "What is 2.5 × 3?"
    assert r.answer.value == 7.5

    r = decimal_multiplication(scripted([1.0, 4]))
    assert r.question == "What is 1.0 × 4?"
    assert r.answer.value == 4


def test_percentage_increase_rounds_half_up(scripted):
    r = percentage_increase(scripted([250, 15]))
    assert r.question == "What is 250 increased by 15%?"
    assert r.answer.value == 288


def test_break_even_units(scripted):
    r = break_even_units(scripted([10000, 100, 50]))
    assert "fixed costs of $10,000, variable costs of $50, and a price of $100" in r.question
    assert r.answer.value == 200


def test_break_even_rounds_units_up(scripted):
    # 15000 / (70 - 25) = 333.3...
    r = break_even_units(scripted([15000, 70, 25]))
    assert r.answer.value == 334


def test_profit_margin(scripted):
    r = profit_margin(scripted([50000, 20000]))
    assert r.question.startswith("A firm's revenue is $50,000, with costs of $20,000.")
    assert r.answer == FormattedAnswer(text="$30,000 profit, 60% margin")


def test_market_size(scripted):
    r = market_size(scripted([20, 15, 3]))
    assert r.question.startswith("A country has 20 million people. 15% use a product daily")
    assert r.answer.text == "108 million units"

    # thousands are grouped in the answer text
    r = market_size(scripted([100, 50, 5]))
    assert r.answer == FormattedAnswer(text="3,000 million units")


def test_car_ownership(scripted):
    r = car_ownership(scripted([2000, 30, 40]))
    assert "Of 2,000 households in a city, 30% own 2 cars, 40% own 1 car." in r.question
    assert r.answer.value == 2000


def test_compound_growth(scripted):
    # 1000 * 1.05^3 = 1157.625
    r = compound_growth(scripted([1000, 5, 3]))
    assert "grows 5% annually for 3 years" in r.question
    assert r.answer.value == 1158


def test_sequential_percentage_changes(scripted):
    r = sequential_percentage_changes(scripted([200, 10, 10]))
    assert "reduced by 10% during an offer, then increased by 10%" in r.question
    assert r.answer.value == 198

    r = sequential_percentage_changes(scripted([130, 15, 25]))
    # 130 * 0.85 * 1.25 = 138.125
    assert r.answer.value == 138.13


def test_weighted_average_margin_renormalises(scripted):
    # raw weights 50 and 30 snap to 65 and 40; the last absorbs the extra 5
    r = weighted_average_margin(scripted([2, 50, 20, 30, 40]))
    assert r.question.endswith(
        "Product 1: 65% revenue, 20% margin, Product 2: 35% revenue, 40% margin"
    )
    assert r.answer == FormattedAnswer(text="27%")


def test_normalize_weights_three_way():
    assert normalize_weights([20, 20, 20]) == [35, 35, 30]


@pytest.mark.parametrize("count", [2, 3])
def test_normalize_weights_always_sums_to_100(count):
    for weights in itertools.product([20, 25, 30, 40, 50], repeat=count):
        out = normalize_weights(list(weights))
        assert sum(out) == 100
        assert all(w % 5 == 0 for w in out)


def test_weighted_average_cost(scripted):
    r = weighted_average_cost(scripted([100, 10, 200, 25]))
    assert r.answer.value == 20

    r = weighted_average_cost(scripted([150, 15, 100, 20]))
    assert r.answer.value == 17


def test_consulting_billing(scripted):
    r = consulting_billing(scripted([200, 5, 8, 4, 3]))
    assert r.question.startswith("A team of 3 consultants works for $200/hour")
    assert r.answer.text == "$96,000"


def test_cost_reduction_profit(scripted):
    r = cost_reduction_profit(scripted([100, 60, 25]))
    assert r.answer.text == "$55"

    r = cost_reduction_profit(scripted([55, 30, 15]))
    assert r.answer.text == "$29.50"


def test_break_even_variable_cost_below_price():
    rng = random.Random(11)
    for _ in range(500):
        r = break_even_units(rng)
        m = re.search(r"variable costs of \$(\d+), and a price of \$(\d+)", r.question)
        variable, price = int(m.group(1)), int(m.group(2))
        assert variable < price
        assert r.answer.value > 0


@pytest.mark.parametrize("pattern", ALL_PATTERNS, ids=lambda fn: fn.__name__)
def test_every_pattern_answer_is_well_formed(pattern):
    rng = random.Random(2024)
    for _ in range(300):
        r = pattern(rng)
        assert r.question
        if isinstance(r.answer, NumericAnswer):
            assert math.isfinite(r.answer.value)
        else:
            text = r.answer.text.lower()
            assert text and "nan" not in text and "inf" not in text
