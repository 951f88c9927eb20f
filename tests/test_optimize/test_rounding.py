import math

import numpy as np
import pytest

from sdopt.optimize.rounding import (
    floor5,
    floor5_array,
    format_raw,
    format_scalar,
    format_vector,
    round5,
    round5_array,
)


def test_floor_and_nearest_differ_on_positive_values():
    assert floor5(0.123456) == 0.12345
    assert round5(0.123456) == 0.12346
    assert floor5(0.000015) == 0.00001


def test_nearest_rounds_half_steps_away_from_zero():
    assert round5(0.000015) == 0.00002
    assert round5(-0.000015) == -0.00002
    assert floor5(0.000015) != round5(0.000015)


def test_floor_rounds_negative_values_down():
    assert floor5(-0.123456) == -0.12346
    assert floor5(-0.000015) == -0.00002
    assert round5(-0.123454) == -0.12345
    assert floor5(-0.123454) == -0.12346


def test_exact_five_digit_values_are_fixed_points():
    for v in (1.0, -2.5, 0.12345, -4.99999, 0.00001):
        assert floor5(v) == v
        assert round5(v) == v


def test_primitives_are_idempotent(rng):
    for v in rng.uniform(-100, 100, size=200):
        assert floor5(floor5(v)) == floor5(v)
        assert round5(round5(v)) == round5(v)


def test_nearest_is_symmetric_about_zero(rng):
    for v in rng.uniform(-10, 10, size=200):
        assert round5(-v) == -round5(v)


def test_floor_never_exceeds_input(rng):
    for v in rng.uniform(-10, 10, size=200):
        assert floor5(v) <= v
        assert v - floor5(v) < 1e-5 + 1e-12


def test_negative_zero_is_normalized():
    assert math.copysign(1.0, floor5(-0.0)) == 1.0
    assert math.copysign(1.0, round5(-1e-9)) == 1.0
    assert format_scalar(round5(-1e-9)) == "0.00000"


@pytest.mark.parametrize("value", [math.inf, -math.inf])
def test_infinities_pass_through(value):
    assert floor5(value) == value
    assert round5(value) == value


def test_nan_passes_through():
    assert math.isnan(floor5(math.nan))
    assert math.isnan(round5(math.nan))


def test_array_variants_apply_componentwise():
    values = np.array([0.123456, -0.123456])
    assert np.array_equal(floor5_array(values), np.array([0.12345, -0.12346]))
    assert np.array_equal(round5_array(values), np.array([0.12346, -0.12346]))


def test_format_scalar_has_five_digits():
    assert format_scalar(2.0) == "2.00000"
    assert format_scalar(-0.5) == "-0.50000"
    assert format_scalar(1234.5) == "1234.50000"


def test_format_vector_rounds_and_keeps_trailing_space():
    assert format_vector([1.0, -0.123456]) == "1.00000 -0.12346 "
    assert format_vector([0.123456]) == "0.12346 "


@pytest.mark.parametrize(
    "value, text",
    [
        (6.0, "6.0"),
        (-5.0, "-5.0"),
        (0.0, "0.0"),
        (0.25, "0.25"),
        (1.28, "1.28"),
        (0.001, "0.001"),
        (1e-5, "1.0E-5"),
        (1.5e-5, "1.5E-5"),
        (12345678.0, "1.2345678E7"),
        (math.nan, "NaN"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
    ],
)
def test_format_raw(value, text):
    assert format_raw(value) == text
