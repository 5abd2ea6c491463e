import math

import pytest

from fleetsim.core.validation import (
    ensure_finite,
    ensure_fraction,
    ensure_in_range,
    ensure_non_negative,
    ensure_ordered,
    ensure_positive,
)


def test_ensure_positive_ok():
    ensure_positive(1.0, "x")


def test_ensure_positive_raises():
    with pytest.raises(ValueError):
        ensure_positive(0.0, "x")


def test_ensure_non_negative_accepts_zero():
    ensure_non_negative(0.0, "x")


def test_ensure_non_negative_raises():
    with pytest.raises(ValueError, match="x must be >= 0"):
        ensure_non_negative(-1e-9, "x")


@pytest.mark.parametrize("value", [0.0, 0.5, 1.0])
def test_ensure_in_range_inclusive(value):
    ensure_in_range(value, 0.0, 1.0, "load")


def test_ensure_in_range_raises():
    with pytest.raises(ValueError, match="load"):
        ensure_in_range(1.01, 0.0, 1.0, "load")


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_ensure_finite_raises(value):
    with pytest.raises(ValueError):
        ensure_finite(value, "dt")


def test_ensure_ordered():
    ensure_ordered(1.0, 1.0, "band")
    with pytest.raises(ValueError):
        ensure_ordered(2.0, 1.0, "band")


def test_ensure_fraction():
    ensure_fraction(0.0, "load")
    ensure_fraction(1.0, "load")
    with pytest.raises(ValueError, match="load"):
        ensure_fraction(-0.1, "load")
