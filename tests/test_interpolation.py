"""
Interpolation tests.
"""

import math

import pytest

from ficcgraph.interpolation import (
    BackwardFlatInterpolator,
    LinearInterpolator,
    LogLinearInterpolator,
)


def test_linear_hits_pillars_and_midpoints():
    interp = LinearInterpolator([0.0, 1.0, 3.0], [0.01, 0.03, 0.02])
    assert interp(1.0) == pytest.approx(0.03)
    assert interp(0.5) == pytest.approx(0.02)
    assert interp(2.0) == pytest.approx(0.025)


def test_linear_extrapolates_from_end_segments():
    interp = LinearInterpolator([0.0, 1.0, 3.0], [0.01, 0.03, 0.02])
    assert interp(4.0) == pytest.approx(0.015)
    assert interp(-1.0) == pytest.approx(-0.01)


def test_linear_primitive_is_exact_integral():
    interp = LinearInterpolator([0.0, 1.0, 3.0], [0.01, 0.03, 0.02])
    # trapezoids: 0.02 on [0,1], 0.05 on [1,3]
    assert interp.primitive(1.0) == pytest.approx(0.02)
    assert interp.primitive(3.0) == pytest.approx(0.07)
    assert interp.primitive(2.0) == pytest.approx(0.02 + 0.0275)


def test_unsorted_pillars_are_sorted():
    interp = LinearInterpolator([2.0, 0.0, 1.0], [3.0, 1.0, 2.0])
    assert interp.x_min() == 0.0
    assert interp.x_max() == 2.0
    assert interp.interpolate_many([0.5, 1.5]) == pytest.approx([1.5, 2.5])


def test_duplicate_pillars_rejected():
    with pytest.raises(ValueError):
        LinearInterpolator([0.0, 1.0, 1.0], [1.0, 2.0, 3.0])


def test_too_few_points_rejected():
    with pytest.raises(ValueError):
        LinearInterpolator([0.0], [1.0])


def test_log_linear_gives_flat_forwards():
    dfs = [1.0, math.exp(-0.03), math.exp(-0.03 - 0.04 * 2)]
    interp = LogLinearInterpolator([0.0, 1.0, 3.0], dfs)
    assert interp(0.5) == pytest.approx(math.exp(-0.015))
    assert interp(2.0) == pytest.approx(math.exp(-0.03 - 0.04))
    assert interp.derivative(2.0) / interp(2.0) == pytest.approx(-0.04)


def test_log_linear_requires_positive_values():
    with pytest.raises(ValueError):
        LogLinearInterpolator([0.0, 1.0], [1.0, 0.0])


def test_backward_flat_takes_right_pillar_value():
    interp = BackwardFlatInterpolator([0.0, 1.0, 3.0], [0.01, 0.03, 0.02])
    assert interp(0.0) == 0.01
    assert interp(0.5) == 0.03
    assert interp(1.0) == 0.03
    assert interp(1.0 + 1e-9) == 0.02
    assert interp(3.0) == 0.02
    assert interp.derivative(2.0) == 0.0


def test_backward_flat_primitive_is_exact_integral():
    interp = BackwardFlatInterpolator([0.0, 1.0, 3.0], [0.01, 0.03, 0.02])
    assert interp.primitive(0.0) == pytest.approx(0.0)
    assert interp.primitive(1.0) == pytest.approx(0.03)
    assert interp.primitive(2.0) == pytest.approx(0.05)
    assert interp.primitive(3.0) == pytest.approx(0.07)
