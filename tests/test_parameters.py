"""
Parameter blocks and transforms.
"""

import numpy as np
import pytest

from ficcgraph.models import (
    ConstantParameter,
    IdentityTransform,
    NullParameter,
    PiecewiseConstantParameter,
    PositiveTransform,
)
from ficcgraph.optimization import BoundaryConstraint, PositiveConstraint, SizeMismatchError


def test_constant_parameter():
    p = ConstantParameter(0.25, name="a")
    assert p.size() == 1
    assert p(0.0) == 0.25
    assert p(10.0) == 0.25
    p.set_param(0, 0.5)
    assert p(3.0) == 0.5


def test_constant_parameter_checks_initial_value():
    with pytest.raises(ValueError):
        ConstantParameter(-0.1, PositiveConstraint(), name="sigma")


def test_params_is_a_copy():
    p = ConstantParameter(0.25)
    values = p.params
    values[0] = 99.0
    assert p(0.0) == 0.25


def test_null_parameter():
    p = NullParameter()
    assert p.size() == 0
    assert p(5.0) == 0.0
    assert p.test_params([])


def test_test_params_checks_size():
    p = ConstantParameter(0.25, BoundaryConstraint(0.0, 1.0))
    assert p.test_params([0.5])
    assert not p.test_params([1.5])
    with pytest.raises(SizeMismatchError):
        p.test_params([0.5, 0.5])


def test_piecewise_constant_parameter():
    p = PiecewiseConstantParameter([1.0, 2.0])
    assert p.size() == 3
    p.set_params([0.1, 0.2, 0.3])
    assert p(0.5) == 0.1
    assert p(1.0) == 0.2
    assert p(1.5) == 0.2
    assert p(2.0) == 0.3
    assert p(50.0) == 0.3


def test_piecewise_constant_needs_increasing_times():
    with pytest.raises(ValueError):
        PiecewiseConstantParameter([2.0, 1.0])


def test_positive_transform():
    transform = PositiveTransform()
    raw = transform.inverse(np.array([0.5, 2.0]))
    np.testing.assert_allclose(transform.direct(raw), [0.5, 2.0])
    assert np.all(transform.direct(np.array([-50.0, 0.0, 3.0])) > 0.0)
    with pytest.raises(ValueError):
        transform.inverse(np.array([0.0]))


def test_identity_transform():
    x = np.array([-1.0, 2.0])
    np.testing.assert_array_equal(IdentityTransform().direct(x), x)
    np.testing.assert_array_equal(IdentityTransform().inverse(x), x)
