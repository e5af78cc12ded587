"""
Constraints, end criteria and optimizer adapters.
"""

import numpy as np
import pytest

from ficcgraph.optimization import (
    BoundaryConstraint,
    CostFunction,
    EndCriteria,
    EndCriteriaType,
    InfeasibleParametersError,
    LevenbergMarquardt,
    NoConstraint,
    PositiveConstraint,
    Simplex,
)


class Rosenbrock(CostFunction):
    def values(self, x):
        return np.array([10.0 * (x[1] - x[0] ** 2), 1.0 - x[0]])


class Shifted(CostFunction):
    """Residuals x - target."""

    def __init__(self, target):
        self.target = np.asarray(target, dtype=float)

    def values(self, x):
        return np.asarray(x, dtype=float) - self.target


def test_constraints():
    assert NoConstraint().test([-1.0, 5.0])
    assert PositiveConstraint().test([0.1, 2.0])
    assert not PositiveConstraint().test([0.1, 0.0])
    assert BoundaryConstraint(0.0, 1.0).test([0.0, 1.0])
    assert not BoundaryConstraint(0.0, 1.0).test([0.5, 1.5])


def test_constraint_conjunction():
    both = PositiveConstraint() & BoundaryConstraint(-1.0, 1.0)
    assert both([0.5])
    assert not both([-0.5])
    assert not both([1.5])


def test_boundary_constraint_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        BoundaryConstraint(1.0, 0.0)


def test_end_criteria_validation():
    with pytest.raises(ValueError):
        EndCriteria(max_iterations=0)
    with pytest.raises(ValueError):
        EndCriteria(max_iterations=10, max_stationary_state_iterations=20)


def test_succeeded_types():
    assert EndCriteria.succeeded(EndCriteriaType.STATIONARY_POINT)
    assert EndCriteria.succeeded(EndCriteriaType.ZERO_GRADIENT_NORM)
    assert not EndCriteria.succeeded(EndCriteriaType.MAX_ITERATIONS)
    assert not EndCriteria.succeeded(EndCriteriaType.NONE)


def test_cost_function_value_is_sum_of_squares():
    assert Shifted([1.0, 2.0]).value(np.array([2.0, 4.0])) == pytest.approx(5.0)


def test_levenberg_marquardt_minimizes_rosenbrock():
    result = LevenbergMarquardt().minimize(
        Rosenbrock(), NoConstraint(), [-1.2, 1.0], EndCriteria(1000, 100, 1e-10, 1e-10, 1e-10)
    )
    assert result.succeeded()
    np.testing.assert_allclose(result.x, [1.0, 1.0], atol=1e-6)
    assert result.value < 1e-12


def test_levenberg_marquardt_respects_iteration_cap():
    result = LevenbergMarquardt().minimize(
        Rosenbrock(), NoConstraint(), [-1.2, 1.0], EndCriteria(3, 2, 1e-15, 1e-15, 1e-15)
    )
    assert result.end_criteria_type is EndCriteriaType.MAX_ITERATIONS


def test_simplex_minimizes_quadratic():
    result = Simplex().minimize(
        Shifted([0.3, -0.2]), NoConstraint(), [0.0, 0.0], EndCriteria(5000, 100, 1e-10, 1e-12, 1e-12)
    )
    assert result.succeeded()
    np.testing.assert_allclose(result.x, [0.3, -0.2], atol=1e-5)


def test_simplex_stays_in_feasible_region():
    # unconstrained minimum at -1 lies outside the positive half-line
    result = Simplex().minimize(
        Shifted([-1.0]), PositiveConstraint(), [1.0], EndCriteria(2000, 50, 1e-10, 1e-12, 1e-12)
    )
    assert result.x[0] > 0.0


def test_infeasible_start_raises():
    with pytest.raises(InfeasibleParametersError):
        LevenbergMarquardt().minimize(
            Shifted([1.0]), PositiveConstraint(), [-1.0], EndCriteria()
        )
