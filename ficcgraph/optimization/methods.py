"""
Optimization methods.

The numerical algorithms come from scipy; these classes only adapt them to
the ``minimize(cost_function, constraint, initial_guess, end_criteria)``
contract used by model calibration. Candidates outside the constraint get a
penalty value instead of being evaluated.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from scipy import optimize

from .constraint import Constraint, InfeasibleParametersError
from .end_criteria import EndCriteria, EndCriteriaType

logger = logging.getLogger(__name__)

# value/residual returned for infeasible candidates
PENALTY = 1.0e10
# MINPACK rejects tolerances below machine epsilon
_EPS = float(np.finfo(float).eps)


class CostFunction(ABC):
    """Objective minimized by an optimization method."""

    @abstractmethod
    def values(self, x: np.ndarray) -> np.ndarray:
        """Residual vector at x."""
        pass

    def value(self, x: np.ndarray) -> float:
        """Scalar objective at x; sum of squared residuals by default."""
        residuals = self.values(x)
        return float(np.dot(residuals, residuals))


@dataclass
class OptimizationResult:
    """Outcome of a minimization.

    Attributes:
        x: Best parameter vector found
        end_criteria_type: Termination reason
        value: Objective at ``x``
        evaluations: Number of objective evaluations
    """

    x: np.ndarray
    end_criteria_type: EndCriteriaType
    value: float
    evaluations: int

    def succeeded(self) -> bool:
        return EndCriteria.succeeded(self.end_criteria_type)


class OptimizationMethod(ABC):
    """Black-box minimizer."""

    def minimize(
        self,
        cost_function: CostFunction,
        constraint: Constraint,
        initial_guess: Sequence[float],
        end_criteria: EndCriteria,
    ) -> OptimizationResult:
        x0 = np.asarray(initial_guess, dtype=float)
        if not constraint.test(x0):
            raise InfeasibleParametersError(f"initial guess {x0} violates {constraint!r}")
        logger.debug("%s starting from %s", type(self).__name__, x0)
        result = self._minimize(cost_function, constraint, x0, end_criteria)
        logger.debug(
            "%s stopped (%s) after %s evaluations, value %s",
            type(self).__name__,
            result.end_criteria_type.name,
            result.evaluations,
            result.value,
        )
        return result

    @abstractmethod
    def _minimize(
        self,
        cost_function: CostFunction,
        constraint: Constraint,
        x0: np.ndarray,
        end_criteria: EndCriteria,
    ) -> OptimizationResult:
        pass


# scipy least_squares status codes
_LEAST_SQUARES_STATUS = {
    0: EndCriteriaType.MAX_ITERATIONS,
    1: EndCriteriaType.ZERO_GRADIENT_NORM,
    2: EndCriteriaType.STATIONARY_FUNCTION_VALUE,
    3: EndCriteriaType.STATIONARY_POINT,
    4: EndCriteriaType.STATIONARY_POINT,
}


class LevenbergMarquardt(OptimizationMethod):
    """Least-squares minimization of the residual vector (scipy ``least_squares``).

    Args:
        method: scipy algorithm; ``"lm"`` is MINPACK's Levenberg-Marquardt,
            ``"trf"`` a trust-region variant that also works with fewer
            residuals than parameters
    """

    def __init__(self, method: str = "lm"):
        self.method = method

    def _minimize(self, cost_function, constraint, x0, end_criteria) -> OptimizationResult:
        n_residuals = len(cost_function.values(x0))

        def residuals(x: np.ndarray) -> np.ndarray:
            if not constraint.test(x):
                return np.full(n_residuals, PENALTY)
            return np.asarray(cost_function.values(x), dtype=float)

        res = optimize.least_squares(
            residuals,
            x0,
            method=self.method,
            xtol=max(end_criteria.root_epsilon, _EPS),
            ftol=max(end_criteria.function_epsilon, _EPS),
            gtol=max(end_criteria.gradient_norm_epsilon, _EPS),
            max_nfev=end_criteria.max_iterations,
        )
        reason = _LEAST_SQUARES_STATUS.get(res.status, EndCriteriaType.UNKNOWN)
        return OptimizationResult(
            x=np.asarray(res.x, dtype=float),
            end_criteria_type=reason,
            value=float(cost_function.value(res.x)),
            evaluations=int(res.nfev),
        )


class Simplex(OptimizationMethod):
    """Nelder-Mead downhill simplex on the scalar objective.

    Stops early once the best value has not improved by more than
    ``function_epsilon`` for ``max_stationary_state_iterations`` iterations.
    """

    def _minimize(self, cost_function, constraint, x0, end_criteria) -> OptimizationResult:
        def objective(x: np.ndarray) -> float:
            if not constraint.test(x):
                return PENALTY
            return cost_function.value(x)

        state = {"best": np.inf, "stationary": 0, "stopped": False}

        def callback(intermediate_result):
            fun = float(intermediate_result.fun)
            if state["best"] - fun > end_criteria.function_epsilon:
                state["best"] = fun
                state["stationary"] = 0
                return
            state["stationary"] += 1
            if state["stationary"] >= end_criteria.max_stationary_state_iterations:
                state["stopped"] = True
                raise StopIteration

        res = optimize.minimize(
            objective,
            x0,
            method="Nelder-Mead",
            callback=callback,
            options={
                "maxiter": end_criteria.max_iterations,
                "xatol": end_criteria.root_epsilon,
                "fatol": end_criteria.function_epsilon,
            },
        )
        if state["stopped"]:
            reason = EndCriteriaType.STATIONARY_FUNCTION_VALUE
        elif res.status == 0:
            reason = EndCriteriaType.STATIONARY_POINT
        elif res.status in (1, 2):
            reason = EndCriteriaType.MAX_ITERATIONS
        else:
            reason = EndCriteriaType.UNKNOWN
        return OptimizationResult(
            x=np.asarray(res.x, dtype=float),
            end_criteria_type=reason,
            value=float(res.fun),
            evaluations=int(res.nfev),
        )
