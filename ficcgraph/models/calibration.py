"""
Calibration cost function and diagnostics.

``CalibrationFunction`` carries everything the optimizer needs to reprice a
candidate: the model, the helpers, the weights and the per-block transforms
between raw optimizer values and model parameters. Nothing is captured
implicitly.
"""

from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ficcgraph.optimization.constraint import Constraint, SizeMismatchError
from ficcgraph.optimization.methods import CostFunction

from .helpers import CalibrationHelper
from .parameter import ParameterTransform

if TYPE_CHECKING:
    from .model import CalibratedModel


class CalibrationFunction(CostFunction):
    """Weighted model-vs-market residuals as a function of raw parameters.

    Args:
        model: Model whose parameters are set on every evaluation
        helpers: Instruments repriced on every evaluation
        weights: One non-negative weight per helper; all ones by default
    """

    def __init__(
        self,
        model: "CalibratedModel",
        helpers: Sequence[CalibrationHelper],
        weights: Optional[Sequence[float]] = None,
    ):
        self.model = model
        self.helpers = list(helpers)
        if not self.helpers:
            raise ValueError("no calibration helpers given")
        if weights is None:
            weights = np.ones(len(self.helpers))
        self.weights = np.asarray(weights, dtype=float)
        if len(self.weights) != len(self.helpers):
            raise SizeMismatchError(
                f"{len(self.weights)} weights given for {len(self.helpers)} helpers"
            )
        if np.any(self.weights < 0.0):
            raise ValueError("calibration weights must be non-negative")
        self.transforms: List[Tuple[int, ParameterTransform]] = [
            (p.size(), p.transform()) for p in model.arguments()
        ]
        self._sqrt_weights = np.sqrt(self.weights)

    def to_internal(self, raw: Sequence[float]) -> np.ndarray:
        """Map a raw optimizer vector to model parameters."""
        return self._apply(raw, inverse=False)

    def to_raw(self, params: Sequence[float]) -> np.ndarray:
        """Map model parameters to a raw optimizer vector."""
        return self._apply(params, inverse=True)

    def _apply(self, x: Sequence[float], inverse: bool) -> np.ndarray:
        x = np.asarray(x, dtype=float)
        total = sum(size for size, _ in self.transforms)
        if len(x) != total:
            raise SizeMismatchError(f"expected {total} values, got {len(x)}")
        blocks = []
        start = 0
        for size, transform in self.transforms:
            chunk = x[start:start + size]
            blocks.append(transform.inverse(chunk) if inverse else transform.direct(chunk))
            start += size
        return np.concatenate(blocks) if blocks else np.zeros(0)

    def values(self, x: np.ndarray) -> np.ndarray:
        self.model.set_params(self.to_internal(x))
        return self.residuals()

    def residuals(self) -> np.ndarray:
        """Weighted errors of the helpers at the model's current parameters."""
        errors = np.array([h.calibration_error() for h in self.helpers])
        return self._sqrt_weights * errors

    def value(self, x: np.ndarray) -> float:
        residuals = self.values(x)
        return float(np.dot(residuals, residuals))


class RawConstraint(Constraint):
    """Constraint on model parameters, tested on raw optimizer vectors."""

    def __init__(self, constraint: Constraint, function: CalibrationFunction):
        self.constraint = constraint
        self.function = function

    def test(self, params: Sequence[float]) -> bool:
        internal = self.function.to_internal(params)
        if not np.all(np.isfinite(internal)):
            return False
        return self.constraint.test(internal)

    def __repr__(self) -> str:
        return f"RawConstraint({self.constraint!r})"


def calibration_report(helpers: Sequence[CalibrationHelper]) -> pd.DataFrame:
    """Market value, model value and residual of each helper.

    Example:
        >>> model.calibrate(helpers, LevenbergMarquardt(), EndCriteria())
        >>> calibration_report(helpers)
                          helper  market_value  model_value         error
        0  DiscountBondHelper(1.0)      0.961     0.961002  2.081165e-06
    """
    rows = [
        {
            "helper": repr(h),
            "market_value": h.market_value(),
            "model_value": h.model_value(),
            "error": h.calibration_error(),
        }
        for h in helpers
    ]
    return pd.DataFrame(rows, columns=["helper", "market_value", "model_value", "error"])
