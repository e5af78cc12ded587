"""
Calibrated models.

A calibrated model exposes its parameter blocks as one flat vector; the
calibration engine writes candidate vectors into it and reprices a set of
helpers until the model matches their market values.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, List, Optional, Sequence, Union

import numpy as np

from ficcgraph.optimization.constraint import (
    Constraint,
    InfeasibleParametersError,
    NoConstraint,
    SizeMismatchError,
)
from ficcgraph.optimization.end_criteria import EndCriteria, EndCriteriaType
from ficcgraph.optimization.methods import OptimizationMethod
from ficcgraph.patterns.handle import Handle, as_handle
from ficcgraph.patterns.observable import Observable, Observer

from .calibration import CalibrationFunction, RawConstraint
from .helpers import CalibrationHelper
from .parameter import Parameter

logger = logging.getLogger(__name__)


class OptionType(Enum):
    CALL = 1
    PUT = -1


class PrivateConstraint(Constraint):
    """Each parameter block tested on its own slice of the vector."""

    def __init__(self, arguments: Sequence[Parameter]):
        self._arguments = list(arguments)

    def test(self, params: Sequence[float]) -> bool:
        params = np.asarray(params, dtype=float)
        total = sum(p.size() for p in self._arguments)
        if len(params) != total:
            raise SizeMismatchError(f"expected {total} parameters, got {len(params)}")
        start = 0
        for argument in self._arguments:
            size = argument.size()
            if not argument.test_params(params[start:start + size]):
                return False
            start += size
        return True


class CalibratedModel(Observer, Observable):
    """Model with parameters that can be fitted to market instruments.

    Args:
        arguments: Ordered parameter blocks; the flat parameter vector is
            their concatenation
    """

    def __init__(self, arguments: Sequence[Parameter]):
        Observer.__init__(self)
        Observable.__init__(self)
        self._arguments: List[Parameter] = list(arguments)
        self._end_criteria = EndCriteriaType.NONE
        self._problem_values = np.zeros(0)
        self._function_evaluations = 0

    def arguments(self) -> List[Parameter]:
        return list(self._arguments)

    def params(self) -> np.ndarray:
        """Concatenated values of all parameter blocks."""
        blocks = [p.params for p in self._arguments]
        return np.concatenate(blocks) if blocks else np.zeros(0)

    def set_params(self, params: Sequence[float]) -> None:
        """Distribute ``params`` over the parameter blocks and notify observers."""
        params = np.asarray(params, dtype=float)
        total = sum(p.size() for p in self._arguments)
        if len(params) != total:
            raise SizeMismatchError(
                f"{type(self).__name__} has {total} parameters, got {len(params)}"
            )
        start = 0
        for argument in self._arguments:
            size = argument.size()
            argument.set_params(params[start:start + size])
            start += size
        logger.debug("%s parameters set to %s", type(self).__name__, params)
        self._generate_arguments()
        self.notify_observers()

    def _generate_arguments(self) -> None:
        """Refresh state derived from the parameters; nothing by default."""
        pass

    def update(self) -> None:
        self._generate_arguments()
        self.notify_observers()

    def constraint(self) -> Constraint:
        return PrivateConstraint(self._arguments)

    def calibrate(
        self,
        helpers: Sequence[CalibrationHelper],
        method: OptimizationMethod,
        end_criteria: EndCriteria,
        constraint: Optional[Constraint] = None,
        weights: Optional[Sequence[float]] = None,
    ) -> EndCriteriaType:
        """Fit the parameters to the helpers' market values.

        The objective is the weighted sum of squared calibration errors. The
        search is restricted to vectors passing both the model's own
        constraint and ``constraint``. On return the parameters are set to
        the best vector found, whatever the termination reason.

        Args:
            helpers: Instruments to fit; each is attached to this model
            method: Optimizer
            end_criteria: Stopping policy handed to the optimizer
            constraint: Additional constraint on the parameter vector
            weights: One weight per helper (all ones by default)

        Returns:
            The optimizer's termination reason, also available through
            ``end_criteria()``

        Raises:
            InfeasibleParametersError: If the current parameters violate the
                combined constraint
            SizeMismatchError: If the weights do not match the helpers
        """
        combined = self.constraint() & (constraint if constraint is not None else NoConstraint())
        start = self.params()
        if not combined.test(start):
            raise InfeasibleParametersError(
                f"{type(self).__name__} starting parameters {start} violate {combined!r}"
            )
        for helper in helpers:
            helper.set_model(self)
        function = CalibrationFunction(self, helpers, weights)

        logger.info(
            "Calibrating %s to %d helpers with %s",
            type(self).__name__,
            len(function.helpers),
            type(method).__name__,
        )
        result = method.minimize(
            function, RawConstraint(combined, function), function.to_raw(start), end_criteria
        )
        self.set_params(function.to_internal(result.x))
        self._problem_values = function.residuals()
        self._end_criteria = result.end_criteria_type
        self._function_evaluations = result.evaluations

        if not EndCriteria.succeeded(result.end_criteria_type):
            logger.warning(
                "Calibration of %s stopped without converging (%s)",
                type(self).__name__,
                result.end_criteria_type.name,
            )
        logger.info(
            "Calibrated %s: params %s, cost %s, %d evaluations",
            type(self).__name__,
            self.params(),
            result.value,
            result.evaluations,
        )
        return result.end_criteria_type

    def end_criteria(self) -> EndCriteriaType:
        """Termination reason of the last calibration."""
        return self._end_criteria

    def problem_values(self) -> np.ndarray:
        """Weighted residuals at the end of the last calibration."""
        return self._problem_values.copy()

    def function_evaluations(self) -> int:
        return self._function_evaluations

    def value(
        self,
        params: Sequence[float],
        helpers: Sequence[CalibrationHelper],
        weights: Optional[Sequence[float]] = None,
    ) -> float:
        """Calibration objective at ``params``; the current parameters are restored."""
        saved = self.params()
        for helper in helpers:
            helper.set_model(self)
        function = CalibrationFunction(self, helpers, weights)
        try:
            return function.value(function.to_raw(params))
        finally:
            self.set_params(saved)


class AffineModel(ABC):
    """Model with closed-form discount bonds and bond options."""

    @abstractmethod
    def discount(self, t: float) -> float:
        """Model discount factor from 0 to t."""
        pass

    @abstractmethod
    def discount_bond(self, now: float, maturity: float, factors: Sequence[float]) -> float:
        pass

    @abstractmethod
    def discount_bond_option(
        self, option_type: OptionType, strike: float, maturity: float, bond_maturity: float
    ) -> float:
        pass


class TermStructureConsistentModel(Observer, Observable):
    """Model fitted exactly to a yield curve held through a handle.

    The model observes the handle, so relinking it or changing the linked
    curve notifies the model's observers. When combined with
    ``CalibratedModel``, initialise this base after it.

    Args:
        term_structure: Curve, or handle to the curve, the model reproduces
    """

    def __init__(self, term_structure: Union[Handle, Any]):
        Observer.__init__(self)
        Observable.__init__(self)
        self._term_structure = as_handle(term_structure)
        self.register_with(self._term_structure)

    def term_structure(self) -> Handle:
        return self._term_structure

    def update(self) -> None:
        self.notify_observers()
