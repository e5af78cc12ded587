"""
Model parameters (argument blocks).

A parameter owns a slice of a model's flat parameter vector, a constraint on
that slice and a transform between the optimizer's raw representation and
the internal values the model reads.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

import numpy as np

from ficcgraph.optimization.constraint import Constraint, NoConstraint, SizeMismatchError


class ParameterTransform:
    """Map between raw (optimizer) and internal (model) values; identity here."""

    def direct(self, raw: np.ndarray) -> np.ndarray:
        """Raw values to internal values."""
        return np.asarray(raw, dtype=float)

    def inverse(self, values: np.ndarray) -> np.ndarray:
        """Internal values to raw values."""
        return np.asarray(values, dtype=float)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IdentityTransform(ParameterTransform):
    pass


class PositiveTransform(ParameterTransform):
    """Internal value ``exp(raw)``; keeps a positive parameter positive during a search."""

    def direct(self, raw: np.ndarray) -> np.ndarray:
        return np.exp(np.asarray(raw, dtype=float))

    def inverse(self, values: np.ndarray) -> np.ndarray:
        values = np.asarray(values, dtype=float)
        if np.any(values <= 0.0):
            raise ValueError(f"PositiveTransform needs positive values, got {values}")
        return np.log(values)


class Parameter(ABC):
    """Block of model parameters.

    Args:
        size: Number of scalar values in the block
        constraint: Feasible region for the block's own values
        transform: Raw/internal mapping used during calibration
        name: Label used in logs and reports
    """

    def __init__(
        self,
        size: int,
        constraint: Optional[Constraint] = None,
        transform: Optional[ParameterTransform] = None,
        name: str = "",
    ):
        if size < 0:
            raise ValueError(f"negative parameter size {size}")
        self._params = np.zeros(size)
        self._constraint = constraint if constraint is not None else NoConstraint()
        self._transform = transform if transform is not None else IdentityTransform()
        self.name = name

    @property
    def params(self) -> np.ndarray:
        return self._params.copy()

    def size(self) -> int:
        return len(self._params)

    def constraint(self) -> Constraint:
        return self._constraint

    def transform(self) -> ParameterTransform:
        return self._transform

    def set_param(self, i: int, x: float) -> None:
        self._params[i] = x

    def set_params(self, values: Sequence[float]) -> None:
        values = np.asarray(values, dtype=float)
        if len(values) != self.size():
            raise SizeMismatchError(
                f"parameter {self.name or type(self).__name__} has size {self.size()}, "
                f"got {len(values)} values"
            )
        self._params = values.copy()

    def test_params(self, values: Sequence[float]) -> bool:
        """Whether ``values`` is a feasible value for this block."""
        values = np.asarray(values, dtype=float)
        if len(values) != self.size():
            raise SizeMismatchError(
                f"parameter {self.name or type(self).__name__} has size {self.size()}, "
                f"tested with {len(values)} values"
            )
        return self._constraint.test(values)

    @abstractmethod
    def __call__(self, t: float) -> float:
        """Value of the parameter at time t."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self._params.tolist()})"


class ConstantParameter(Parameter):
    """Single time-independent value."""

    def __init__(
        self,
        value: float,
        constraint: Optional[Constraint] = None,
        transform: Optional[ParameterTransform] = None,
        name: str = "",
    ):
        super().__init__(1, constraint, transform, name)
        self._params[0] = value
        if not self.test_params(self._params):
            raise ValueError(f"{value}: invalid value for {name or 'parameter'}")

    def __call__(self, t: float) -> float:
        return float(self._params[0])


class NullParameter(Parameter):
    """Parameter fixed at zero; contributes nothing to the parameter vector."""

    def __init__(self, name: str = ""):
        super().__init__(0, NoConstraint(), name=name)

    def __call__(self, t: float) -> float:
        return 0.0


class PiecewiseConstantParameter(Parameter):
    """Step function of time.

    With breakpoints ``t_0 < ... < t_{n-1}`` the block holds n + 1 values:
    value ``i`` applies on ``[t_{i-1}, t_i)`` and the last one from
    ``t_{n-1}`` on.
    """

    def __init__(
        self,
        times: Sequence[float],
        constraint: Optional[Constraint] = None,
        transform: Optional[ParameterTransform] = None,
        name: str = "",
    ):
        times = [float(t) for t in times]
        if any(t2 <= t1 for t1, t2 in zip(times, times[1:])):
            raise ValueError(f"breakpoints must be strictly increasing: {times}")
        super().__init__(len(times) + 1, constraint, transform, name)
        self._times = times

    def times(self):
        return list(self._times)

    def __call__(self, t: float) -> float:
        for i, breakpoint in enumerate(self._times):
            if t < breakpoint:
                return float(self._params[i])
        return float(self._params[-1])
