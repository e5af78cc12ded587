"""
Feasible regions for parameter vectors.

Constraints compose conjunctively with ``&``.
"""

from typing import Sequence

import numpy as np


class SizeMismatchError(ValueError):
    """Raised when a parameter vector does not have the expected length."""


class InfeasibleParametersError(ValueError):
    """Raised when a starting parameter vector violates its constraint."""


class Constraint:
    """Predicate over a parameter vector; the base class accepts everything."""

    def test(self, params: Sequence[float]) -> bool:
        return True

    def __call__(self, params: Sequence[float]) -> bool:
        return self.test(params)

    def __and__(self, other: "Constraint") -> "Constraint":
        return CompositeConstraint(self, other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NoConstraint(Constraint):
    """Every vector is feasible."""


class PositiveConstraint(Constraint):
    """Every component strictly positive."""

    def test(self, params: Sequence[float]) -> bool:
        return bool(np.all(np.asarray(params, dtype=float) > 0.0))


class BoundaryConstraint(Constraint):
    """Every component within [low, high]."""

    def __init__(self, low: float, high: float):
        if low > high:
            raise ValueError(f"lower bound {low} above upper bound {high}")
        self.low = low
        self.high = high

    def test(self, params: Sequence[float]) -> bool:
        x = np.asarray(params, dtype=float)
        return bool(np.all((x >= self.low) & (x <= self.high)))

    def __repr__(self) -> str:
        return f"BoundaryConstraint({self.low}, {self.high})"


class CompositeConstraint(Constraint):
    """Conjunction of two constraints."""

    def __init__(self, first: Constraint, second: Constraint):
        self.first = first
        self.second = second

    def test(self, params: Sequence[float]) -> bool:
        return self.first.test(params) and self.second.test(params)

    def __repr__(self) -> str:
        return f"({self.first!r} & {self.second!r})"
