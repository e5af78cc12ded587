"""
Optimization collaborators: constraints, end criteria and minimizers.
"""

from .constraint import (
    BoundaryConstraint,
    CompositeConstraint,
    Constraint,
    InfeasibleParametersError,
    NoConstraint,
    PositiveConstraint,
    SizeMismatchError,
)
from .end_criteria import EndCriteria, EndCriteriaType
from .methods import (
    CostFunction,
    LevenbergMarquardt,
    OptimizationMethod,
    OptimizationResult,
    Simplex,
)

__all__ = [
    "Constraint",
    "NoConstraint",
    "PositiveConstraint",
    "BoundaryConstraint",
    "CompositeConstraint",
    "SizeMismatchError",
    "InfeasibleParametersError",
    "EndCriteria",
    "EndCriteriaType",
    "CostFunction",
    "OptimizationMethod",
    "OptimizationResult",
    "LevenbergMarquardt",
    "Simplex",
]
