"""
Optimizer stopping policy and termination reasons.
"""

from dataclasses import dataclass
from enum import Enum


class EndCriteriaType(Enum):
    """Why an optimization stopped."""

    NONE = "NONE"
    MAX_ITERATIONS = "MAX_ITERATIONS"
    STATIONARY_POINT = "STATIONARY_POINT"
    STATIONARY_FUNCTION_VALUE = "STATIONARY_FUNCTION_VALUE"
    STATIONARY_FUNCTION_ACCURACY = "STATIONARY_FUNCTION_ACCURACY"
    ZERO_GRADIENT_NORM = "ZERO_GRADIENT_NORM"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class EndCriteria:
    """Convergence and iteration-limit policy handed to an optimizer.

    Attributes:
        max_iterations: Hard cap on iterations
        max_stationary_state_iterations: Iterations without improvement
            of the function value (within ``function_epsilon``) before
            stopping
        root_epsilon: Tolerance on the parameter step
        function_epsilon: Tolerance on the function value
        gradient_norm_epsilon: Tolerance on the gradient norm
    """

    max_iterations: int = 1000
    max_stationary_state_iterations: int = 100
    root_epsilon: float = 1e-8
    function_epsilon: float = 1e-8
    gradient_norm_epsilon: float = 1e-8

    def __post_init__(self):
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be positive")
        if not 1 < self.max_stationary_state_iterations <= self.max_iterations:
            raise ValueError(
                "max_stationary_state_iterations must be in (1, max_iterations], "
                f"got {self.max_stationary_state_iterations}"
            )
        if self.root_epsilon < 0 or self.function_epsilon < 0 or self.gradient_norm_epsilon < 0:
            raise ValueError("epsilons must be non-negative")

    @staticmethod
    def succeeded(end_criteria_type: EndCriteriaType) -> bool:
        """True when the optimizer stopped because it converged."""
        return end_criteria_type in (
            EndCriteriaType.STATIONARY_POINT,
            EndCriteriaType.STATIONARY_FUNCTION_VALUE,
            EndCriteriaType.STATIONARY_FUNCTION_ACCURACY,
            EndCriteriaType.ZERO_GRADIENT_NORM,
        )
