"""
Term structures: base classes, concrete curves and curve decorators.

Decorators (implied, spreaded, composite) hold handles to their inputs and
observe them, so relinking a handle or moving a quote propagates to every
curve built on top.
"""

from .base import TermStructure
from .composite import CompositeZeroYieldStructure
from .flat import FlatForward
from .implied import ImpliedTermStructure
from .interpolated import (
    ForwardCurve,
    InterpolatedDiscountCurve,
    InterpolatedForwardCurve,
    InterpolatedZeroCurve,
    discounts_from_zero_rates,
)
from .spreaded import ForwardSpreadedTermStructure, ZeroSpreadedTermStructure
from .yield_curve import (
    DT,
    ForwardRateStructure,
    YieldTermStructure,
    ZeroYieldStructure,
)

__all__ = [
    "TermStructure",
    "YieldTermStructure",
    "ZeroYieldStructure",
    "ForwardRateStructure",
    "DT",
    "FlatForward",
    "ForwardCurve",
    "InterpolatedDiscountCurve",
    "InterpolatedForwardCurve",
    "InterpolatedZeroCurve",
    "discounts_from_zero_rates",
    "ImpliedTermStructure",
    "ForwardSpreadedTermStructure",
    "ZeroSpreadedTermStructure",
    "CompositeZeroYieldStructure",
]
