"""
Calibrated models, calibration helpers and the calibration cost function.
"""

from .calibration import CalibrationFunction, RawConstraint, calibration_report
from .curves import ModelImpliedCurve
from .helpers import CalibrationErrorType, CalibrationHelper, DiscountBondHelper
from .model import (
    AffineModel,
    CalibratedModel,
    OptionType,
    PrivateConstraint,
    TermStructureConsistentModel,
)
from .nelson_siegel import NelsonSiegelModel
from .parameter import (
    ConstantParameter,
    IdentityTransform,
    NullParameter,
    Parameter,
    ParameterTransform,
    PiecewiseConstantParameter,
    PositiveTransform,
)
from .vasicek import Vasicek, black_formula

__all__ = [
    "Parameter",
    "ConstantParameter",
    "NullParameter",
    "PiecewiseConstantParameter",
    "ParameterTransform",
    "IdentityTransform",
    "PositiveTransform",
    "CalibratedModel",
    "PrivateConstraint",
    "AffineModel",
    "TermStructureConsistentModel",
    "OptionType",
    "Vasicek",
    "black_formula",
    "NelsonSiegelModel",
    "CalibrationHelper",
    "CalibrationErrorType",
    "DiscountBondHelper",
    "CalibrationFunction",
    "RawConstraint",
    "calibration_report",
    "ModelImpliedCurve",
]
