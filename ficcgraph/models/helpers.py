"""
Calibration helpers: market instruments repriced by the model under calibration.
"""

import logging
from abc import abstractmethod
from enum import Enum
from typing import Any, Optional, Union

from ficcgraph.patterns.handle import Handle, as_handle
from ficcgraph.patterns.observable import Observable, Observer
from ficcgraph.quotes import Quote, SimpleQuote

logger = logging.getLogger(__name__)


class CalibrationErrorType(Enum):
    """How a helper turns model and market values into a residual."""

    PRICE_ERROR = "PRICE_ERROR"
    RELATIVE_PRICE_ERROR = "RELATIVE_PRICE_ERROR"


class CalibrationHelper(Observer, Observable):
    """Couples a quoted market value with the model value of the same instrument.

    The helper observes its quote and the model it is attached to, and
    forwards their notifications.

    Args:
        quote: Market value as a number, a quote or a handle to a quote
        error_type: Residual definition used by ``calibration_error``
    """

    def __init__(
        self,
        quote: Union[float, Quote, Handle],
        error_type: CalibrationErrorType = CalibrationErrorType.RELATIVE_PRICE_ERROR,
    ):
        Observer.__init__(self)
        Observable.__init__(self)
        if isinstance(quote, (int, float)):
            quote = SimpleQuote(quote)
        self._quote = as_handle(quote)
        self._error_type = error_type
        self._model = None
        self.register_with(self._quote)

    def quote(self) -> Handle:
        return self._quote

    def error_type(self) -> CalibrationErrorType:
        return self._error_type

    def market_value(self) -> float:
        return self._quote.current_link().value()

    def model(self) -> Any:
        if self._model is None:
            raise ValueError(f"{self!r} has no model set")
        return self._model

    def set_model(self, model: Optional[Any]) -> None:
        """Attach the model used by ``model_value`` and observe it."""
        if model is self._model:
            return
        if self._model is not None:
            self.unregister_with(self._model)
        self._model = model
        self.register_with(model)
        self.notify_observers()

    @abstractmethod
    def model_value(self) -> float:
        """Value of the instrument under the current model parameters."""
        pass

    def calibration_error(self) -> float:
        """Signed residual of the model value against the market value."""
        market = self.market_value()
        model = self.model_value()
        if self._error_type is CalibrationErrorType.PRICE_ERROR:
            return model - market
        if market == 0.0:
            raise ValueError(f"{self!r}: relative error undefined for a zero market value")
        return (model - market) / market

    def update(self) -> None:
        self.notify_observers()


class DiscountBondHelper(CalibrationHelper):
    """Zero-coupon bond paying 1 at ``maturity`` (in years from the model's time zero).

    Example:
        >>> helper = DiscountBondHelper(5.0, 0.78)
        >>> helper.set_model(model)
        >>> helper.calibration_error()
    """

    def __init__(
        self,
        maturity: float,
        price: Union[float, Quote, Handle],
        error_type: CalibrationErrorType = CalibrationErrorType.RELATIVE_PRICE_ERROR,
    ):
        if maturity <= 0.0:
            raise ValueError(f"non-positive bond maturity {maturity}")
        super().__init__(price, error_type)
        self._maturity = float(maturity)

    def maturity(self) -> float:
        return self._maturity

    def model_value(self) -> float:
        return self.model().discount(self._maturity)

    def __repr__(self) -> str:
        return f"DiscountBondHelper({self._maturity})"
