"""
Yield curve backed by a model's discount function.
"""

from datetime import date
from typing import Any, Optional, Union

from ficcgraph.conventions.calendars import Calendar
from ficcgraph.conventions.daycount import DayCountConvention
from ficcgraph.termstructures.yield_curve import YieldTermStructure


class ModelImpliedCurve(YieldTermStructure):
    """Curve reading ``discount(t)`` from a model.

    The curve observes the model, so a recalibration (or any parameter
    change) reaches every curve and decorator built on top of it.

    Args:
        model: Object with ``discount(t)``; observed when it is observable
        day_counter: Convention turning dates into model times
        reference_date: Date corresponding to model time 0
        settlement_days: Makes the reference date move with the evaluation date
        calendar: Calendar for ``settlement_days``
    """

    def __init__(
        self,
        model: Any,
        day_counter: Union[str, DayCountConvention],
        reference_date: Optional[date] = None,
        settlement_days: Optional[int] = None,
        calendar: Union[str, Calendar, None] = None,
    ):
        super().__init__(day_counter, reference_date, settlement_days, calendar)
        self._model = model
        if hasattr(model, "register_observer"):
            self.register_with(model)

    def model(self) -> Any:
        return self._model

    def _discount_impl(self, t: float) -> float:
        return self._model.discount(t)
