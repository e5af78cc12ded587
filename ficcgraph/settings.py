"""
Process-wide evaluation-date context.

Term structures with a moving reference date subscribe to the evaluation date
and recompute their reference date after it changes.
"""

import logging
from datetime import date, datetime
from typing import Optional, Union

from ficcgraph.patterns.observable import ObservableValue

logger = logging.getLogger(__name__)


class Settings:
    """Global settings; use the module-level ``settings`` instance."""

    def __init__(self):
        self._evaluation_date = ObservableValue(None)

    @property
    def evaluation_date(self) -> date:
        """Evaluation date, defaulting to today when never set."""
        value = self._evaluation_date.value
        return value if value is not None else date.today()

    @evaluation_date.setter
    def evaluation_date(self, value: Union[date, datetime]) -> None:
        if isinstance(value, datetime):
            value = value.date()
        logger.debug("Evaluation date set to %s", value)
        self._evaluation_date.set(value)

    def evaluation_date_observable(self) -> ObservableValue:
        """Observable notifying every time the evaluation date is assigned."""
        return self._evaluation_date

    def reset_evaluation_date(self) -> None:
        """Go back to the default (today)."""
        self._evaluation_date.set(None)

    def _raw_evaluation_date(self) -> Optional[date]:
        return self._evaluation_date.value


settings = Settings()


class SavedSettings:
    """Context manager restoring the evaluation date on exit.

    Example:
        >>> with SavedSettings():
        ...     settings.evaluation_date = date(2024, 1, 2)
        ...     # ... evaluation-date dependent code ...
    """

    def __init__(self, target: Settings = None):
        self._settings = target or settings
        self._saved = None

    def __enter__(self) -> "SavedSettings":
        self._saved = self._settings._raw_evaluation_date()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._settings._raw_evaluation_date() != self._saved:
            self._settings._evaluation_date.set(self._saved)
