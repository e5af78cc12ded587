"""
Observable market quotes.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ficcgraph.patterns.observable import Observable

logger = logging.getLogger(__name__)


class Quote(Observable, ABC):
    """Observable scalar market value."""

    @abstractmethod
    def value(self) -> float:
        pass

    @abstractmethod
    def is_valid(self) -> bool:
        pass


class SimpleQuote(Quote):
    """Quote whose value is set externally (test harness, market feed)."""

    def __init__(self, value: Optional[float] = None):
        super().__init__()
        self._value = None if value is None else float(value)

    def value(self) -> float:
        if self._value is None:
            raise ValueError("invalid SimpleQuote: no value set")
        return self._value

    def is_valid(self) -> bool:
        return self._value is not None

    def set_value(self, value: Optional[float] = None) -> float:
        """Set a new value and notify observers if it changed.

        Returns:
            The difference between the new and the old value (0.0 when
            either is unset)
        """
        new = None if value is None else float(value)
        diff = 0.0
        if new is not None and self._value is not None:
            diff = new - self._value
        if new != self._value:
            logger.debug("Quote %r: %s -> %s", self, self._value, new)
            self._value = new
            self.notify_observers()
        return diff

    def reset(self) -> None:
        self.set_value(None)

    def __repr__(self) -> str:
        return f"SimpleQuote({self._value})"
