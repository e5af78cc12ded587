"""
Observer/observable notification graph.

Subjects keep weak back-references to their observers; observers keep strong
references to the subjects they watch. Notification is a synchronous push:
``notify_observers`` calls ``update`` on every registered observer, which may
in turn notify its own observers. The graph must be acyclic; this is not
checked at runtime.
"""

import logging
import weakref
from abc import ABC, abstractmethod
from typing import Any, List

logger = logging.getLogger(__name__)


class NotificationError(RuntimeError):
    """Raised when one or more observers failed while being notified."""


class Observable:
    """Object that notifies registered observers of changes."""

    def __init__(self):
        self._observers = weakref.WeakSet()

    def register_observer(self, observer: "Observer") -> None:
        self._observers.add(observer)

    def unregister_observer(self, observer: "Observer") -> None:
        self._observers.discard(observer)

    def observer_count(self) -> int:
        return len(self._observers)

    def notify_observers(self) -> None:
        """Call ``update`` on every registered observer.

        All observers are notified even if some of them fail; failures are
        collected and re-raised afterwards as a single NotificationError.
        """
        failures: List[str] = []
        # snapshot: observers may (un)register while being updated
        for observer in list(self._observers):
            try:
                observer.update()
            except Exception as exc:
                logger.error(
                    "Observer %r failed while notified by %r: %s", observer, self, exc
                )
                failures.append(f"{type(observer).__name__}: {exc}")
        if failures:
            raise NotificationError(
                "could not notify one or more observers: " + "; ".join(failures)
            )


class Observer(ABC):
    """Object that reacts to notifications from the observables it watches."""

    def __init__(self):
        self._observables = set()

    def register_with(self, subject: Any) -> None:
        """Start observing ``subject``; ``None`` is silently ignored."""
        if subject is None:
            return
        subject.register_observer(self)
        self._observables.add(subject)

    def unregister_with(self, subject: Any) -> None:
        if subject is None:
            return
        subject.unregister_observer(self)
        self._observables.discard(subject)

    def unregister_with_all(self) -> None:
        for subject in list(self._observables):
            subject.unregister_observer(self)
        self._observables.clear()

    def observables(self) -> List[Any]:
        return list(self._observables)

    @abstractmethod
    def update(self) -> None:
        """Called by the observed subjects when they change."""
        pass


class Flag(Observer):
    """Observer that raises a flag whenever it is notified."""

    def __init__(self, up: bool = False):
        super().__init__()
        self._up = up

    def raise_flag(self) -> None:
        self._up = True

    def lower(self) -> None:
        self._up = False

    def is_up(self) -> bool:
        return self._up

    def update(self) -> None:
        self.raise_flag()


class ObservableValue(Observable):
    """Value holder notifying its observers on every assignment."""

    def __init__(self, value: Any = None):
        super().__init__()
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def set(self, value: Any) -> None:
        self._value = value
        self.notify_observers()
