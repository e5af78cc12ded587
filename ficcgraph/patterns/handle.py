"""
Observable indirection to a possibly-absent shared object.

A handle owns a link; observers of the handle register with the link. The
link itself observes the current target (when asked to), so changes of the
target and rebinds of the handle both reach the handle's observers.
"""

import logging
from typing import Any, Generic, Optional, TypeVar

from .observable import Observable, Observer

T = TypeVar("T")

logger = logging.getLogger(__name__)


class NullReferenceError(RuntimeError):
    """Raised when reading through an empty handle."""


def _is_observable(target: Any) -> bool:
    return target is not None and hasattr(target, "register_observer")


class _Link(Observable, Observer):
    """Slot shared by all copies of a handle."""

    def __init__(self, target: Any, register_as_observer: bool):
        Observable.__init__(self)
        Observer.__init__(self)
        self._target = None
        self._is_observer = False
        self.link_to(target, register_as_observer)

    def link_to(self, target: Any, register_as_observer: bool) -> None:
        if target is not self._target or self._is_observer != register_as_observer:
            if self._target is not None and self._is_observer:
                self.unregister_with(self._target)
            self._target = target
            self._is_observer = register_as_observer
            if self._is_observer and _is_observable(target):
                self.register_with(target)
        self.notify_observers()

    @property
    def target(self) -> Any:
        return self._target

    def update(self) -> None:
        self.notify_observers()


class Handle(Generic[T]):
    """Observable reference to an optional shared object.

    Args:
        target: Object to refer to; ``None`` gives an empty handle
        register_as_observer: Forward the target's own notifications
            to observers of the handle
    """

    def __init__(self, target: Optional[T] = None, register_as_observer: bool = True):
        self._link = _Link(target, register_as_observer)

    def current_link(self) -> T:
        """Return the target, raising NullReferenceError if the handle is empty."""
        target = self._link.target
        if target is None:
            raise NullReferenceError("empty Handle cannot be dereferenced")
        return target

    def is_empty(self) -> bool:
        return self._link.target is None

    # observers of a handle watch its link
    def register_observer(self, observer: Observer) -> None:
        self._link.register_observer(observer)

    def unregister_observer(self, observer: Observer) -> None:
        self._link.unregister_observer(observer)

    def notify_observers(self) -> None:
        self._link.notify_observers()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._link.target!r})"


class RelinkableHandle(Handle[T]):
    """Handle whose target can be replaced after construction."""

    def link_to(self, target: Optional[T] = None, register_as_observer: bool = True) -> None:
        """Rebind the handle and notify its observers.

        Observers are notified whether or not the old or new target is empty.
        """
        logger.debug("Relinking %r to %r", self, target)
        self._link.link_to(target, register_as_observer)


def as_handle(obj: Any) -> Handle:
    """Wrap ``obj`` in a Handle unless it already is one."""
    if isinstance(obj, Handle):
        return obj
    return Handle(obj)
