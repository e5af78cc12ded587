"""
Change-propagation substrate: observers, observables and handles.
"""

from .handle import Handle, NullReferenceError, RelinkableHandle, as_handle
from .observable import (
    Flag,
    NotificationError,
    Observable,
    ObservableValue,
    Observer,
)

__all__ = [
    "Observable",
    "Observer",
    "ObservableValue",
    "Flag",
    "NotificationError",
    "Handle",
    "RelinkableHandle",
    "NullReferenceError",
    "as_handle",
]
