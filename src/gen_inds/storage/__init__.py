"""Slot storage: the generational allocator and its errors."""

from gen_inds.storage.allocator import GenerationalAllocator, SlotRef
from gen_inds.storage.errors import (
    DoubleFreeError,
    DoubleFreeWarning,
    ErrorKind,
    GenIndexError,
    InternalError,
    NotFoundError,
    OverwriteEmptyError,
    StaleHandleError,
)

__all__ = [
    "GenerationalAllocator",
    "SlotRef",
    # Errors
    "ErrorKind",
    "GenIndexError",
    "NotFoundError",
    "StaleHandleError",
    "OverwriteEmptyError",
    "DoubleFreeError",
    "InternalError",
    "DoubleFreeWarning",
]
