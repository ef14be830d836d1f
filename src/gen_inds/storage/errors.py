"""Allocator error taxonomy.

Every failure raised by GenerationalAllocator is a GenIndexError carrying the
ErrorKind and the handle that triggered it.

Usage:
    try:
        allocator.deallocate(handle)
    except StaleHandleError:
        handle = refetch()
"""

from __future__ import annotations

from enum import Enum, auto

from gen_inds.core.identity import GenIndex


class ErrorKind(Enum):
    """Why an allocator operation could not be honored."""

    NOT_FOUND = auto()
    """Handle index is outside the slot table."""

    STALE_HANDLE = auto()
    """Index is in range but the slot has moved on to another generation."""

    OVERWRITE_EMPTY = auto()
    """set() against a valid but vacant slot."""

    DOUBLE_FREE = auto()
    """deallocate() of an already vacant slot while double_free="error"."""

    INTERNAL = auto()
    """Free-list and slot table disagree. Indicates a bug in the allocator."""


class GenIndexError(Exception):
    """Base class for allocator failures."""

    kind: ErrorKind

    def __init__(self, message: str, handle: GenIndex | None = None):
        super().__init__(message)
        self.handle = handle


class NotFoundError(GenIndexError, LookupError):
    """Raised when a handle points past the end of the slot table."""

    kind = ErrorKind.NOT_FOUND


class StaleHandleError(GenIndexError, LookupError):
    """Raised when a handle's generation no longer matches its slot."""

    kind = ErrorKind.STALE_HANDLE


class OverwriteEmptyError(GenIndexError):
    """Raised when set() targets a vacant slot. Use allocate() instead."""

    kind = ErrorKind.OVERWRITE_EMPTY


class DoubleFreeError(GenIndexError):
    """Raised on a second deallocate() of the same handle in strict mode."""

    kind = ErrorKind.DOUBLE_FREE


class InternalError(GenIndexError):
    """Raised when allocator bookkeeping is inconsistent."""

    kind = ErrorKind.INTERNAL


class DoubleFreeWarning(UserWarning):
    """Issued on a repeated deallocate() when double_free="warn"."""
