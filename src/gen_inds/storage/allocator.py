"""Generational slot allocation.

GenerationalAllocator is a stateful store that hands out GenIndex handles to
values kept in a dense slot table, and rejects handles whose slot has since
been recycled.

Usage:
    allocator = GenerationalAllocator[str]()
    handle = allocator.allocate("node")
    allocator.get(handle)          # "node"
    allocator.deallocate(handle)   # "node"
    fresh = allocator.allocate("other")
    allocator.get(handle)          # None: same index, older generation
"""

from __future__ import annotations

import warnings
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from gen_inds.config import AllocatorSettings
from gen_inds.core.identity import VACANT, GenIndex, GenIndexEntry
from gen_inds.storage.errors import (
    DoubleFreeError,
    DoubleFreeWarning,
    InternalError,
    NotFoundError,
    OverwriteEmptyError,
    StaleHandleError,
)

T = TypeVar("T")
D = TypeVar("D")


class SlotRef(Generic[T]):
    """In-place access to one occupied slot, returned by get_mut().

    Reading or writing .value re-checks that the slot still holds the
    generation this ref was issued for. Assigning .value swaps the stored
    object without going through set(): occupancy and generation stay as they are.

    Args:
        entry: Slot the ref points at.
        handle: Key the slot carried when the ref was issued.
    """

    __slots__ = ("_entry", "handle")

    def __init__(self, entry: GenIndexEntry[T], handle: GenIndex):
        self._entry = entry
        self.handle = handle

    def _check(self) -> GenIndexEntry[T]:
        entry = self._entry
        if entry.key != self.handle or not entry.occupied:
            raise StaleHandleError(f"Slot {self.handle} was freed or reused", self.handle)
        return entry

    @property
    def value(self) -> T:
        return self._check().value  # type: ignore[return-value]

    @value.setter
    def value(self, new_value: T) -> None:
        self._check().value = new_value

    def __repr__(self) -> str:
        return f"SlotRef({self.handle})"


class GenerationalAllocator(Generic[T]):
    """Dense slot table with generation-checked handles.

    Freed positions go onto a stack and are reused last-freed-first. A slot's
    generation is bumped when it is reused, not when it is freed, so a handle
    stays valid but empty between deallocate() and the next reuse of its slot.

    Not thread-safe. Wrap in a lock if shared between threads.

    Args:
        capacity: Reserved capacity hint. Defaults to settings.default_capacity.
        settings: Allocator settings. Loaded from the environment if omitted.
    """

    def __init__(
        self,
        capacity: int | None = None,
        *,
        settings: AllocatorSettings | None = None,
    ):
        """Initialize an empty allocator.

        Args:
            capacity: Reserved capacity hint. Defaults to settings.default_capacity.
            settings: Allocator settings. Loaded from the environment if omitted.

        Raises:
            ValueError: If capacity is negative.
        """
        self._settings = settings or AllocatorSettings()
        if capacity is None:
            capacity = self._settings.default_capacity
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._entries: list[GenIndexEntry[T]] = []
        self._free_indices: list[int] = []

    @classmethod
    def with_capacity(
        cls, capacity: int, *, settings: AllocatorSettings | None = None
    ) -> GenerationalAllocator[T]:
        """Create an allocator with a caller-chosen reserved capacity."""
        return cls(capacity, settings=settings)

    # Capacity bookkeeping

    @property
    def capacity(self) -> int:
        """Reserved slot capacity. Grows by doubling, never shrinks."""
        return self._capacity

    @property
    def slot_count(self) -> int:
        """Number of slots in the table, occupied or vacant."""
        return len(self._entries)

    @property
    def free_count(self) -> int:
        """Number of vacant slots waiting for reuse."""
        return len(self._free_indices)

    def reserve(self, additional: int) -> None:
        """Ensure room for at least `additional` slots beyond the current table.

        Args:
            additional: Number of extra slots to make room for.

        Raises:
            ValueError: If additional is negative.
        """
        if additional < 0:
            raise ValueError(f"Cannot reserve a negative number of slots: {additional}")
        required = len(self._entries) + additional
        if required > self._capacity:
            self._capacity = max(required, self._capacity * 2)

    def _grow_for_append(self) -> None:
        if len(self._entries) >= self._capacity:
            self._capacity = max(1, self._capacity * 2)

    # Handle validation

    def _entry(self, handle: GenIndex) -> GenIndexEntry[T]:
        """Return the slot a handle validates against.

        Raises:
            NotFoundError: If the index is outside the table.
            StaleHandleError: If the generation does not match the slot.
        """
        if not 0 <= handle.index < len(self._entries):
            raise NotFoundError(
                f"Index {handle.index} out of range for {len(self._entries)} slots", handle
            )
        entry = self._entries[handle.index]
        if entry.key.generation != handle.generation:
            raise StaleHandleError(
                f"Handle {handle} is stale: slot is at generation {entry.key.generation}",
                handle,
            )
        return entry

    def _live_entry(self, handle: Any) -> GenIndexEntry[T] | None:
        if not isinstance(handle, GenIndex):
            return None
        try:
            entry = self._entry(handle)
        except (NotFoundError, StaleHandleError):
            return None
        return entry if entry.occupied else None

    # Core operations

    def allocate(self, value: T) -> GenIndex:
        """Store value and return a handle to it, reusing a freed slot if any.

        Reused slots come back with their generation bumped, which invalidates
        every handle issued for the previous occupant.

        Args:
            value: Value to store.

        Returns:
            Handle that validates against the new occupant.

        Raises:
            InternalError: If the free-list points at a slot that does not exist.
        """
        if self._free_indices:
            index = self._free_indices.pop()
            if not 0 <= index < len(self._entries):
                raise InternalError(f"Free slot {index} missing from table")
            entry = self._entries[index]
            if entry.occupied:
                raise InternalError(f"Free slot {index} is still occupied")
            return entry.reoccupy(value)

        self._grow_for_append()
        key = GenIndex(index=len(self._entries), generation=0)
        self._entries.append(GenIndexEntry(key=key, value=value))
        return key

    def deallocate(self, handle: GenIndex) -> T | None:
        """Vacate the slot a handle points to and queue it for reuse.

        The generation is left as is: the handle keeps validating (and reads as
        empty) until the slot is handed out again. Freeing an already vacant slot
        returns None and leaves the free-list unchanged, subject to the
        double_free setting.

        Args:
            handle: Handle issued by allocate().

        Returns:
            The removed value, or None if the slot was already vacant.

        Raises:
            NotFoundError: If the index is outside the table.
            StaleHandleError: If the slot has been reused since the handle was issued.
            DoubleFreeError: If the slot is vacant and double_free is "error".
        """
        entry = self._entry(handle)
        if not entry.occupied:
            policy = self._settings.double_free
            if policy == "error":
                raise DoubleFreeError(f"Handle {handle} was already deallocated", handle)
            if policy == "warn":
                warnings.warn(
                    f"deallocate() called again on {handle} before its slot was reused",
                    DoubleFreeWarning,
                    stacklevel=2,
                )
            return None

        value = entry.take()
        self._free_indices.append(handle.index)
        return value  # type: ignore[return-value]

    def get(self, handle: GenIndex, default: D | None = None) -> T | D | None:
        """Return the value behind a handle, or default if it is not live.

        Never raises for bad handles: out-of-range, stale and vacant all read as
        default.
        """
        entry = self._live_entry(handle)
        if entry is None:
            return default
        return entry.value  # type: ignore[return-value]

    def get_mut(self, handle: GenIndex) -> SlotRef[T] | None:
        """Return a writable reference to a live slot, or None.

        Writing through the ref replaces the stored object in place. This is not
        a reuse: occupancy and generation are untouched and no existing handle is
        invalidated. Use set() to get the previous value back, or
        deallocate()/allocate() for a genuinely new occupant.
        """
        entry = self._live_entry(handle)
        if entry is None:
            return None
        return SlotRef(entry, entry.key)

    def set(self, handle: GenIndex, value: T) -> T:
        """Replace the value of a live slot.

        Args:
            handle: Handle to an occupied slot.
            value: Replacement value.

        Returns:
            The previous value.

        Raises:
            NotFoundError: If the index is outside the table.
            StaleHandleError: If the slot has been reused since the handle was issued.
            OverwriteEmptyError: If the slot is vacant.
        """
        entry = self._entry(handle)
        if not entry.occupied:
            raise OverwriteEmptyError(
                f"Cannot set vacant slot {handle}; use allocate() instead", handle
            )
        previous = entry.value
        entry.value = value
        return previous  # type: ignore[return-value]

    def is_alive(self, handle: GenIndex) -> bool:
        """Check if a handle still refers to a stored value.

        Returns:
            True if the handle validates and its slot is occupied.
        """
        return self._live_entry(handle) is not None

    # Container protocol

    def handles(self) -> Iterator[GenIndex]:
        """Iterate handles of occupied slots in index order."""
        for entry in self._entries:
            if entry.occupied:
                yield entry.key

    def items(self) -> Iterator[tuple[GenIndex, T]]:
        """Iterate (handle, value) pairs of occupied slots in index order."""
        for entry in self._entries:
            if entry.value is not VACANT:
                yield entry.key, entry.value

    def values(self) -> Iterator[T]:
        """Iterate stored values in index order."""
        for _, value in self.items():
            yield value

    def __iter__(self) -> Iterator[GenIndex]:
        return self.handles()

    def __len__(self) -> int:
        return len(self._entries) - len(self._free_indices)

    def __contains__(self, handle: object) -> bool:
        return self._live_entry(handle) is not None

    def __getitem__(self, handle: GenIndex) -> T:
        entry = self._entry(handle)
        if not entry.occupied:
            raise KeyError(f"Slot {handle} is vacant")
        return entry.value  # type: ignore[return-value]

    def __setitem__(self, handle: GenIndex, value: T) -> None:
        self.set(handle, value)

    def __delitem__(self, handle: GenIndex) -> None:
        self.deallocate(handle)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(live={len(self)}, slots={len(self._entries)}, "
            f"capacity={self._capacity})"
        )
