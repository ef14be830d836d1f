"""Handle and slot models.

Usage:
    handle = GenIndex(index=42, generation=1)
    entry = GenIndexEntry(key=handle, value="payload")
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Generic, Literal, TypeVar

T = TypeVar("T")


class _Vacancy(Enum):
    VACANT = auto()

    def __repr__(self) -> str:
        return "<vacant>"


VACANT: Literal[_Vacancy.VACANT] = _Vacancy.VACANT
"""Marker for an unoccupied slot. Lets None be stored as an ordinary value."""


@dataclass(frozen=True, slots=True, order=True)
class GenIndex:
    """Handle to a slot: table position plus the generation it was issued for.

    Handles are capabilities, not owners. A handle stays comparable and hashable
    after its slot is reused, it just stops validating.
    """

    index: int = 0
    generation: int = 0

    def __str__(self) -> str:
        return f"{self.index}v{self.generation}"


@dataclass(slots=True)
class GenIndexEntry(Generic[T]):
    """One slot of the table.

    key.index is fixed at creation; key.generation only moves forward.
    """

    key: GenIndex
    value: T | Literal[_Vacancy.VACANT] = field(default=VACANT)

    @property
    def occupied(self) -> bool:
        return self.value is not VACANT

    def take(self) -> T | Literal[_Vacancy.VACANT]:
        """Remove and return the stored value, leaving the slot vacant."""
        value = self.value
        self.value = VACANT
        return value

    def reoccupy(self, value: T) -> GenIndex:
        """Store value under the next generation and return the new key."""
        self.key = replace(self.key, generation=self.key.generation + 1)
        self.value = value
        return self.key
