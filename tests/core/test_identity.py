"""Tests for handle and slot models.

Critical Invariants:
- Slot index never changes
- Generation moves forward by exactly one per reuse
- None is a storable value, distinct from vacancy
"""

from gen_inds.core.identity import VACANT, GenIndex, GenIndexEntry


def test_handles_compare_by_index_then_generation():
    """Handles order by (index, generation) and are usable as dict keys."""
    handles = [GenIndex(1, 0), GenIndex(0, 3), GenIndex(0, 1)]

    assert sorted(handles) == [GenIndex(0, 1), GenIndex(0, 3), GenIndex(1, 0)]
    assert {GenIndex(2, 5): "x"}[GenIndex(2, 5)] == "x"
    assert GenIndex(2, 5) != GenIndex(2, 6)


def test_entry_defaults_to_vacant():
    entry = GenIndexEntry(key=GenIndex(3, 0))

    assert not entry.occupied
    assert entry.value is VACANT


def test_none_is_an_occupied_value():
    """None must not be confused with an empty slot."""
    entry = GenIndexEntry(key=GenIndex(0, 0), value=None)

    assert entry.occupied
    assert entry.take() is None
    assert not entry.occupied


def test_reoccupy_bumps_generation_and_keeps_index():
    """CRITICAL: Reuse moves generation forward by one, index stays put."""
    entry = GenIndexEntry(key=GenIndex(7, 2), value="old")
    entry.take()

    key = entry.reoccupy("new")

    assert key == GenIndex(7, 3)
    assert entry.key == key
    assert entry.value == "new"


def test_handle_str_is_compact():
    assert str(GenIndex(4, 2)) == "4v2"
