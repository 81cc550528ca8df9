"""Tests for the schedule store."""

from datetime import time

import pytest

from medreminder.errors import InvalidIndex, NotFound
from medreminder.schedule_store import Medication, ScheduleStore


def _snapshot(store):
    return list(store.all_entries())


def test_entries_for_unknown_date_is_empty():
    assert ScheduleStore().entries_for("2024-03-05") == []


def test_add_appends_in_order():
    store = ScheduleStore()
    store.add("2024-03-05", Medication("Aspirin", time(8, 0)))
    store.add("2024-03-05", Medication("Vitamin D", time(9, 0)))
    before = store.entries_for("2024-03-05")

    added = Medication("Aspirin", time(8, 0))
    store.add("2024-03-05", added)

    meds = store.entries_for("2024-03-05")
    assert meds[-1] == added
    assert meds[:-1] == before
    # duplicates are kept
    assert [m.name for m in meds] == ["Aspirin", "Vitamin D", "Aspirin"]


def test_entries_for_returns_copy():
    store = ScheduleStore()
    store.add("2024-03-05", Medication("Aspirin", time(8, 0)))
    meds = store.entries_for("2024-03-05")
    meds[0].taken = True
    meds.append(Medication("Other", time(9, 0)))
    assert store.entries_for("2024-03-05") == [Medication("Aspirin", time(8, 0))]


def test_mark_taken_only_touches_one_entry():
    store = ScheduleStore()
    store.add("2024-03-05", Medication("Aspirin", time(8, 0)))
    store.add("2024-03-05", Medication("Aspirin", time(8, 0)))
    store.add("2024-03-06", Medication("Aspirin", time(8, 0)))

    store.mark_taken("2024-03-05", 1)

    assert [m.taken for m in store.entries_for("2024-03-05")] == [False, True]
    assert [m.taken for m in store.entries_for("2024-03-06")] == [False]


def test_mark_taken_on_empty_store_is_not_found():
    store = ScheduleStore()
    with pytest.raises(NotFound) as exc:
        store.mark_taken("2099-01-01", 0)
    assert exc.value.date == "2099-01-01"
    assert _snapshot(store) == []


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_mark_taken_bad_index_leaves_store_unchanged(index):
    store = ScheduleStore()
    store.add("2024-03-05", Medication("Aspirin", time(8, 0)))
    store.add("2024-03-05", Medication("Ibuprofen", time(12, 0)))
    before = _snapshot(store)

    with pytest.raises(InvalidIndex):
        store.mark_taken("2024-03-05", index)

    assert _snapshot(store) == before


def test_mark_taken_unknown_date_leaves_store_unchanged():
    store = ScheduleStore()
    store.add("2024-03-05", Medication("Aspirin", time(8, 0)))
    before = _snapshot(store)
    with pytest.raises(NotFound):
        store.mark_taken("2024-03-06", 0)
    assert _snapshot(store) == before


def test_all_entries_walks_dates_in_insertion_order():
    store = ScheduleStore()
    store.add("2024-03-06", Medication("B", time(9, 0)))
    store.add("2024-03-05", Medication("A", time(8, 0)))
    store.add("2024-03-06", Medication("C", time(10, 0)))
    assert [(d, m.name) for d, m in store.all_entries()] == [
        ("2024-03-06", "B"), ("2024-03-06", "C"), ("2024-03-05", "A"),
    ]
