"""
Leaderboard sorting.

Large boards use an in-place quicksort, small ones a bubble sort with
early exit. Both order entries descending by score; entries are plain
dicts in the persisted (camelCase) shape.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

Entry = dict[str, Any]

QUICKSORT_THRESHOLD = 10


def _value(entry: Entry, field: str) -> Any:
    return entry.get(field) or 0


def _rank_value(entry: Entry) -> Any:
    return entry.get("score") or entry.get("completionPercentage") or 0


def quicksort_leaderboard(
    arr: list[Entry],
    left: int = 0,
    right: Optional[int] = None,
) -> list[Entry]:
    """
    Sort in place, descending by score (or completion when score is 0).

    Only the smaller side is recursed into and ties are gathered in the
    middle band, so recursion depth stays logarithmic for sorted or
    all-equal boards.
    """
    if right is None:
        right = len(arr) - 1
    while left < right:
        lt, gt = _partition(arr, left, right)
        if lt - left < right - gt:
            quicksort_leaderboard(arr, left, lt - 1)
            left = gt + 1
        else:
            quicksort_leaderboard(arr, gt + 1, right)
            right = lt - 1
    return arr


def _partition(arr: list[Entry], left: int, right: int) -> tuple[int, int]:
    """
    Three-way split around the middle entry.

    Returns:
        (lt, gt): arr[left:lt] ranks above the pivot, arr[lt:gt+1] ties it,
        arr[gt+1:right+1] ranks below it
    """
    pivot = _rank_value(arr[(left + right) // 2])
    lt, i, gt = left, left, right
    while i <= gt:
        value = _rank_value(arr[i])
        if value > pivot:
            arr[lt], arr[i] = arr[i], arr[lt]
            lt += 1
            i += 1
        elif value < pivot:
            arr[i], arr[gt] = arr[gt], arr[i]
            gt -= 1
        else:
            i += 1
    return lt, gt


def bubble_sort(arr: Sequence[Entry], sort_by: str = "score", ascending: bool = False) -> list[Entry]:
    """Return a sorted copy; stops after the first pass without swaps."""
    items = list(arr)
    n = len(items)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            a = _value(items[j], sort_by)
            b = _value(items[j + 1], sort_by)
            if (a > b) if ascending else (a < b):
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def sort_leaderboard_by_score(entries: Sequence[Entry]) -> list[Entry]:
    if len(entries) > QUICKSORT_THRESHOLD:
        return quicksort_leaderboard(list(entries))
    return bubble_sort(entries, "score", False)


def sort_progress_by_completion(entries: Sequence[Entry]) -> list[Entry]:
    return bubble_sort(entries, "completionPercentage", False)


def sort_inventory(items: Sequence[Entry], sort_by: str = "name") -> list[Entry]:
    """Inventory lists read ascending."""
    return bubble_sort(items, sort_by, True)


def sort_by_multiple_fields(
    entries: Sequence[Entry],
    sort_fields: Sequence[str] = ("score", "level"),
) -> list[Entry]:
    """Descending by the first field, ties broken by the following ones."""
    result = list(entries)
    for field in reversed(sort_fields):
        result.sort(key=lambda e: _value(e, field), reverse=True)
    return result


class LeaderboardSorter:
    """Sorting entry point used by the game facade."""

    def sort_leaderboard(self, entries: Sequence[Entry], sort_by: str = "score") -> list[Entry]:
        if len(entries) > QUICKSORT_THRESHOLD:
            return quicksort_leaderboard(list(entries))
        return bubble_sort(entries, sort_by, False)

    def sort_progress(self, entries: Sequence[Entry]) -> list[Entry]:
        return sort_progress_by_completion(entries)

    def sort_by_multiple_fields(
        self,
        entries: Sequence[Entry],
        sort_fields: Sequence[str] = ("score", "level"),
    ) -> list[Entry]:
        return sort_by_multiple_fields(entries, sort_fields)
