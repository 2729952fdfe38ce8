import random
import pytest
from math_dungeon.dungeon import (
    LeaderboardSorter,
    bubble_sort,
    quicksort_leaderboard,
    sort_by_multiple_fields,
    sort_inventory,
    sort_leaderboard_by_score,
    sort_progress_by_completion,
)

SCORES = [120, 5, 990, 42, 300, 300, 77, 0, 610, 15, 8]

def entries(scores):
    return [{"playerName": f"p{i}", "score": s, "level": i} for i, s in enumerate(scores)]

def scores_of(items):
    return [e["score"] for e in items]

def test_quicksort_and_bubble_sort_agree():
    # SCORES has a tie at 300
    board = entries(SCORES)

    by_quicksort = quicksort_leaderboard(list(board))
    by_bubble = bubble_sort(list(board))

    assert scores_of(by_quicksort) == scores_of(by_bubble) == sorted(SCORES, reverse=True)
    assert sorted(e["playerName"] for e in by_quicksort) == sorted(e["playerName"] for e in board)

def test_threshold_paths():
    # 11 entries take the quicksort path, 9 the bubble sort path
    assert scores_of(sort_leaderboard_by_score(entries(SCORES))) == sorted(SCORES, reverse=True)
    assert scores_of(sort_leaderboard_by_score(entries(SCORES[:9]))) == sorted(SCORES[:9], reverse=True)

@pytest.mark.parametrize("scores", [
    [100] * 1500,
    list(range(1500, 0, -1)),
    list(range(1500)),
], ids=["equal", "descending", "ascending"])
def test_quicksort_large_boards(scores):
    board = entries(scores)

    result = quicksort_leaderboard(list(board))

    assert len(result) == 1500
    assert scores_of(result) == sorted(scores, reverse=True)
    assert sorted(e["playerName"] for e in result) == sorted(e["playerName"] for e in board)

def test_sorter_handles_large_equal_board():
    sorter = LeaderboardSorter()
    result = sorter.sort_leaderboard(entries([7] * 1500))
    assert scores_of(result) == [7] * 1500

def test_quicksort_is_in_place():
    board = entries(SCORES)
    result = quicksort_leaderboard(board)
    assert result is board

def test_bubble_sort_returns_copy():
    board = entries([1, 3, 2])
    result = bubble_sort(board)
    assert scores_of(result) == [3, 2, 1]
    assert scores_of(board) == [1, 3, 2]

def test_quicksort_ranks_by_completion_without_score():
    board = [{"completionPercentage": c} for c in (10, 80, 45)]
    quicksort_leaderboard(board)
    assert [e["completionPercentage"] for e in board] == [80, 45, 10]

def test_random_boards():
    rng = random.Random(42)
    for size in range(0, 25):
        scores = [rng.randint(0, 50) for _ in range(size)]
        assert scores_of(sort_leaderboard_by_score(entries(scores))) == sorted(scores, reverse=True)

def test_sort_progress_by_completion():
    progress = [{"grade": g, "completionPercentage": c} for g, c in ((1, 20), (2, 100), (3, 60))]
    assert [p["grade"] for p in sort_progress_by_completion(progress)] == [2, 3, 1]

def test_sort_inventory_ascending():
    items = [{"name": n} for n in ("Steel Sword", "Iron Blade", "Flame Sword")]
    assert [i["name"] for i in sort_inventory(items)] == ["Flame Sword", "Iron Blade", "Steel Sword"]

def test_sort_by_multiple_fields():
    board = [
        {"score": 10, "level": 1},
        {"score": 20, "level": 1},
        {"score": 10, "level": 5},
    ]
    result = sort_by_multiple_fields(board)
    assert result == [
        {"score": 20, "level": 1},
        {"score": 10, "level": 5},
        {"score": 10, "level": 1},
    ]

def test_sorter_sort_leaderboard_by_field():
    sorter = LeaderboardSorter()
    board = entries([5, 1, 3])
    assert [e["level"] for e in sorter.sort_leaderboard(board, "level")] == [2, 1, 0]
    assert scores_of(sorter.sort_leaderboard(entries(SCORES))) == sorted(SCORES, reverse=True)
