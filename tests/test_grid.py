# tests/test_grid.py
import numpy as np

from solvers.grid import Grid, Position


ROW = [0, 5, 0, 6, 1, 3, 0, 0, 8]


def test_add_row_stores_entries_and_counts_blanks():
    grid = Grid()
    grid.add_row(0, ROW)
    assert grid.store[0].tolist() == ROW
    assert grid.remaining == 4


def test_filled_entries_at_unions_row_and_column():
    grid = Grid()
    grid.add_row(0, ROW)
    assert grid.filled_entries_at(Position(0, 1)) == {5, 6, 1, 3, 8}


def test_filled_entries_at_deduplicates(easy):
    grid, _ = easy
    # row 1: 6 1 9 5, col 1: 3 9 6
    assert grid.filled_entries_at(Position(1, 1)) == {1, 3, 5, 6, 9}
    assert grid.filled_entries_at(Position(2, 0)) == {9, 8, 6, 5, 4, 7}


def test_fill_writes_entry_and_decrements_remaining(easy):
    grid, _ = easy
    before = grid.remaining
    grid.fill(4, Position(0, 2))
    assert grid.store[0, 2] == 4
    assert grid.remaining == before - 1
    assert 4 in grid.filled_entries_at(Position(0, 8))
    assert 4 in grid.filled_entries_at(Position(8, 2))


def test_remaining_matches_zero_count(easy):
    grid, _ = easy
    assert grid.remaining == int(np.sum(grid.store == 0)) == 51


def test_position_equality_by_value():
    assert Position(3, 4) == Position(3, 4)
    assert len({Position(1, 1), Position(1, 1), Position(1, 2)}) == 2


def test_copy_store_is_detached(easy):
    grid, _ = easy
    copy = grid.copy_store()
    copy[0][2] = 9
    assert grid.store[0, 2] == 0
