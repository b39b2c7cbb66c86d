import numpy as np
from typing import NamedTuple

UNFILLED_ENTRY = 0
SIZE = 9
BOX_SIZE = 3
ENTRIES = frozenset(range(1, SIZE + 1))
# top-left cell of every box, row-major; the solver visits boxes in this order
BOX_ORIGINS = tuple((r, c) for r in range(0, SIZE, BOX_SIZE) for c in range(0, SIZE, BOX_SIZE))


class Position(NamedTuple):
    """Cell coordinate on the board (0-based row, col)."""
    row: int
    col: int


class Grid:
    """
    9x9 Sudoku board.

    store: [9, 9] int array, 0 = unfilled
    remaining: live count of unfilled cells (only `fill` decrements it)
    """

    def __init__(self):
        self.store = np.zeros((SIZE, SIZE), dtype=int)
        self.remaining = 0
        # presence bitsets: _rows[r, v] is True when v is already in row r
        self._rows = np.zeros((SIZE, SIZE + 1), dtype=bool)
        self._cols = np.zeros((SIZE, SIZE + 1), dtype=bool)

    @classmethod
    def from_rows(cls, rows):
        grid = cls()
        for index, entries in enumerate(rows):
            grid.add_row(index, entries)
        return grid

    def add_row(self, row, entries):
        entries = np.asarray(entries, dtype=int)
        self.store[row, :] = entries
        self.remaining += int(np.sum(entries == UNFILLED_ENTRY))
        self._refresh_masks()

    def filled_entries_at(self, position):
        """Values already present in the row or column of `position` (snapshot)."""
        present = self._rows[position.row] | self._cols[position.col]
        present[UNFILLED_ENTRY] = False
        return frozenset(int(v) for v in np.flatnonzero(present))

    def fill(self, entry, position):
        # caller guarantees the cell is open and the entry is legal
        self.store[position.row, position.col] = entry
        self._rows[position.row, entry] = True
        self._cols[position.col, entry] = True
        self.remaining -= 1

    def is_complete(self):
        return self.remaining == 0

    def copy_store(self):
        return self.store.tolist()

    def _refresh_masks(self):
        self._rows[:] = False
        self._cols[:] = False
        rows, cols = np.indices(self.store.shape)
        self._rows[rows.ravel(), self.store.ravel()] = True
        self._cols[cols.ravel(), self.store.ravel()] = True

    def __repr__(self):
        return f"Grid(remaining={self.remaining})"
