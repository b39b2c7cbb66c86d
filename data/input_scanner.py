import os

import numpy as np

from solvers.box import Box
from solvers.exceptions import PuzzleFormatError
from solvers.grid import BOX_ORIGINS, ENTRIES, SIZE, UNFILLED_ENTRY, Grid
from utils.grid_utils import board_to_array


def parse_puzzle_string(text):
    return board_to_array(text)


def parse_puzzle_file(path):
    """9 non-blank lines of 9 whitespace-separated digits."""
    rows = []
    with open(path, 'r') as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                entries = [int(tok) for tok in line.split()]
            except ValueError:
                raise PuzzleFormatError(f"{path}:{line_no}: non-numeric entry in {line.strip()!r}") from None
            if len(entries) != SIZE:
                raise PuzzleFormatError(f"{path}:{line_no}: expected {SIZE} entries, got {len(entries)}")
            rows.append(entries)
    if len(rows) != SIZE:
        raise PuzzleFormatError(f"{path}: expected {SIZE} rows, got {len(rows)}")
    return np.array(rows, dtype=int)


def build_boxes(grid):
    """The 9 boxes of `grid` in row-major order, keyed by their top-left cell."""
    return [_build_box(grid, origin) for origin in BOX_ORIGINS]


def _build_box(grid, origin):
    box = Box(origin)
    present = set()

    for row in box.rows():
        for col in box.cols():
            entry = int(grid.store[row, col])
            if entry == UNFILLED_ENTRY:
                box.add_open_position(row, col)
            else:
                present.add(entry)

    box.add_unfilled_entries(ENTRIES - present)
    return box


class InputScanner:
    """
    Builds the board and its boxes from a puzzle file or an 81-char string.
    """

    def __init__(self, source):
        self.source = source
        self.grid = Grid()
        self.boxes = []

    def scan(self):
        self._build_board()
        self.boxes = build_boxes(self.grid)
        return self.grid, self.boxes

    def _build_board(self):
        if os.path.isfile(self.source):
            rows = parse_puzzle_file(self.source)
        else:
            rows = parse_puzzle_string(self.source)
        self.grid = Grid.from_rows(rows)
