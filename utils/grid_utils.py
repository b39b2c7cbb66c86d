import numpy as np

from solvers.exceptions import PuzzleFormatError
from solvers.grid import BOX_ORIGINS, BOX_SIZE, ENTRIES, SIZE


def board_to_array(board_str):
    """
    Convert a string of 81 digits (e.g., "53007...") to a [9, 9] numpy array.
    0 or '.' represents an empty cell. Whitespace is ignored.
    """
    if not isinstance(board_str, str):
        data = np.asarray(board_str, dtype=int)
        if data.size != SIZE * SIZE:
            raise PuzzleFormatError(f"Expected {SIZE * SIZE} cells, got {data.size}")
        return data.reshape(SIZE, SIZE)

    chars = "".join(board_str.split()).replace(".", "0")
    if len(chars) != SIZE * SIZE:
        raise PuzzleFormatError(f"Expected {SIZE * SIZE} cells, got {len(chars)}")
    if not chars.isdigit():
        raise PuzzleFormatError(f"Puzzle string contains non-digit characters: {board_str!r}")
    return np.array([int(c) for c in chars], dtype=int).reshape(SIZE, SIZE)


def array_to_string(grid):
    return "".join(str(int(v)) for v in np.asarray(grid).flatten())


def box_cells(origin):
    r0, c0 = origin
    return [(r0 + dr, c0 + dc) for dr in range(BOX_SIZE) for dc in range(BOX_SIZE)]


def is_solved_grid(grid):
    """Every row, column and box holds 1..9 exactly once."""
    grid = np.asarray(grid)
    for i in range(SIZE):
        if set(grid[i, :].tolist()) != ENTRIES:
            return False
        if set(grid[:, i].tolist()) != ENTRIES:
            return False
    for origin in BOX_ORIGINS:
        if {int(grid[r, c]) for r, c in box_cells(origin)} != ENTRIES:
            return False
    return True
