import numpy as np

from solvers.grid import BOX_ORIGINS, BOX_SIZE, SIZE

# ANSI Colors
RED = '\033[91m'   # 충돌 (규칙 위반)
BLUE = '\033[94m'  # 솔버가 채운 값
RESET = '\033[0m'

SEPARATOR = "-" * 25


def _unit_slices():
    for i in range(SIZE):
        yield np.s_[i, :]
        yield np.s_[:, i]
    for r0, c0 in BOX_ORIGINS:
        yield np.s_[r0:r0 + BOX_SIZE, c0:c0 + BOX_SIZE]


def get_conflict_mask(grid):
    """
    [9, 9] bool mask, True where a value repeats inside its row, column or box.
    """
    grid = np.asarray(grid)
    mask = np.zeros(grid.shape, dtype=bool)

    for unit in _unit_slices():
        cells = grid[unit]
        counts = np.bincount(cells.ravel(), minlength=SIZE + 1)
        counts[0] = 0  # blanks never conflict
        mask[unit] |= counts[cells] > 1

    return mask


def _cell_text(val, conflict, filled):
    text = str(val) if val != 0 else "."
    if conflict:
        return f"{RED}{text}{RESET}"
    if filled:
        return f"{BLUE}{text}{RESET}"
    return text


def _row_text(cells):
    chunks = [" ".join(cells[c:c + BOX_SIZE]) for c in range(0, SIZE, BOX_SIZE)]
    return " | ".join(chunks) + " "


def print_sudoku(grid, original=None):
    """
    grid: 출력할 보드
    original: 초기 문제 (주어지면 솔버가 채운 칸을 파란색으로 표시)
    """
    grid = np.asarray(grid)
    conflicts = get_conflict_mask(grid)
    if original is None:
        filled = np.zeros(grid.shape, dtype=bool)
    else:
        filled = (np.asarray(original) == 0) & (grid != 0)

    print(SEPARATOR)
    for i in range(SIZE):
        if i > 0 and i % BOX_SIZE == 0:
            print(SEPARATOR)
        print(_row_text([_cell_text(grid[i, j], conflicts[i, j], filled[i, j]) for j in range(SIZE)]))
    print(SEPARATOR)

    open_cells = int(np.sum(grid == 0))
    if conflicts.any():
        print(f"{RED}⚠️  DETECTED ERRORS: The grid violates Sudoku rules!{RESET}")
    elif open_cells:
        print(f"{BLUE}🧩 {open_cells} cells left open.{RESET}")
    else:
        print(f"{BLUE}✅ Perfect Solution!{RESET}")


def format_grid(grid):
    return "\n".join(" ".join(str(int(v)) for v in row) for row in np.asarray(grid)) + "\n"


def write_grid(grid, path):
    with open(path, 'w') as f:
        f.write(format_grid(grid))
