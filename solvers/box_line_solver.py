import logging
import time
from dataclasses import dataclass
from typing import List

from solvers.exceptions import StuckState
from solvers.grid import BOX_ORIGINS
from solvers.linearity import Linearity
from solvers.possibility_map import PossibilityMap

log = logging.getLogger(__name__)

SOLVED = "solved"
STUCK = "stuck"


@dataclass
class SolveResult:
    status: str
    grid: List[List[int]]
    remaining: int
    passes: int
    filled: int = 0
    duration_ms: int = 0
    message: str = ""

    @property
    def solved(self) -> bool:
        return self.status == SOLVED

    def raise_for_status(self) -> "SolveResult":
        if self.status == STUCK:
            raise StuckState(self)
        return self


class Solver:
    """
    Pass-based deduction solver (naked singles + box-line reduction).

    Boxes are always processed in BOX_ORIGINS (row-major) order: a box sees
    the linear deductions of every box handled before it in the same pass,
    so the order decides which pass fills which cell.
    """

    def __init__(self, grid, boxes, box_line: bool = True):
        self.grid = grid
        self.boxes = sorted(boxes, key=lambda box: BOX_ORIGINS.index(box.key))
        self.box_line = box_line
        self.linearity = Linearity()
        self.previous = grid.remaining
        self.passes = 0

    def solve(self) -> SolveResult:
        start = time.time()
        start_remaining = self.grid.remaining
        self.previous = self.grid.remaining

        while not self.grid.is_complete():
            self.run_pass()
            if self.grid.remaining == self.previous:
                result = self._result(STUCK, start, start_remaining)
                log.warning("stuck after %d passes, %d cells remaining", self.passes, self.grid.remaining)
                return result
            self.previous = self.grid.remaining

        result = self._result(SOLVED, start, start_remaining)
        log.info("solved in %d passes (%d cells filled)", self.passes, result.filled)
        return result

    def run_pass(self) -> int:
        """One sweep over all boxes. Returns the number of cells filled."""
        before = self.grid.remaining
        for box in self.boxes:
            self._solve_for(box)
        self.passes += 1
        log.debug("pass %d: %d filled, %d remaining", self.passes, before - self.grid.remaining, self.grid.remaining)
        return before - self.grid.remaining

    def _solve_for(self, box):
        linearity = self.linearity if self.box_line else None
        box.possibility_map = PossibilityMap(self.grid, box, linearity).generate()

        singles = box.possibility_map.positions_with_single_possibility()
        while singles:
            self._fill(box, singles)
            singles = box.possibility_map.positions_with_single_possibility()

        if self.box_line:
            self.linearity.add_from(box)

    def _fill(self, box, singles):
        for entry, position in singles.items():
            # an earlier fill in this batch may have invalidated the entry
            if box.possibility_map.store.get(entry) != [position]:
                continue
            log.debug("box %s: %d -> (%d, %d)", box.key, entry, position.row, position.col)
            self.grid.fill(entry, position)
            box.fill(entry, position)

    def _result(self, status, start, start_remaining):
        if status == SOLVED:
            message = "Solved successfully."
        else:
            message = (f"No progress in pass {self.passes}; "
                       f"{self.grid.remaining} cells need a stronger technique.")
        return SolveResult(
            status=status,
            grid=self.grid.copy_store(),
            remaining=self.grid.remaining,
            passes=self.passes,
            filled=start_remaining - self.grid.remaining,
            duration_ms=int((time.time() - start) * 1000),
            message=message,
        )


def solve(grid, boxes, box_line=True):
    return Solver(grid, boxes, box_line=box_line).solve()
