import sys
import os
import argparse

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
from data.input_scanner import InputScanner
from solvers.box_line_solver import Solver
from utils.grid_utils import board_to_array
from utils.visualize import print_sudoku

# --- Pass-by-pass trace ---
def run_trace(puzzle_str, box_line=True):
    print(f"🧩 Puzzle: {puzzle_str[:15]}...")

    grid, boxes = InputScanner(puzzle_str).scan()
    original = board_to_array(grid.copy_store())
    solver = Solver(grid, boxes, box_line=box_line)

    print(f"   start: {grid.remaining} open cells")
    while not grid.is_complete():
        filled = solver.run_pass()
        print(f"   pass {solver.passes:>2}: +{filled:<2} filled, {grid.remaining:>2} remaining, "
              f"{len(solver.linearity)} linear deductions")
        # 한 번의 패스에서 아무것도 못 채우면 더 이상 진행 불가
        if filled == 0:
            break

    print("\n" + "="*50)
    if grid.is_complete():
        print(f"✅ Solved in {solver.passes} passes")
    else:
        print(f"💀 Stuck after {solver.passes} passes ({grid.remaining} cells open)")
    print("="*50)
    print_sudoku(grid.store, original=original)

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--input', type=str,
    default="000000907000420180000705026100904000050000040000507009920108000034059000507000000")
    parser.add_argument('--no-box-line', action='store_true')
    args = parser.parse_args()
    run_trace(args.input, box_line=not args.no_box_line)

if __name__ == "__main__":
    main()
