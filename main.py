import argparse
import logging
import sys
import time

from data.input_scanner import InputScanner
from solvers.box_line_solver import Solver
from solvers.exceptions import PuzzleFormatError
from utils.grid_utils import board_to_array
from utils.visualize import print_sudoku, write_grid

def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument('--input', type=str,
    default="530070000600195000098000060800060003400803001700020006060000280000419005000080079",
    help='Sudoku string (81 digits, 0 or . for blanks)')
    parser.add_argument('--file', type=str, default=None, help='Puzzle file: 9 lines of 9 digits (overrides --input)')
    parser.add_argument('--output', type=str, default=None, help='Write the resulting grid here')
    parser.add_argument('--no-box-line', action='store_true', help='Naked singles only')
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    # 1. Scan
    source = args.file or args.input
    try:
        grid, boxes = InputScanner(source).scan()
    except (PuzzleFormatError, OSError) as e:
        print(f"❌ Failed to read puzzle: {e}")
        return 2
    original_grid = board_to_array(grid.copy_store())

    # 2. Solve
    print(f"\n🧩 Puzzle: {source[:15]}... ({grid.remaining} open cells)")
    start_time = time.time()

    result = Solver(grid, boxes, box_line=not args.no_box_line).solve()

    elapsed = time.time() - start_time

    # 3. Visualization
    if result.solved:
        print(f"\n🎉 Solved in {elapsed:.4f} sec ({result.passes} passes)!")
    else:
        print(f"\n💀 Stuck after {result.passes} passes: {result.message}")
    print_sudoku(result.grid, original=original_grid)

    if args.output:
        write_grid(result.grid, args.output)
        print(f"💾 Saved grid to {args.output}")

    return 0 if result.solved else 1

if __name__ == "__main__":
    sys.exit(main())
