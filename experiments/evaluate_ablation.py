import sys
import os
import argparse
import numpy as np
import matplotlib.pyplot as plt

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from data.input_scanner import InputScanner
from solvers.box_line_solver import Solver

# 난이도가 다른 문제들 (Box-Line Reduction 유무에 따라 결과가 갈리는 케이스 포함)
ABLATION_PUZZLES = [
    "530070000600195000098000060800060003400803001700020006060000280000419005000080079", # Wikipedia
    "003020600900305001001806400008102900700000008006708200002609500800203009005010300", # Euler #1
    "200080300060070084030500209000105408000000000402706000301007040720040060004010003", # Euler #2
    "000000907000420180000705026100904000050000040000507009920108000034059000507000000", # Box-Line
    "000000000000003085001020000000507000004000100090000000500000073002010000000040009", # Platinum Blonde
    "800000000003600000070090200050007000000045700000100030001000068008500010090000400", # AI Escargot
    "100007090030020008009600500005300900010080002600004000300000010040000007007000300", # Easter Monster
]

PUZZLE_NAMES = [
    "Wikipedia", "Euler #1", "Euler #2", "Box-Line", "Platinum Blonde", "AI Escargot", "Easter Monster",
]

# -------------------------------------------------------------------------
# 1. Run Ablation
# -------------------------------------------------------------------------
def run_puzzle(puzzle_str, box_line):
    grid, boxes = InputScanner(puzzle_str).scan()
    return Solver(grid, boxes, box_line=box_line).solve()

def run_ablation():
    print("🔬 Ablation Study: Naked Singles vs Naked Singles + Box-Line Reduction")
    print(f"{'Puzzle':<16} | {'Singles':<16} | {'+ Box-Line':<16}")
    print("-" * 54)

    rows = []
    for name, puzzle in zip(PUZZLE_NAMES, ABLATION_PUZZLES):
        singles = run_puzzle(puzzle, box_line=False)
        box_line = run_puzzle(puzzle, box_line=True)
        rows.append((name, singles, box_line))

        def describe(result):
            mark = '✅' if result.solved else '❌'
            return f"{mark} {result.filled:>2} filled"

        print(f"{name:<16} | {describe(singles):<16} | {describe(box_line):<16}")

    return rows

# -------------------------------------------------------------------------
# 2. Visualization
# -------------------------------------------------------------------------
def save_ablation_graph(rows, save_path='ablation_result.png'):
    names = [name for name, _, _ in rows]
    singles = [r.filled for _, r, _ in rows]
    box_line = [r.filled for _, _, r in rows]

    x = np.arange(len(names))
    width = 0.38

    fig, ax = plt.subplots(figsize=(12, 6))
    ax.bar(x - width/2, singles, width, label='Naked Singles', color='tab:gray')
    ax.bar(x + width/2, box_line, width, label='+ Box-Line Reduction', color='tab:blue')

    ax.set_ylabel('Cells filled')
    ax.set_xticks(x)
    ax.set_xticklabels(names, rotation=20)
    ax.legend()

    plt.title('Ablation: contribution of box-line reduction')
    fig.tight_layout()
    plt.savefig(save_path)
    print(f"📈 Saved chart to {save_path}")
    plt.close()

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--plot', type=str, default='ablation_result.png')
    args = parser.parse_args()

    rows = run_ablation()
    save_ablation_graph(rows, args.plot)

if __name__ == "__main__":
    main()
