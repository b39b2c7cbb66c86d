import sys
import os
import time
import numpy as np
import argparse
import matplotlib.pyplot as plt
from tqdm import tqdm

# 프로젝트 루트 경로 추가
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from data.load_dataset import PuzzleDataset
from data.input_scanner import InputScanner
from solvers.box_line_solver import Solver
from utils.grid_utils import array_to_string, is_solved_grid

# -------------------------------------------------------------------------
# 1. Visualization
# -------------------------------------------------------------------------
def save_benchmark_graph(solved_rate, stuck_rate, avg_passes, avg_time, save_path='benchmark_result.png'):
    labels = ['Solved', 'Stuck']
    rates = [solved_rate, stuck_rate]

    fig, ax1 = plt.subplots(figsize=(10, 6))

    color = 'tab:blue'
    ax1.set_xlabel('Outcome')
    ax1.set_ylabel('Share of puzzles (%)', color=color)
    ax1.set_ylim(0, 110)
    bars = ax1.bar(labels, rates, color=[color, 'tab:red'], alpha=0.6)
    ax1.tick_params(axis='y', labelcolor=color)

    for bar in bars:
        height = bar.get_height()
        ax1.text(bar.get_x() + bar.get_width()/2., height,
                f'{height:.1f}%', ha='center', va='bottom')

    plt.title(f'Box-Line Solver: {avg_passes:.2f} passes / {avg_time * 1000:.2f} ms on average')
    fig.tight_layout()

    plt.savefig(save_path)
    print(f"📈 Saved chart to {save_path}")
    plt.close()

# -------------------------------------------------------------------------
# 2. Evaluation Logic
# -------------------------------------------------------------------------
def evaluate_benchmark(dataset, num_samples=1000, seed=None, plot_path='benchmark_result.png'):
    solved = 0
    stuck = 0
    correct = 0
    total_time = 0
    total_passes = 0

    indices = dataset.sample_indices(num_samples, seed=seed)
    if len(indices) == 0:
        print("⚠️ No puzzles to benchmark.")
        return None

    print(f"🔍 Benchmarking on {len(indices)} samples...")

    for idx in tqdm(indices, desc="Running Benchmark"):
        quiz_str, sol_str = dataset[idx]
        grid, boxes = InputScanner(quiz_str).scan()

        start = time.time()
        result = Solver(grid, boxes).solve()
        total_time += time.time() - start
        total_passes += result.passes

        if result.solved:
            solved += 1
            if is_solved_grid(result.grid) and array_to_string(result.grid) == sol_str:
                correct += 1
        else:
            stuck += 1

    n = len(indices)
    solved_rate = solved / n * 100
    stuck_rate = stuck / n * 100
    avg_time = total_time / n
    avg_passes = total_passes / n

    print("\n" + "="*55)
    print("📊 Final Benchmark Results")
    print("="*55)
    print(f"Solved:   {solved_rate:.2f}% ({correct}/{solved} match the reference solution)")
    print(f"Stuck:    {stuck_rate:.2f}%")
    print(f"Avg:      {avg_passes:.2f} passes | {avg_time:.5f} sec")
    print("="*55)

    save_benchmark_graph(solved_rate, stuck_rate, avg_passes, avg_time, plot_path)
    return {'solved': solved, 'stuck': stuck, 'correct': correct, 'samples': n}

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--csv', type=str, default='./data/raw/sudoku.csv')
    parser.add_argument('--samples', type=int, default=1000)
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--plot', type=str, default='benchmark_result.png')
    args = parser.parse_args()

    try:
        dataset = PuzzleDataset(args.csv)
    except FileNotFoundError as e:
        print(f"❌ {e}")
        return

    evaluate_benchmark(dataset, num_samples=args.samples, seed=args.seed, plot_path=args.plot)

if __name__ == "__main__":
    main()
