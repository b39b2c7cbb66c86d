import os

import numpy as np
import pandas as pd


class PuzzleDataset:
    """
    CSV of puzzles with `quizzes` and `solutions` columns (81-digit strings,
    0 = blank), the layout of the public 1M-sudoku Kaggle dump.
    """

    def __init__(self, csv_path, quiz_column='quizzes', solution_column='solutions'):
        self.csv_path = csv_path
        if csv_path and os.path.exists(csv_path):
            # keep leading zeros: read both columns as strings
            self.df = pd.read_csv(csv_path, dtype={quiz_column: str, solution_column: str})
        else:
            raise FileNotFoundError(f"CSV file not found at {csv_path}")
        self.quiz_column = quiz_column
        self.solution_column = solution_column

    def __len__(self):
        return len(self.df)

    def __getitem__(self, idx):
        row = self.df.iloc[idx]
        return row[self.quiz_column], row[self.solution_column]

    def sample_indices(self, num_samples, seed=None):
        rng = np.random.default_rng(seed)
        return rng.choice(len(self), size=min(len(self), num_samples), replace=False)
