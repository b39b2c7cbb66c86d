from collections import defaultdict
from typing import NamedTuple


class LinearEntry(NamedTuple):
    entry: int
    box: tuple


class Linearity:
    """
    Entries not yet placed but known to sit in a given row/column.

    If every candidate of `entry` inside a box lies on one row, that row's
    other boxes can't take `entry` there. Same for columns. Records are
    tagged with the box that produced them and never pruned.
    """

    def __init__(self):
        self.rows = defaultdict(list)
        self.cols = defaultdict(list)

    def add_from(self, box):
        for entry, positions in box.possibility_map.store.items():
            if not positions:
                continue
            if _row_linear(positions):
                self.rows[positions[0].row].append(LinearEntry(entry, box.key))
            if _col_linear(positions):
                self.cols[positions[0].col].append(LinearEntry(entry, box.key))

    def linearity_map_for(self, box):
        """{Position: set of entries excluded there by other boxes' deductions}"""
        return {position: self._row_entries(position.row, box.key) | self._col_entries(position.col, box.key)
                for position in box.open_positions}

    def _row_entries(self, row, key):
        return {rec.entry for rec in self.rows.get(row, ()) if rec.box != key}

    def _col_entries(self, col, key):
        return {rec.entry for rec in self.cols.get(col, ()) if rec.box != key}

    def __len__(self):
        return sum(len(v) for v in self.rows.values()) + sum(len(v) for v in self.cols.values())


def _row_linear(positions):
    return len({p.row for p in positions}) == 1


def _col_linear(positions):
    return len({p.col for p in positions}) == 1
