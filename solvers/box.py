from solvers.grid import BOX_SIZE, Position


class Box:
    """
    One 3x3 block of the board.

    key: (row_offset, col_offset) of the block's top-left cell
    open_positions: unfilled cells, row-major
    unfilled_entries: values 1-9 not yet present in the block
    possibility_map: rebuilt by the solver on every pass
    """

    def __init__(self, key):
        self.key = key
        self.open_positions = []
        self.unfilled_entries = set()
        self.possibility_map = None

    def add_open_position(self, row, col):
        self.open_positions.append(Position(row, col))

    def add_unfilled_entries(self, entries):
        self.unfilled_entries.update(entries)

    def fill(self, entry, position):
        self.unfilled_entries.discard(entry)
        self.open_positions.remove(position)
        self.possibility_map.update_possibilities(entry, position)

    def rows(self):
        return range(self.key[0], self.key[0] + BOX_SIZE)

    def cols(self):
        return range(self.key[1], self.key[1] + BOX_SIZE)

    def __repr__(self):
        return (f"Box(key={self.key}, open={len(self.open_positions)}, "
                f"missing={sorted(self.unfilled_entries)})")
