class PossibilityMap:
    """
    Candidate positions of every unfilled entry of one box, for one pass.

    store: {entry: [Position, ...]} in the box's open-position order
    """

    def __init__(self, grid, box, linearity=None):
        self.grid = grid
        self.box = box
        self.linearity = linearity
        self.store = {}
        self._linearity_map = {}

    def generate(self):
        self._generate_linearity_map()
        for entry in sorted(self.box.unfilled_entries):
            self.store[entry] = self._allowed_positions_for(entry)
        return self

    def update_possibilities(self, entry, position):
        """Drop a placed entry and remove its cell from every other entry."""
        self.store.pop(entry, None)
        for entry_, positions in self.store.items():
            self.store[entry_] = [p for p in positions if p != position]

    def positions_with_single_possibility(self):
        return {entry: positions[0]
                for entry, positions in self.store.items()
                if len(positions) == 1}

    def _generate_linearity_map(self):
        if self.linearity is None:
            self._linearity_map = {}
            return
        self._linearity_map = self.linearity.linearity_map_for(self.box)

    def _allowed_positions_for(self, entry):
        return [position for position in self.box.open_positions
                if entry not in self._excluded_at(position)]

    def _excluded_at(self, position):
        # grid row/col values plus values other boxes pinned to this row/col
        return self.grid.filled_entries_at(position) | self._linearity_map.get(position, frozenset())

    def __repr__(self):
        body = ", ".join(f"{e}: {[tuple(p) for p in ps]}" for e, ps in self.store.items())
        return f"PossibilityMap({{{body}}})"
