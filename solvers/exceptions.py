class SudokuError(Exception):
    pass


class StuckState(SudokuError):
    """
    A full pass over all boxes filled nothing: the puzzle needs a stronger
    technique than naked singles + box-line reduction.
    """

    def __init__(self, result, message=None):
        self.result = result
        super().__init__(message or result.message)


class PuzzleFormatError(SudokuError, ValueError):
    pass
