# tests/test_input_scanner.py
import pytest

from conftest import EASY
from data.input_scanner import InputScanner, build_boxes, parse_puzzle_string
from solvers.exceptions import PuzzleFormatError
from solvers.grid import BOX_ORIGINS, Grid, Position as P


def write_puzzle(path, puzzle):
    rows = [puzzle[i:i + 9] for i in range(0, 81, 9)]
    path.write_text("\n".join(" ".join(row) for row in rows) + "\n\n")
    return path


def test_scan_string_builds_grid_and_boxes():
    grid, boxes = InputScanner(EASY).scan()
    assert grid.remaining == 51
    assert grid.store[0].tolist() == [5, 3, 0, 0, 7, 0, 0, 0, 0]
    assert len(boxes) == 9


def test_scan_file_matches_string(tmp_path):
    path = write_puzzle(tmp_path / "input", EASY)
    grid, boxes = InputScanner(str(path)).scan()
    expected, _ = InputScanner(EASY).scan()
    assert grid.store.tolist() == expected.store.tolist()
    assert grid.remaining == expected.remaining


def test_boxes_have_open_cells_and_missing_entries():
    grid, boxes = InputScanner(EASY).scan()
    assert [box.key for box in boxes] == list(BOX_ORIGINS)

    first = boxes[0]
    assert first.open_positions == [P(0, 2), P(1, 1), P(1, 2), P(2, 0)]
    assert first.unfilled_entries == {1, 2, 4, 7}
    for box in boxes:
        assert len(box.open_positions) == len(box.unfilled_entries)
    assert sum(len(box.open_positions) for box in boxes) == grid.remaining


def test_build_boxes_on_full_grid_has_nothing_open():
    solved = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"
    grid = Grid.from_rows(parse_puzzle_string(solved))
    assert all(not box.open_positions and not box.unfilled_entries for box in build_boxes(grid))


def test_dots_count_as_blanks():
    assert parse_puzzle_string(EASY.replace("0", ".")).tolist() == parse_puzzle_string(EASY).tolist()


@pytest.mark.parametrize("bad", [EASY[:-1], EASY[:-1] + "x", ""])
def test_bad_strings_are_rejected(bad):
    with pytest.raises(PuzzleFormatError):
        InputScanner(bad).scan()


def test_bad_file_is_rejected(tmp_path):
    path = tmp_path / "short"
    path.write_text("1 2 3\n")
    with pytest.raises(PuzzleFormatError):
        InputScanner(str(path)).scan()


def test_format_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_puzzle_string("123")


def test_box_row_and_column_ranges():
    _, boxes = InputScanner(EASY).scan()
    middle = boxes[4]
    assert middle.key == (3, 3)
    assert list(middle.rows()) == [3, 4, 5]
    assert list(middle.cols()) == [3, 4, 5]
