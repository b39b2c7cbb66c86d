# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "solvers", "data", "utils" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from data.input_scanner import InputScanner  # noqa: E402

# naked singles are enough
EASY = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
EASY_SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"
# needs box-line reduction
BOX_LINE = "000000907000420180000705026100904000050000040000507009920108000034059000507000000"
BOX_LINE_SOLUTION = "462831957795426183381795426173984265659312748248567319926178534834259671517643892"
# partial progress, then stuck
PLATINUM_BLONDE = "000000000000003085001020000000507000004000100090000000500000073002010000000040009"
# no progress at all
AI_ESCARGOT = "800000000003600000070090200050007000000045700000100030001000068008500010090000400"


def scan(puzzle):
    return InputScanner(puzzle).scan()


@pytest.fixture
def easy():
    return scan(EASY)


@pytest.fixture
def box_line():
    return scan(BOX_LINE)
