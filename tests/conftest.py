import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from dropfour.game.board import Board


@pytest.fixture
def board():
    return Board()
