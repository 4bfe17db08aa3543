"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

# Add src to path for imports, and the root for the entry scripts
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(1, str(Path(__file__).parent.parent))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Collaborator Stubs
# ============================================================================

class ScriptedRng:
    """Random source that replays a fixed sequence of integers."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = iter(values)
        self.draws = 0

    def randrange(self, bound: int) -> int:
        value = next(self._values)
        assert 0 <= value < bound
        self.draws += 1
        return value


class RecordingTimer:
    """Timer that records the calls made on it."""

    def __init__(self) -> None:
        self.calls: List[str] = []

    def start(self) -> None:
        self.calls.append("start")

    def stop(self) -> None:
        self.calls.append("stop")

    def reset(self) -> None:
        self.calls.append("reset")


class FakeClock:
    """Clock advanced by hand."""

    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def count_mine_neighbors(board: Board, row: int, col: int) -> int:
    """Count mines around a cell by brute force."""
    count = 0
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            cell = board.get_cell(row + delta_row, col + delta_col)
            if cell is not None and cell.is_mine:
                count += 1
    return count


def snapshot(board: Board) -> Tuple:
    """Capture every cell field and counter of a board."""
    cells = tuple(
        (
            cell.is_mine,
            cell.neighbor_mine_count,
            cell.is_revealed,
            cell.is_flagged,
            cell.is_detonated,
        )
        for row in range(board.config.rows)
        for col in range(board.config.cols)
        for cell in (board.get_cell(row, col),)
    )
    counters = (
        board.num_mines,
        board.num_revealed,
        board.num_flags,
        board.mines_correctly_flagged,
        board.game_state,
    )
    return cells, counters


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def make_board() -> Callable[..., Board]:
    """Build a deployed board with mines at the given positions."""

    def _make(
        rows: int,
        cols: int,
        mines: Sequence[Tuple[int, int]],
        timer: Optional[RecordingTimer] = None,
    ) -> Board:
        values = [value for position in mines for value in position]
        board = Board(
            BoardConfig(rows, cols, len(mines)),
            rng=ScriptedRng(values),
            timer=timer,
        )
        board.deploy_mines(len(mines))
        return board

    return _make


@pytest.fixture
def empty_board() -> Board:
    """Create an undeployed default board."""
    return Board()


@pytest.fixture
def center_mine_board(make_board) -> Board:
    """5x5 board with a single mine in the middle."""
    return make_board(5, 5, [(2, 2)])


@pytest.fixture
def wall_board(make_board) -> Board:
    """3x5 board with a column of mines splitting it in two."""
    return make_board(3, 5, [(0, 2), (1, 2), (2, 2)])


@pytest.fixture
def recording_timer() -> RecordingTimer:
    return RecordingTimer()


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(20, 30, 60)
