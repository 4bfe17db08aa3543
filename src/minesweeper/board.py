"""
Board module for Minesweeper game.

Implements the game board with mine deployment, cell revealing,
flagging and win/loss evaluation. One Board is one game session.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .timer import NullTimer, SessionTimer

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class RevealOutcome(Enum):
    """Result of a reveal request."""

    IGNORED = auto()
    REVEALED = auto()
    CASCADED = auto()
    DETONATED = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Mines to deploy when a new game starts.
    """

    rows: int = 20
    cols: int = 30
    num_mines: int = 60

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols


# Preset difficulty levels, all on the 20x30 grid
EASY = BoardConfig(20, 30, 60)
MEDIUM = BoardConfig(20, 30, 90)
HARD = BoardConfig(20, 30, 120)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and the running counters of the session.
    Player actions that cannot apply (out of bounds, game over, settled
    cell) are no-ops; only misuse of ``deploy_mines`` raises.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        timer: Optional[SessionTimer] = None,
    ) -> None:
        """
        Create an empty board with no mines.

        Args:
            config: Board dimensions and default mine count.
            rng: Source of uniform integers, needs ``randrange(bound)``.
            timer: Session timer started on the first accepted action.
        """
        self.config = config or BoardConfig()
        self._rng = rng or random.Random()
        self._timer = timer or NullTimer()
        self._init_state()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_state(self) -> None:
        """Create empty grid of cells and zero the counters."""
        self._grid: List[List[Cell]] = [
            [Cell() for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]
        self._game_state = GameState.PLAYING
        self._deployed = False
        self._timer_started = False
        self._num_mines = 0
        self._num_revealed = 0
        self._num_flags = 0
        self._mines_correctly_flagged = 0

    def deploy_mines(self, count: int) -> None:
        """
        Place mines uniformly at random.

        Draws positions until ``count`` distinct cells hold a mine; draws
        landing on an existing mine are discarded. Neighbor counts are
        updated as each mine is planted.

        Args:
            count: Number of mines, at least 0 and below the cell count.

        Raises:
            RuntimeError: If mines were already deployed on this board.
            ValueError: If count is out of range.
        """
        if self._deployed:
            raise RuntimeError("Mines have already been deployed")
        max_mines = self.total_cells - 1
        if count < 0 or count > max_mines:
            raise ValueError(f"Mine count must be between 0 and {max_mines}")

        draws = 0
        while self._num_mines < count:
            row = self._rng.randrange(self.config.rows)
            col = self._rng.randrange(self.config.cols)
            draws += 1
            cell = self._grid[row][col]
            if cell.is_mine:
                continue
            cell.plant_mine()
            for neighbor_row, neighbor_col in self._get_neighbors(row, col):
                self._grid[neighbor_row][neighbor_col].increment_neighbor_mine_count()
            self._num_mines += 1

        self._deployed = True
        logger.debug("Deployed %d mines in %d draws", count, draws)

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    def _iter_cells(self) -> Iterator[Cell]:
        for board_row in self._grid:
            yield from board_row

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal a cell at the given position.

        A mine ends the game and shows every other mine. A cell with no
        neighboring mines also reveals the surrounding region.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            What the reveal did; IGNORED if nothing changed.
        """
        if not self._can_act(row, col):
            return RevealOutcome.IGNORED

        cell = self._grid[row][col]
        if not cell.reveal():
            return RevealOutcome.IGNORED

        self._num_revealed += 1
        self._start_timer()

        if cell.is_mine:
            self._detonate(row, col)
            return RevealOutcome.DETONATED

        outcome = RevealOutcome.REVEALED
        if cell.is_clear:
            self._flood_reveal(row, col)
            outcome = RevealOutcome.CASCADED

        self._check_win_condition(cell)
        return outcome

    def _can_act(self, row: int, col: int) -> bool:
        """Check if a player action may touch this position."""
        if self._game_state != GameState.PLAYING:
            return False
        if not self._deployed:
            return False
        return self._is_valid_position(row, col)

    def _start_timer(self) -> None:
        if not self._timer_started:
            self._timer_started = True
            self._timer.start()

    def _flood_reveal(self, row: int, col: int) -> None:
        """Reveal the zero region around a cell and its numbered border."""
        revealed_before = self._num_revealed
        pending = [(row, col)]
        while pending:
            current_row, current_col = pending.pop()
            for neighbor_row, neighbor_col in self._get_neighbors(
                current_row, current_col
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if neighbor.is_revealed or neighbor.is_mine:
                    continue
                if neighbor.is_flagged:
                    neighbor.clear_flag()
                    self._num_flags -= 1
                neighbor.reveal()
                self._num_revealed += 1
                if neighbor.is_clear:
                    pending.append((neighbor_row, neighbor_col))
        logger.debug(
            "Cascade from (%d, %d) revealed %d cells",
            row, col, self._num_revealed - revealed_before,
        )

    def _detonate(self, row: int, col: int) -> None:
        """End the game as lost and show all mines."""
        self._grid[row][col].detonate()
        self._game_state = GameState.LOST
        for cell in self._iter_cells():
            if cell.is_mine and not cell.is_revealed:
                cell.force_reveal()
        self._timer.stop()
        logger.info("Mine detonated at (%d, %d), game lost", row, col)

    def _check_win_condition(self, acted_on: Cell) -> None:
        """Declare a win by clearance or by exact flagging."""
        if self._game_state != GameState.PLAYING:
            return
        cleared = (
            self.num_cells_remaining == self._num_mines
            and not acted_on.is_mine
        )
        if cleared or self._all_mines_flagged():
            self._game_state = GameState.WON
            self._timer.stop()
            logger.info(
                "Game won (%s)", "cleared" if cleared else "all mines flagged"
            )

    def _all_mines_flagged(self) -> bool:
        """Check that the flags sit exactly on the mines."""
        if self._num_mines == 0 or self._num_flags != self._num_mines:
            return False
        return all(cell.is_flagged for cell in self._iter_cells() if cell.is_mine)

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if not self._can_act(row, col):
            return False

        cell = self._grid[row][col]
        if not cell.toggle_flag():
            return False

        delta = 1 if cell.is_flagged else -1
        self._num_flags += delta
        if cell.is_mine:
            self._mines_correctly_flagged += delta

        self._start_timer()
        self._check_win_condition(cell)
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def deployed(self) -> bool:
        """Check whether mines have been deployed."""
        return self._deployed

    @property
    def num_mines(self) -> int:
        return self._num_mines

    @property
    def num_revealed(self) -> int:
        return self._num_revealed

    @property
    def num_flags(self) -> int:
        return self._num_flags

    @property
    def mines_correctly_flagged(self) -> int:
        return self._mines_correctly_flagged

    @property
    def total_cells(self) -> int:
        return self.config.total_cells

    @property
    def num_cells_remaining(self) -> int:
        """Number of cells not yet revealed."""
        return self.total_cells - self._num_revealed

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def mine_positions(self) -> List[Tuple[int, int]]:
        """List the (row, col) positions holding a mine."""
        return [
            (row, col)
            for row in range(self.config.rows)
            for col in range(self.config.cols)
            if self._grid[row][col].is_mine
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an agent.

        Returns:
            2D numpy array where:
                -2 = flagged
                -1 = hidden
                0-8 = revealed with neighbor mine count
                9 = revealed mine
                10 = detonated mine
        """
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of valid cells to reveal.

        Returns:
            List of (row, col) positions that are hidden and unflagged.
        """
        actions = []
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if self._grid[row][col].is_hidden:
                    actions.append((row, col))
        return actions

    def reset(self) -> None:
        """Reset board to the empty, undeployed state for a new game."""
        self._init_state()
        self._timer.reset()
