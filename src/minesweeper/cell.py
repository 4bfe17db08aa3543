"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their content
(mine/neighbor count) and their visible state (hidden/revealed/flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# Observation codes for non-numeric cells
OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_MINE = 9
OBS_DETONATED = 10


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        neighbor_mine_count: Count of mines in neighboring cells (0-8).
        is_revealed: Whether the cell has been revealed. Never reverts.
        is_flagged: Whether the player has flagged this cell.
        is_detonated: Whether this is the mine that ended the game.
    """

    is_mine: bool = False
    neighbor_mine_count: int = 0
    is_revealed: bool = False
    is_flagged: bool = False
    is_detonated: bool = False

    # ========================================================================
    # Deployment
    # ========================================================================

    def plant_mine(self) -> None:
        """Hide a mine in this cell."""
        self.is_mine = True

    def increment_neighbor_mine_count(self) -> None:
        """Record one more mine among this cell's neighbors."""
        self.neighbor_mine_count += 1

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.is_revealed or self.is_flagged:
            return False
        self.is_revealed = True
        return True

    def force_reveal(self) -> None:
        """Reveal regardless of flag, used to show mines once the game is lost."""
        self.is_revealed = True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.is_revealed:
            return False
        self.is_flagged = not self.is_flagged
        return True

    def clear_flag(self) -> None:
        """Remove the flag, if any."""
        self.is_flagged = False

    def detonate(self) -> None:
        """Mark this cell as the mine the player stepped on."""
        self.is_detonated = True

    # ========================================================================
    # Derived State
    # ========================================================================

    @property
    def state(self) -> CellState:
        """Get the visual state of the cell."""
        if self.is_revealed:
            return CellState.REVEALED
        if self.is_flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden and unflagged."""
        return self.state == CellState.HIDDEN

    @property
    def is_clear(self) -> bool:
        """Check whether no neighboring cell holds a mine."""
        return self.neighbor_mine_count == 0

    def to_observation(self) -> int:
        """
        Convert cell to observation value for an agent.

        Returns:
            -2: Flagged cell
            -1: Hidden cell
            0-8: Revealed cell with neighbor mine count
            9: Revealed mine (game over state)
            10: The detonated mine
        """
        if self.state == CellState.HIDDEN:
            return OBS_HIDDEN
        if self.state == CellState.FLAGGED:
            return OBS_FLAGGED
        if self.is_detonated:
            return OBS_DETONATED
        if self.is_mine:
            return OBS_MINE
        return self.neighbor_mine_count
