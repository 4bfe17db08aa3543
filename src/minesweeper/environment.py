"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over the board engine.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, RevealOutcome
from .cell import OBS_DETONATED, OBS_FLAGGED
from .render import render_board, render_status


# Rewards
REWARD_SAFE = 1.0
REWARD_WIN = 10.0
REWARD_MINE = -10.0
REWARD_INVALID = -0.1
REWARD_FLAG = 0.0


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -2 = flagged cell
        - -1 = hidden cell
        - 0-8 = revealed cell with neighbor mine count
        - 9 = revealed mine, 10 = detonated mine

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < n reveals cell (i // cols, i % cols); action n + i
        toggles the flag on the same cell.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for an action that changed nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 20x30 with 60 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_DETONATED,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )

        self._num_cells = self.config.rows * self.config.cols
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0
        self._total_safe_cells = self._num_cells - self.config.num_mines

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game with freshly deployed mines.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        mine_seed = int(self.np_random.integers(0, 2**32))
        self.board = Board(self.config, rng=random.Random(mine_seed))
        self.board.deploy_mines(self.config.num_mines)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal index in [0, n) or flag index in [n, 2n).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        flag, row, col = self._action_to_position(int(action))
        self._steps += 1

        if flag:
            reward = self._apply_flag(row, col)
        else:
            reward = self._apply_reveal(row, col)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return observation, reward, terminated, False, info

    def _action_to_position(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, row, col)."""
        flag = action >= self._num_cells
        index = action - self._num_cells if flag else action
        return flag, index // self.config.cols, index % self.config.cols

    def _apply_reveal(self, row: int, col: int) -> float:
        outcome = self.board.reveal(row, col)
        if outcome == RevealOutcome.IGNORED:
            return REWARD_INVALID
        if outcome == RevealOutcome.DETONATED:
            return REWARD_MINE
        if self.board.won:
            return REWARD_WIN
        return REWARD_SAFE

    def _apply_flag(self, row: int, col: int) -> float:
        if not self.board.toggle_flag(row, col):
            return REWARD_INVALID
        if self.board.won:
            return REWARD_WIN
        return REWARD_FLAG

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.num_revealed,
            "flags": self.board.num_flags,
            "total_safe": self._total_safe_cells,
            "game_state": self.board.game_state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = render_board(self.board) + "\n" + render_status(self.board)
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            int8 array, 1 where the action would change the board.
        """
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if not self.board.is_playing:
            return mask
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                cell = self.board.get_cell(row, col)
                index = row * self.config.cols + col
                if cell.is_hidden:
                    mask[index] = 1
                if not cell.is_revealed:
                    mask[self._num_cells + index] = 1
        return mask
