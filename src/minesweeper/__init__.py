"""
Minesweeper game module.

Provides the board engine, cell state, session timers, text rendering
and a Gymnasium environment.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    GameState,
    RevealOutcome,
    EASY,
    MEDIUM,
    HARD,
    DIFFICULTIES,
)
from .timer import SessionTimer, NullTimer, Stopwatch
from .render import render_board, render_status
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "RevealOutcome",
    "EASY",
    "MEDIUM",
    "HARD",
    "DIFFICULTIES",
    "SessionTimer",
    "NullTimer",
    "Stopwatch",
    "render_board",
    "render_status",
    "MinesweeperEnv",
]
