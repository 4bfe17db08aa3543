#!/usr/bin/env python3
"""
Minesweeper - Terminal entry point.

Usage:
    python main.py [--difficulty {easy,medium,hard}] [--seed N]
    python main.py --rows 5 --cols 5 --mines 3

Commands while playing:
    r ROW COL   reveal a cell
    f ROW COL   toggle a flag
    q           quit
"""
import argparse
import logging
import random
from typing import Optional, Tuple

from src.minesweeper.board import Board, BoardConfig, DIFFICULTIES
from src.minesweeper.render import render_board, render_status
from src.minesweeper.timer import Stopwatch


def parse_command(line: str) -> Tuple[str, Optional[int], Optional[int]]:
    """
    Parse one line of player input.

    Returns:
        Tuple of (action, row, col); row and col are None for "q".

    Raises:
        ValueError: If the line is not a known command.
    """
    parts = line.split()
    if not parts:
        raise ValueError("Empty command")
    action = parts[0].lower()
    if action == "q":
        return action, None, None
    if action not in ("r", "f") or len(parts) != 3:
        raise ValueError(f"Unknown command: {line.strip()}")
    return action, int(parts[1]), int(parts[2])


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Board configuration from the difficulty preset and overrides."""
    preset = DIFFICULTIES[args.difficulty]
    return BoardConfig(
        rows=args.rows if args.rows is not None else preset.rows,
        cols=args.cols if args.cols is not None else preset.cols,
        num_mines=args.mines if args.mines is not None else preset.num_mines,
    )


def play(config: BoardConfig, seed: Optional[int] = None) -> None:
    """Run one interactive game in the terminal."""
    stopwatch = Stopwatch()
    board = Board(config, rng=random.Random(seed), timer=stopwatch)
    board.deploy_mines(config.num_mines)

    print(f"Board: {config.rows}x{config.cols} with {config.num_mines} mines")
    print("Commands: r ROW COL (reveal), f ROW COL (flag), q (quit)\n")

    while board.is_playing:
        print(render_board(board))
        print(render_status(board))
        try:
            line = input("> ")
        except EOFError:
            return

        try:
            action, row, col = parse_command(line)
        except ValueError as exc:
            print(exc)
            continue

        if action == "q":
            return
        if board.get_cell(row, col) is None:
            print(f"({row}, {col}) is off the board")
            continue

        if action == "r":
            board.reveal(row, col)
        else:
            board.toggle_flag(row, col)

    print(render_board(board))
    print(render_status(board))
    banner = "You Win!" if board.won else "Game Over"
    print(f"\n*** {banner} *** ({stopwatch.elapsed:.1f}s)")


def main() -> None:
    """Parse arguments and start a game."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        default="easy",
        help="Difficulty preset",
    )
    parser.add_argument("--rows", type=int, default=None, help="Override rows")
    parser.add_argument("--cols", type=int, default=None, help="Override columns")
    parser.add_argument("--mines", type=int, default=None, help="Override mine count")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--verbose", action="store_true", help="Show engine debug logging"
    )
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        config = build_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    play(config, seed=args.seed)


if __name__ == "__main__":
    main()
