#!/usr/bin/env python3
"""Watch a random agent play Minesweeper."""
import time
import os
from typing import Optional

from src.minesweeper.environment import MinesweeperEnv
from src.minesweeper.board import BoardConfig


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, rows: int = 9, cols: int = 9,
         mines: int = 10, seed: Optional[int] = None):
    """Run demo games with visualization."""
    config = BoardConfig(rows=rows, cols=cols, num_mines=mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    env.action_space.seed(seed)

    print(f"Board: {rows}x{cols} with {mines} mines ({100*mines/(rows*cols):.1f}% density)")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        env.reset(seed=None if seed is None else seed + game)

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            # Random agent: reveal any hidden cell
            mask = env.get_action_mask()
            mask[env.action_space.n // 2:] = 0
            action = env.action_space.sample(mask=mask)
            row, col = action // cols, action % cols

            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({row}, {col})\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--rows", type=int, default=9, help="Board rows")
    parser.add_argument("--cols", type=int, default=9, help="Board columns")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines (default: ~10%% of cells)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    mines = args.mines if args.mines else max(1, int(args.rows * args.cols * 0.1))

    demo(delay=args.delay, games=args.games, rows=args.rows, cols=args.cols,
         mines=mines, seed=args.seed)
