"""
Text rendering of a Minesweeper board.
"""
from .board import Board, GameState
from .cell import Cell

HIDDEN_CHAR = "."
FLAG_CHAR = "F"
MINE_CHAR = "*"
DETONATED_CHAR = "X"
EMPTY_CHAR = " "


def _cell_char(cell: Cell, reveal_all: bool) -> str:
    if cell.is_revealed or (reveal_all and cell.is_mine):
        if cell.is_detonated:
            return DETONATED_CHAR
        if cell.is_mine:
            return MINE_CHAR
        if cell.is_clear:
            return EMPTY_CHAR
        return str(cell.neighbor_mine_count)
    if cell.is_flagged:
        return FLAG_CHAR
    return HIDDEN_CHAR


def render_board(board: Board, reveal_all: bool = False) -> str:
    """
    Render board as ASCII string, one line per row.

    Args:
        board: Board to draw.
        reveal_all: Show hidden mines too, for debugging.

    Returns:
        Rows of space-separated cell characters.
    """
    lines = []
    for row in range(board.config.rows):
        row_chars = [
            _cell_char(board.get_cell(row, col), reveal_all)
            for col in range(board.config.cols)
        ]
        lines.append(" ".join(row_chars))
    return "\n".join(lines)


def render_status(board: Board) -> str:
    """One-line summary of mines left, cells remaining and game state."""
    if board.game_state == GameState.WON:
        state = "You Win!"
    elif board.game_state == GameState.LOST:
        state = "Game Over"
    else:
        state = "Playing"
    mines_left = board.num_mines - board.num_flags
    return (
        f"Mines left: {mines_left} | "
        f"Cells remaining: {board.num_cells_remaining} | {state}"
    )
