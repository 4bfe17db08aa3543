"""
Unit tests for text rendering.
"""
from minesweeper import Board, render_board, render_status


class TestRenderBoard:
    """Test the ASCII board drawing."""

    def test_hidden_board(self, center_mine_board: Board) -> None:
        lines = render_board(center_mine_board).split("\n")
        assert len(lines) == 5
        assert all(line == ". . . . ." for line in lines)

    def test_flag_and_number(self, center_mine_board: Board) -> None:
        center_mine_board.toggle_flag(0, 0)
        center_mine_board.reveal(1, 1)
        lines = render_board(center_mine_board).split("\n")
        assert lines[0] == "F . . . ."
        assert lines[1] == ". 1 . . ."

    def test_detonated_and_other_mines(self, make_board) -> None:
        """The mine that ended the game is drawn apart from the rest."""
        board = make_board(1, 5, [(0, 0), (0, 4)])
        board.reveal(0, 4)
        assert render_board(board) == "* . . . X"

    def test_cleared_region_is_blank(self, wall_board: Board) -> None:
        wall_board.reveal(0, 0)
        assert render_board(wall_board).split("\n")[1] == "  3 . . ."

    def test_reveal_all_shows_hidden_mines(self, center_mine_board: Board) -> None:
        lines = render_board(center_mine_board, reveal_all=True).split("\n")
        assert lines[2] == ". . * . ."


class TestRenderStatus:
    """Test the status line."""

    def test_playing(self, center_mine_board: Board) -> None:
        center_mine_board.toggle_flag(0, 0)
        assert render_status(center_mine_board) == (
            "Mines left: 0 | Cells remaining: 25 | Playing"
        )

    def test_won(self, center_mine_board: Board) -> None:
        center_mine_board.reveal(0, 0)
        assert render_status(center_mine_board).endswith("You Win!")

    def test_lost(self, center_mine_board: Board) -> None:
        center_mine_board.reveal(2, 2)
        assert render_status(center_mine_board).endswith("Game Over")
