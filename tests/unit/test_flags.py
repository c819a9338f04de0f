"""
Unit tests for flag and win tracking.
"""
from minesweeper import (
    Board,
    check_win,
    count_flags,
    create_empty_board,
    flag_all_mines,
    reveal_cascade,
    toggle_flag,
)


class TestToggleFlag:
    """Test flag toggling."""

    def test_flag_hidden_cell(self, empty_board: Board) -> None:
        board, changed = toggle_flag(empty_board, 0, 0)
        assert changed is True
        assert board.get_cell(0, 0).is_flagged is True
        assert empty_board.get_cell(0, 0).is_flagged is False

    def test_toggle_twice_unflags(self, empty_board: Board) -> None:
        board, _ = toggle_flag(empty_board, 0, 0)
        board, changed = toggle_flag(board, 0, 0)
        assert changed is True
        assert board.get_cell(0, 0).is_flagged is False

    def test_flag_revealed_cell_is_noop(
        self, corner_mine_board: Board
    ) -> None:
        """Revealed cells never change their flag."""
        opened, _ = reveal_cascade(corner_mine_board, 0, 1)
        board, changed = toggle_flag(opened, 0, 1)
        assert changed is False
        assert board is opened
        assert board.get_cell(0, 1).is_flagged is False


class TestCountFlags:
    """Test flag counting."""

    def test_no_flags(self, empty_board: Board) -> None:
        assert count_flags(empty_board) == 0

    def test_counts_every_flag(self, empty_board: Board) -> None:
        board = empty_board
        for col in range(4):
            board, _ = toggle_flag(board, 0, col)
        assert count_flags(board) == 4


class TestCheckWin:
    """Test win detection."""

    def test_unopened_board_is_not_won(
        self, corner_mine_board: Board
    ) -> None:
        assert check_win(corner_mine_board) is False

    def test_all_safe_cells_revealed_wins(
        self, corner_mine_board: Board
    ) -> None:
        """Win depends only on safe cells; the mine needs no flag."""
        board, _ = reveal_cascade(corner_mine_board, 2, 2)
        assert board.get_cell(0, 0).is_flagged is False
        assert check_win(board) is True

    def test_one_hidden_safe_cell_blocks_win(self, make_board) -> None:
        board = make_board(3, 3, [(0, 0), (0, 2), (2, 0), (2, 2)])
        for cell in list(board.iter_cells()):
            if not cell.is_mine and cell.position != (1, 1):
                board, _ = reveal_cascade(board, cell.row, cell.col)
        assert check_win(board) is False
        board, _ = reveal_cascade(board, 1, 1)
        assert check_win(board) is True

    def test_flags_on_all_mines_do_not_win(
        self, corner_mine_board: Board
    ) -> None:
        board, _ = toggle_flag(corner_mine_board, 0, 0)
        assert check_win(board) is False

    def test_mine_free_board_needs_every_cell(self) -> None:
        board = create_empty_board(2, 2)
        assert check_win(board) is False
        board, _ = reveal_cascade(board, 0, 0)
        assert check_win(board) is True


class TestFlagAllMines:
    """Test cosmetic auto-flagging."""

    def test_flags_only_mines(self, make_board) -> None:
        board = flag_all_mines(make_board(3, 3, [(0, 0), (2, 1)]))
        flagged = {
            cell.position for cell in board.iter_cells() if cell.is_flagged
        }
        assert flagged == {(0, 0), (2, 1)}
