"""
Unit tests for mine placement.
"""
import random
from collections import Counter

import pytest
from minesweeper import (
    Board,
    compute_neighbor_counts,
    create_empty_board,
    place_mines_after_first_click,
)


def mine_positions(board: Board) -> set:
    return {cell.position for cell in board.iter_cells() if cell.is_mine}


def safe_zone(board: Board, row: int, col: int) -> set:
    return {(row, col), *board.neighbors(row, col)}


# ============================================================================
# Placement Tests
# ============================================================================

class TestPlaceMines:
    """Test deferred, click-safe mine placement."""

    def test_beginner_places_exactly_ten_mines(self, rng: random.Random) -> None:
        """10 mines on 9x9 around a center click, none in the safe zone."""
        board = create_empty_board(9, 9)
        mined = place_mines_after_first_click(board, 4, 4, 10, rng)
        mines = mine_positions(mined)
        assert len(mines) == 10
        assert not mines & safe_zone(board, 4, 4)

    @pytest.mark.parametrize("row,col", [(0, 0), (0, 4), (8, 8), (4, 0)])
    def test_safe_zone_on_edges(
        self, rng: random.Random, row: int, col: int
    ) -> None:
        """The clipped safe zone of an edge click stays mine-free."""
        board = create_empty_board(9, 9)
        mined = place_mines_after_first_click(board, row, col, 10, rng)
        assert not mine_positions(mined) & safe_zone(board, row, col)
        assert mined.mine_count == 10

    def test_input_board_is_not_modified(self, rng: random.Random) -> None:
        board = create_empty_board(9, 9)
        place_mines_after_first_click(board, 4, 4, 10, rng)
        assert board.mine_count == 0

    def test_too_many_mines_fills_all_eligible_cells(
        self, rng: random.Random
    ) -> None:
        """Requests beyond the eligible area are capped, not rejected."""
        board = create_empty_board(3, 4)
        mined = place_mines_after_first_click(board, 1, 1, 11, rng)
        # Clicking (1, 1) protects columns 0-2; only column 3 is eligible.
        assert mine_positions(mined) == {(0, 3), (1, 3), (2, 3)}

    def test_no_eligible_cells_places_nothing(self, rng: random.Random) -> None:
        board = create_empty_board(3, 3)
        mined = place_mines_after_first_click(board, 1, 1, 5, rng)
        assert mined.mine_count == 0

    def test_seeded_placement_is_repeatable(self) -> None:
        board = create_empty_board(16, 30)
        first = place_mines_after_first_click(
            board, 8, 15, 99, random.Random(7)
        )
        second = place_mines_after_first_click(
            board, 8, 15, 99, random.Random(7)
        )
        assert mine_positions(first) == mine_positions(second)

    def test_placement_is_uniform_over_eligible_cells(self) -> None:
        """Every eligible cell is mined about equally often."""
        board = create_empty_board(4, 4)
        rng = random.Random(99)
        draws = 2000
        hits = Counter()
        for _ in range(draws):
            hits.update(
                mine_positions(place_mines_after_first_click(board, 0, 0, 2, rng))
            )
        eligible = {
            cell.position for cell in board.iter_cells()
        } - safe_zone(board, 0, 0)
        assert set(hits) == eligible

        # 12 eligible cells, 2 mines per draw: each cell expects 2000 / 6.
        expected = draws * 2 / len(eligible)
        for position in eligible:
            assert 0.75 * expected <= hits[position] <= 1.25 * expected


# ============================================================================
# Neighbor Count Tests
# ============================================================================

class TestNeighborCounts:
    """Test adjacent mine counting."""

    def test_counts_match_adjacent_mines(self, rng: random.Random) -> None:
        """Every safe cell's count equals its true number of mine neighbors."""
        mined = place_mines_after_first_click(
            create_empty_board(16, 16), 8, 8, 40, rng
        )
        for cell in mined.iter_cells():
            if cell.is_mine:
                assert cell.neighbor_count == 0
                continue
            expected = sum(
                1 for neighbor in mined.neighbor_cells(cell.row, cell.col)
                if neighbor.is_mine
            )
            assert cell.neighbor_count == expected

    def test_corner_mine_counts(self, corner_mine_board: Board) -> None:
        counts = [
            [cell.neighbor_count for cell in row]
            for row in corner_mine_board.cells
        ]
        assert counts == [[0, 1, 0], [1, 1, 0], [0, 0, 0]]

    def test_surrounded_cell_counts_eight(self, make_board) -> None:
        ring = [(r, c) for r in range(3) for c in range(3) if (r, c) != (1, 1)]
        board = make_board(3, 3, ring)
        assert board.get_cell(1, 1).neighbor_count == 8

    def test_empty_board_counts_stay_zero(self, empty_board: Board) -> None:
        recounted = compute_neighbor_counts(empty_board)
        assert all(cell.neighbor_count == 0 for cell in recounted.iter_cells())
