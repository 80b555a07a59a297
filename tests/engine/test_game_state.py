"""
Tests for win/loss detection.

WIN: any cell reaches win_value.
LOSS: not won, board full, and neither RIGHT nor UP would change it.
"""

from lib2048.agent import Direction, GameState
from lib2048.board import Board
from lib2048.config import EngineConfig


class TestWinDetection:
    """Reaching the win value ends the game with WIN."""

    def test_merge_into_win_value(self, board_from_grid):
        board = board_from_grid([
            [10, 10, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
        ])
        assert board.get_game_state() == GameState.ONGOING

        board.move(Direction.LEFT)

        assert board.get_cells()[0][0] == 11
        assert board.get_game_state() == GameState.WIN

    def test_above_win_value_is_win(self, board_from_grid):
        board = board_from_grid([[12, 0, 0, 0]] + [[0] * 4] * 3)
        assert board.get_game_state() == GameState.WIN

    def test_custom_win_value(self, board_from_grid):
        config = EngineConfig(win_value=3)
        board = board_from_grid([[2, 2, 0, 0]] + [[0] * 4] * 3, config=config)

        board.move(Direction.RIGHT, add_random_tile=False)

        assert board.get_game_state() == GameState.WIN

    def test_win_takes_priority_over_full_board(self, board_from_grid, checkerboard):
        grid = [row[:] for row in checkerboard]
        grid[0][0] = 11
        assert board_from_grid(grid).get_game_state() == GameState.WIN

    def test_set_cell_updates_state(self):
        """Placing the win tile by hand ends the game like a merge would."""
        board = Board.new_empty()
        board.set_cell_at((0, 0), 11)

        assert board.get_game_state() == GameState.WIN
        assert board.clone().get_game_state() == GameState.WIN
        assert board.next_state(Direction.LEFT).get_game_state() == GameState.WIN

    def test_set_cell_can_clear_win(self, board_from_grid):
        board = board_from_grid([[11, 0, 0, 0]] + [[0] * 4] * 3)
        board.set_cell_at((0, 0), 0)
        assert board.get_game_state() == GameState.ONGOING


class TestLossDetection:
    """A full board with no slide or merge left is lost."""

    def test_checkerboard_is_loss(self, board_from_grid, checkerboard):
        assert board_from_grid(checkerboard).get_game_state() == GameState.LOSS

    def test_horizontal_pair_keeps_game_going(self, board_from_grid):
        board = board_from_grid([
            [2, 2, 3, 4],
            [3, 4, 1, 2],
            [1, 3, 2, 1],
            [4, 1, 3, 2],
        ])
        assert board.get_game_state() == GameState.ONGOING

    def test_vertical_pair_keeps_game_going(self, board_from_grid):
        """Only UP finds the move here, RIGHT does not."""
        board = board_from_grid([
            [1, 2, 1, 2],
            [1, 3, 2, 1],
            [2, 1, 3, 2],
            [3, 2, 1, 3],
        ])
        assert board.get_game_state() == GameState.ONGOING

    def test_empty_cell_keeps_game_going(self, board_from_grid, checkerboard):
        grid = [row[:] for row in checkerboard]
        grid[2][1] = 0
        assert board_from_grid(grid).get_game_state() == GameState.ONGOING

    def test_probe_does_not_modify_board(self, board_from_grid):
        grid = [
            [2, 2, 3, 4],
            [3, 4, 1, 2],
            [1, 3, 2, 1],
            [4, 1, 3, 2],
        ]
        board = board_from_grid(grid, score=5)
        board.get_game_state()
        assert board.get_cells() == grid
        assert board.get_score() == 5

    def test_move_into_loss(self, board_from_grid, make_rng):
        """Last merge fills the board with a dead position."""
        rng = make_rng(picks=[0], rolls=[0.99])
        board = board_from_grid([
            [0, 2, 3, 2],
            [3, 2, 3, 2],
            [2, 3, 2, 3],
            [3, 2, 3, 2],
        ], rng=rng)
        board.move(Direction.LEFT)

        # Row 0 slides to [2,3,2,0]; the spawn "2" (value 1) lands at (3, 0)
        assert board.get_cells()[0] == [2, 3, 2, 1]
        assert board.get_game_state() == GameState.LOSS

    def test_state_recomputed_after_unchanged_move(self, board_from_grid, checkerboard):
        board = board_from_grid(checkerboard)
        board.game_state = GameState.ONGOING

        board.move(Direction.UP)

        assert board.get_game_state() == GameState.LOSS


class TestResetState:
    """reset() always returns the game to ONGOING."""

    def test_reset_after_loss(self, board_from_grid, checkerboard):
        board = board_from_grid(checkerboard, score=300)
        board.reset()
        assert board.get_game_state() == GameState.ONGOING
        assert board.get_score() == 0
