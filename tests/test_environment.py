"""
Tests for the headless game controller.

Tests cover the controller interface, tile spawning after moves, detection of a lost game and
the configuration it is built from.
"""

from unittest import TestCase, main

import numpy as np

from tilemerge.config import GameConfig
from tilemerge.core.direction import Direction
from tilemerge.core.gameboard import GameBoard
from tilemerge.core.random_source import GeneratorSource
from tilemerge.envs import Game, GameState


class TestGameInterface(TestCase):
    """Test Game API and state management."""

    def setUp(self):
        """Initialize a fresh game before each test."""
        self.game = Game(GameConfig(seed=42))

    def test_reset_state_initialization(self):
        """Reset starts a running game with exactly one tile."""
        obs = self.game.reset()

        # ##>: Exactly one tile, a 2 or a 4.
        self.assertEqual(np.count_nonzero(obs), 1)
        self.assertTrue(np.all(np.isin(obs[obs != 0], [2, 4])))

        self.assertIs(self.game.state, GameState.RUNNING)
        self.assertFalse(self.game.is_finished)

    def test_seed_reproducibility(self):
        """Same seed produces identical games."""
        first = Game(GameConfig(seed=7))
        second = Game(GameConfig(seed=7))
        np.testing.assert_array_equal(first.observation, second.observation)

        for direction in [Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN]:
            first.update(direction)
            second.update(direction)
        np.testing.assert_array_equal(first.observation, second.observation)

    def test_board_size(self):
        """The configured dimensions are used."""
        game = Game(GameConfig(height=3, width=6))
        self.assertEqual(game.observation.shape, (3, 6))

    def test_actions(self):
        """Action names map to directions."""
        self.assertEqual(
            Game.ACTIONS,
            {'left': Direction.LEFT, 'up': Direction.UP, 'right': Direction.RIGHT, 'down': Direction.DOWN},
        )

    def test_step_return_signature(self):
        """Step returns (observation, moved, finished)."""
        obs, moved, done = self.game.step(Direction.LEFT)

        self.assertIsInstance(obs, np.ndarray)
        self.assertIsInstance(moved, bool)
        self.assertIsInstance(done, bool)


class TestGameUpdate(TestCase):
    """Test the move, spawn and loss sequence."""

    def setUp(self):
        self.game = Game(GameConfig(), random_source=GeneratorSource(seed=0))

    def test_valid_move_spawns_exactly_one_tile(self):
        """A move that changes the board is followed by one new tile."""
        self.game._board = GameBoard.from_values(
            [[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], random_source=GeneratorSource(seed=1)
        )

        self.assertTrue(self.game.update(Direction.LEFT))

        # ##>: Merge leaves one tile, the spawn adds another.
        self.assertEqual(np.count_nonzero(self.game.observation), 2)
        self.assertEqual(self.game.observation[0, 0], 4)

    def test_invalid_move_no_state_change(self):
        """A move that changes nothing adds no tile."""
        values = [[2, 0, 0, 0], [4, 0, 0, 0], [8, 0, 0, 0], [16, 0, 0, 0]]
        self.game._board = GameBoard.from_values(values)

        obs, moved, done = self.game.step(Direction.LEFT)

        self.assertFalse(moved)
        self.assertFalse(done)
        np.testing.assert_array_equal(obs, np.array(values))

    def test_move_into_lost_game(self):
        """A move that fills the board without any remaining move loses the game."""
        # ##>: Moving left frees (0, 3); a 2 or a 4 there has no equal neighbour.
        values = [[2, 2, 8, 16], [16, 32, 64, 128], [4, 8, 16, 32], [16, 32, 64, 128]]
        self.game._board = GameBoard.from_values(values, random_source=GeneratorSource(seed=3))

        self.assertTrue(self.game.update(Direction.LEFT))
        self.assertEqual(np.count_nonzero(self.game.observation), 16)
        self.assertTrue(self.game.board.is_terminal())
        self.assertIs(self.game.state, GameState.LOST)
        self.assertTrue(self.game.is_finished)

    def test_moves_after_loss_are_noops(self):
        """Once lost, every direction leaves the board unchanged."""
        values = [[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]]
        self.game._board = GameBoard.from_values(values)
        self.game._state = GameState.LOST

        for direction in Direction:
            self.assertFalse(self.game.update(direction))
        np.testing.assert_array_equal(self.game.observation, np.array(values))

    def test_reset_after_loss(self):
        """Reset starts a new running game."""
        self.game._state = GameState.LOST
        self.game.reset()
        self.assertIs(self.game.state, GameState.RUNNING)

    def test_legal_directions(self):
        """Legal directions are read from the current board."""
        self.game._board = GameBoard.from_values([[2, 0], [0, 0]])
        self.assertEqual(self.game.legal_directions(), [Direction.RIGHT, Direction.DOWN])


class TestGameConfig(TestCase):
    """Test configuration validation."""

    def test_defaults(self):
        """Default configuration is a 4x4 board with 90% of 2."""
        config = GameConfig()
        self.assertEqual((config.height, config.width), (4, 4))
        self.assertEqual(config.spawn_probability, 0.9)
        self.assertIsNone(config.seed)

    def test_invalid_dimensions(self):
        """Boards smaller than 2x2 are rejected."""
        with self.assertRaises(ValueError):
            GameConfig(height=1)
        with self.assertRaises(ValueError):
            GameConfig(width=-3)

    def test_invalid_probability(self):
        """Spawn probability must be a probability."""
        with self.assertRaises(ValueError):
            GameConfig(spawn_probability=1.5)

    def test_random_source_seeded(self):
        """Sources built from the same seed draw the same sequence."""
        config = GameConfig(seed=9)
        first, second = config.random_source(), config.random_source()
        self.assertEqual([first.choose_index(100) for _ in range(5)], [second.choose_index(100) for _ in range(5)])


if __name__ == '__main__':
    main()
