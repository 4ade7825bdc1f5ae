"""Headless controller of a sliding-tile merge game."""

import logging
from enum import Enum

from numpy import ndarray

from tilemerge.config import GameConfig
from tilemerge.core.direction import Direction
from tilemerge.core.gameboard import GameBoard
from tilemerge.core.gamemove import legal_directions
from tilemerge.core.random_source import RandomSource

_logger = logging.getLogger(__name__)


class GameState(Enum):
    """Whether moves are still possible."""

    RUNNING = 'running'
    LOST = 'lost'


class Game:
    """
    Sliding-tile merge game.

    This class applies the moves requested by a front end: a move that changes the board is followed by
    a new tile, after which the game is flagged as lost if no move remains.
    """

    # ##: All Actions.
    ACTIONS = {direction.name.lower(): direction for direction in Direction}

    def __init__(self, config: GameConfig | None = None, random_source: RandomSource | None = None):
        """
        Initialize the game.

        Parameters
        ----------
        config : GameConfig, optional
            Size of the board and spawn policy (default is a 4x4 board).
        random_source : RandomSource, optional
            Source used to place new tiles. Built from the configuration seed if None.
        """
        self.config = config if config is not None else GameConfig()
        self._random = random_source if random_source is not None else self.config.random_source()
        self._board: GameBoard | None = None
        self._state = GameState.RUNNING

        self.reset()

    @property
    def board(self) -> GameBoard:
        return self._board

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is lost.

        Returns
        -------
        bool
            True once a move left the board without any legal move.
        """
        return self._state is GameState.LOST

    @property
    def observation(self) -> ndarray:
        """Current matrix of tile values."""
        return self._board.values

    def reset(self) -> ndarray:
        """
        Start a new game on an empty board holding one random tile.

        Returns
        -------
        ndarray
            The new matrix of tile values.
        """
        self._board = GameBoard(
            height=self.config.height,
            width=self.config.width,
            random_source=self._random,
            spawn_probability=self.config.spawn_probability,
        )
        self._state = GameState.RUNNING
        return self.observation

    def legal_directions(self) -> list[Direction]:
        """Directions that would change the board."""
        return legal_directions(self._board)

    def update(self, direction: Direction) -> bool:
        """
        Move the tiles and, if anything moved, add a new tile and check for a lost game.

        Parameters
        ----------
        direction : Direction
            The edge the tiles slide toward.

        Returns
        -------
        bool
            Whether the move changed the board. A move that changes nothing adds no tile.
        """
        moved = self._board.apply_move(direction)

        if moved:
            self._board.spawn_tile()
            if self._board.is_terminal():
                self._state = GameState.LOST
                _logger.info('No move left, highest tile is %d', self._board.values.max())

        return moved

    def step(self, direction: Direction) -> tuple[ndarray, bool, bool]:
        """
        Apply a move and report the outcome.

        Parameters
        ----------
        direction : Direction
            The edge the tiles slide toward.

        Returns
        -------
        tuple[ndarray, bool, bool]
            A tuple containing:
            - The updated matrix of tile values (ndarray)
            - Whether the move changed the board (bool)
            - Whether the game is lost (bool)
        """
        moved = self.update(direction)
        return self.observation, moved, self.is_finished
