"""
Core functionality of the sliding-tile merge game: moving, merging and spawning tiles on a fixed grid.
"""

from __future__ import annotations

import logging
from itertools import product

from numpy import asarray, floor, int64, isfinite, ndarray

from tilemerge.core.direction import Direction
from tilemerge.core.random_source import GeneratorSource, RandomSource
from tilemerge.core.tile import Tile

# ##>: A new tile is a 2 with this probability, a 4 otherwise.
SPAWN_TWO_PROBABILITY = 0.9

# ##>: Smallest board on which tiles can slide.
MIN_SIDE = 2

# ##>: Smallest non-empty tile value.
MIN_TILE = 2

_logger = logging.getLogger(__name__)


def check_spawn_probability(probability: float) -> None:
    """
    Check that the probability of spawning a 2 is a probability.

    Raises
    ------
    ValueError
        If the probability is outside [0, 1].
    """
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f'spawn_probability must be in [0, 1], got {probability}')


class GameBoard:
    """
    Fixed-size grid of tiles.

    The board owns every tile. A move slides and merges the tiles toward one edge, a spawn adds
    one tile in a random empty cell and ``is_terminal`` tells whether any move is still possible.

    Parameters
    ----------
    height : int, optional
        Number of rows (default is 4).
    width : int, optional
        Number of columns (default is 4).
    random_source : RandomSource, optional
        Source used to place new tiles. A fresh ``GeneratorSource`` is used if None.
    spawn_probability : float, optional
        Probability that a new tile is a 2 rather than a 4 (default is 0.9).

    Raises
    ------
    ValueError
        If a dimension is smaller than 2 or the spawn probability is not in [0, 1].

    Notes
    -----
    The board starts with exactly one tile.
    """

    def __init__(
        self,
        height: int = 4,
        width: int = 4,
        random_source: RandomSource | None = None,
        spawn_probability: float = SPAWN_TWO_PROBABILITY,
    ):
        if height < MIN_SIDE or width < MIN_SIDE:
            raise ValueError(f'Board must be at least {MIN_SIDE}x{MIN_SIDE}, got {height}x{width}')
        check_spawn_probability(spawn_probability)

        self._cells = [[Tile() for _ in range(width)] for _ in range(height)]
        self._random = random_source if random_source is not None else GeneratorSource()
        self._spawn_probability = spawn_probability

        self.spawn_tile()

    @classmethod
    def from_values(
        cls,
        values,
        random_source: RandomSource | None = None,
        spawn_probability: float = SPAWN_TWO_PROBABILITY,
    ) -> GameBoard:
        """
        Build a board holding the given values, without spawning any tile.

        Parameters
        ----------
        values : array_like
            A 2D matrix of integer values, 0 for an empty cell and a power of two from 2 upward otherwise.
        random_source : RandomSource, optional
            Source used by later spawns.
        spawn_probability : float, optional
            Probability that a new tile is a 2.

        Returns
        -------
        GameBoard
            The new board.

        Raises
        ------
        ValueError
            If the matrix is not 2D, is smaller than 2x2, holds a value that is neither 0 nor an integer
            power of two from 2 upward, or if the spawn probability is not in [0, 1].
        """
        matrix = asarray(values)
        if matrix.ndim != 2:
            raise ValueError(f'Expected a 2D matrix of values, got {matrix.ndim} dimension(s)')
        height, width = matrix.shape
        if height < MIN_SIDE or width < MIN_SIDE:
            raise ValueError(f'Board must be at least {MIN_SIDE}x{MIN_SIDE}, got {height}x{width}')
        check_spawn_probability(spawn_probability)

        # ##: Integer values only, floats are accepted when they hold whole numbers.
        if matrix.dtype.kind == 'f':
            if not (isfinite(matrix).all() and (matrix == floor(matrix)).all()):
                raise ValueError('Tile values must be integers')
            matrix = matrix.astype(int64)
        elif matrix.dtype.kind not in 'iu':
            raise ValueError(f'Tile values must be integers, got {matrix.dtype}')

        # ##: Non-empty tiles are powers of two.
        tiles = matrix[matrix != 0]
        invalid = tiles[(tiles < MIN_TILE) | ((tiles & (tiles - 1)) != 0)]
        if invalid.size:
            raise ValueError(f'Tile values must be 0 or a power of two from {MIN_TILE}, got {sorted(set(invalid.tolist()))}')

        board = cls.__new__(cls)
        board._cells = [[Tile(int(value)) for value in row] for row in matrix.tolist()]
        board._random = random_source if random_source is not None else GeneratorSource()
        board._spawn_probability = spawn_probability
        return board

    @property
    def height(self) -> int:
        return len(self._cells)

    @property
    def width(self) -> int:
        return len(self._cells[0])

    @property
    def shape(self) -> tuple[int, int]:
        return self.height, self.width

    @property
    def values(self) -> ndarray:
        """
        Get the values of the board.

        Returns
        -------
        ndarray
            A new ``(height, width)`` matrix of tile values, 0 for empty cells.
        """
        return asarray([[tile.value for tile in row] for row in self._cells], dtype=int64)

    def tile(self, row: int, col: int) -> Tile:
        """Tile held by a cell."""
        return self._cells[row][col]

    def empty_cells(self) -> list[tuple[int, int]]:
        """Coordinates of the empty cells, in row-major order."""
        return [
            (row, col)
            for row, col in product(range(self.height), range(self.width))
            if self._cells[row][col].is_empty()
        ]

    def copy(self) -> GameBoard:
        """Copy of the board sharing the same random source."""
        return GameBoard.from_values(self.values, random_source=self._random, spawn_probability=self._spawn_probability)

    def apply_move(self, direction: Direction) -> bool:
        """
        Slide every tile toward an edge, merging equal tiles.

        Parameters
        ----------
        direction : Direction
            The edge the tiles slide toward.

        Returns
        -------
        bool
            True if at least one tile changed cell or value.

        Notes
        -----
        - Lines are processed independently, tiles nearest to the edge first.
        - A tile merges at most once per move and a merged tile does not merge again in the same move:
          ``[2, 2, 2, 0]`` moved left gives ``[4, 2, 0, 0]``.
        """
        moved = False
        for line in direction.lines(self.height, self.width):
            moved |= self._slide_line([self._cells[row][col] for row, col in line])

        _logger.debug('Move %s: moved=%s', direction.name, moved)
        return moved

    @staticmethod
    def _slide_line(line: list[Tile]) -> bool:
        """
        Slide and merge one line toward index 0.

        Parameters
        ----------
        line : list[Tile]
            Tiles of a row or column, ordered from the destination edge outward.

        Returns
        -------
        bool
            True if a tile was relocated or merged.
        """
        moved = False
        merged = [False] * len(line)

        for position in range(1, len(line)):
            if line[position].is_empty():
                continue

            # ##: Captured once, before any movement of this tile.
            initial_value = line[position].value

            for target in range(position - 1, -1, -1):
                source, destination = line[target + 1], line[target]

                if destination.is_empty():
                    destination.merge_from(source)
                    source.clear()
                    moved = True
                    continue

                if destination == initial_value and destination == source and not merged[target]:
                    destination.merge_from(source)
                    source.clear()
                    merged[target] = True
                    moved = True
                break

        return moved

    def spawn_tile(self) -> tuple[int, int] | None:
        """
        Add a new tile (2 or 4) in a random empty cell.

        Returns
        -------
        tuple[int, int] or None
            The cell that received the tile, or None when the board is full.

        Notes
        -----
        - The cell is chosen uniformly among the empty ones.
        - A full board is left untouched; it does not mean the game is lost.
        """
        empty_cells = self.empty_cells()
        if not empty_cells:
            return None

        row, col = empty_cells[self._random.choose_index(len(empty_cells))]
        self._cells[row][col].value = 2 if self._random.sample_bool(self._spawn_probability) else 4

        _logger.debug('Spawned %d at (%d, %d)', self._cells[row][col].value, row, col)
        return row, col

    def is_terminal(self) -> bool:
        """
        Check whether no move can change the board anymore.

        Returns
        -------
        bool
            True if every cell is filled and no two neighbouring cells hold the same value.

        Notes
        -----
        Comparing each cell with its left and upper neighbour covers every adjacent pair.
        """
        for row, col in product(range(self.height), range(self.width)):
            tile = self._cells[row][col]
            if tile.is_empty():
                return False
            if col > 0 and tile == self._cells[row][col - 1]:
                return False
            if row > 0 and tile == self._cells[row - 1][col]:
                return False
        return True

    def __repr__(self) -> str:
        return f'GameBoard({self.values.tolist()})'
