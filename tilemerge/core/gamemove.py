"""
Move utilities for the sliding-tile game, telling which directions change a board.

A direction is legal when the board's own move routine reports a change on a copy of the board.
"""

from __future__ import annotations

from numpy import ndarray

from tilemerge.core.direction import Direction
from tilemerge.core.gameboard import GameBoard


def legal_directions_mask(board: GameBoard | ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions.

    Parameters
    ----------
    board : GameBoard or ndarray
        The board, or its matrix of tile values (0 for empty cells).

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the board.

    Notes
    -----
    Each direction is applied to a copy, the given board is never modified.
    """
    if not isinstance(board, GameBoard):
        board = GameBoard.from_values(board)
    return tuple(board.copy().apply_move(direction) for direction in Direction)


def legal_directions(board: GameBoard | ndarray) -> list[Direction]:
    """
    Determine the directions that change the board.

    Parameters
    ----------
    board : GameBoard or ndarray
        The board, or its matrix of tile values.

    Returns
    -------
    list[Direction]
        Legal directions, in ``Direction`` order.
    """
    mask = legal_directions_mask(board)
    return [direction for direction in Direction if mask[direction.value]]


def illegal_directions(board: GameBoard | ndarray) -> list[Direction]:
    """Directions that leave the board unchanged, in ``Direction`` order."""
    mask = legal_directions_mask(board)
    return [direction for direction in Direction if not mask[direction.value]]
