"""
Single cell of the game board.
"""

from __future__ import annotations

from numbers import Integral


class Tile:
    """
    Numeric value held by one cell of the board, ``0`` meaning empty.

    Tiles never move by themselves: the board relocates values between cells with
    ``merge_from`` and ``clear``. Equality is by value, so two empty tiles are equal
    and a tile also compares equal to the plain integer it holds.
    """

    __slots__ = ('value',)

    def __init__(self, value: int = 0):
        self.value = value

    def is_empty(self) -> bool:
        """Check whether the cell holds no tile."""
        return self.value == 0

    def merge_from(self, other: Tile) -> None:
        """
        Add the value of another tile into this one.

        Parameters
        ----------
        other : Tile
            The tile moving onto this cell.

        Notes
        -----
        No rule is checked here: the board decides when a merge is legal.
        """
        self.value += other.value

    def clear(self) -> None:
        """Empty the cell."""
        self.value = 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Tile):
            return self.value == other.value
        if isinstance(other, Integral):
            return self.value == other
        return NotImplemented

    __hash__ = None

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f'Tile({self.value})'
