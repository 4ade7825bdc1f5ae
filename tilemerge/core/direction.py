"""
Directions of movement and the order in which a move visits the board.
"""

from enum import Enum


class Direction(Enum):
    """
    Edge toward which the tiles slide.

    The integer values follow the action codes used across the package
    (0: left, 1: up, 2: right, 3: down).
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def from_name(cls, name: str) -> 'Direction':
        """
        Parse a direction from its name, ignoring case.

        Parameters
        ----------
        name : str
            One of ``left``, ``up``, ``right`` or ``down``.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the name is not a direction.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f'Unknown direction: {name!r}') from None

    @property
    def is_horizontal(self) -> bool:
        """Whether the move works on rows (left, right) rather than columns."""
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def toward_start(self) -> bool:
        """Whether the destination edge is index 0 of each line (left, up)."""
        return self in (Direction.LEFT, Direction.UP)

    def lines(self, height: int, width: int) -> list[list[tuple[int, int]]]:
        """
        Enumerate the lines a move processes.

        Parameters
        ----------
        height : int
            Number of rows of the board.
        width : int
            Number of columns of the board.

        Returns
        -------
        list[list[tuple[int, int]]]
            One list of ``(row, col)`` coordinates per row (left, right) or column (up, down),
            ordered from the destination edge outward.
        """
        length = width if self.is_horizontal else height
        count = height if self.is_horizontal else width

        positions = list(range(length))
        if not self.toward_start:
            positions.reverse()

        if self.is_horizontal:
            return [[(line, position) for position in positions] for line in range(count)]
        return [[(position, line) for position in positions] for line in range(count)]
