# -*- coding: utf-8 -*-
"""
This module provides the rules of the sliding-tile merge game.

It includes the tile model, the directions of movement, the game board with its move, spawn and
terminal-state operations, the pluggable random sources and the legal-direction queries.
"""

from .direction import Direction
from .gameboard import SPAWN_TWO_PROBABILITY, GameBoard
from .gamemove import illegal_directions, legal_directions, legal_directions_mask
from .random_source import GeneratorSource, RandomSource
from .tile import Tile

__all__ = [
    "Direction",
    "GameBoard",
    "GeneratorSource",
    "RandomSource",
    "SPAWN_TWO_PROBABILITY",
    "Tile",
    "illegal_directions",
    "legal_directions",
    "legal_directions_mask",
]
