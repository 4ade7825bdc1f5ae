# -*- coding: utf-8 -*-
"""
Rule engine of a sliding-tile merge puzzle.

The grid slides its tiles toward an edge, merges equal neighbours once per move, spawns new tiles
and tells when no move remains. It has no display or input layer and runs headlessly.
"""

from .config import GameConfig
from .core import Direction, GameBoard, GeneratorSource, RandomSource, Tile
from .envs import Game, GameState

__all__ = ["Direction", "Game", "GameBoard", "GameConfig", "GameState", "GeneratorSource", "RandomSource", "Tile"]
