# -*- coding: utf-8 -*-
"""
Headless game controller.

This module provides the `Game` class, which drives a game board through moves, new tiles and the
detection of a lost game.
"""

from .game import Game, GameState

__all__ = ["Game", "GameState"]
