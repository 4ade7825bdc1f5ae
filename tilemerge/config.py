# -*- coding: utf-8 -*-
"""
Game specific configuration.
"""
from dataclasses import dataclass
from typing import Optional

from tilemerge.core.gameboard import MIN_SIDE, SPAWN_TWO_PROBABILITY, check_spawn_probability
from tilemerge.core.random_source import GeneratorSource


@dataclass(frozen=True)
class GameConfig:
    """Data needed to set up a game."""

    height: int = 4
    width: int = 4
    spawn_probability: float = SPAWN_TWO_PROBABILITY
    seed: Optional[int] = None

    def __post_init__(self):
        if self.height < MIN_SIDE or self.width < MIN_SIDE:
            raise ValueError(f'Board must be at least {MIN_SIDE}x{MIN_SIDE}, got {self.height}x{self.width}')
        check_spawn_probability(self.spawn_probability)

    def random_source(self) -> GeneratorSource:
        """Random source seeded from the configuration."""
        return GeneratorSource(seed=self.seed)
