"""
Sources of randomness used to spawn new tiles.
"""

from typing import Protocol

from numpy.random import PCG64DXSM, Generator, default_rng


class RandomSource(Protocol):
    """Capability needed by the board to place new tiles."""

    def choose_index(self, size: int) -> int:
        """Pick an index uniformly in ``[0, size)``."""
        ...

    def sample_bool(self, probability: float) -> bool:
        """Return True with the given probability."""
        ...


class GeneratorSource:
    """
    Random source backed by a numpy generator.

    Parameters
    ----------
    seed : int, optional
        Seed of the ``PCG64DXSM`` bit generator. Without seed, every instance draws fresh entropy.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._generator: Generator = default_rng(PCG64DXSM(seed))

    def choose_index(self, size: int) -> int:
        return int(self._generator.integers(size))

    def sample_bool(self, probability: float) -> bool:
        return bool(self._generator.random() < probability)
