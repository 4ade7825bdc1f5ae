# -*- coding: utf-8 -*-
"""
Play random games headlessly and report the highest tile reached.
"""
import logging
import sys
from collections import Counter
from typing import Dict, Optional, Sequence

from tqdm import trange

from tilemerge.config import GameConfig
from tilemerge.core.random_source import RandomSource
from tilemerge.envs import Game

_logger = logging.getLogger(__name__)


def play(game: Game, random_source: RandomSource) -> int:
    """
    Play one game with uniformly random legal moves.

    Parameters
    ----------
    game : Game
        The game to play, already reset.
    random_source : RandomSource
        Source used to choose among the legal directions.

    Returns
    -------
    int
        The highest tile on the final board.
    """
    directions = game.legal_directions()
    while directions and not game.is_finished:
        game.update(directions[random_source.choose_index(len(directions))])
        directions = game.legal_directions()
    return int(game.observation.max())


def simulate(config: GameConfig, games: int = 10) -> Dict[int, int]:
    """
    Play several random games.

    Parameters
    ----------
    config : GameConfig
        Board size, spawn policy and seed of the games.
    games : int, optional
        The number of games to play (default is 10).

    Returns
    -------
    Dict[int, int]
        Number of games per highest tile reached.
    """
    random_source = config.random_source()
    game = Game(config=config, random_source=random_source)
    score = []

    with trange(games) as period:
        for num in period:
            game.reset()

            # ##: Play a game.
            max_tile = play(game, random_source)

            # ##: Log.
            period.set_description(f'Simulation: {num + 1}')
            period.set_postfix(max=max_tile)
            _logger.debug('Game %d finished with highest tile %d', num + 1, max_tile)

            score.append(max_tile)

    return dict(Counter(score))


def main(argv: Optional[Sequence[str]] = None) -> int:
    from argparse import ArgumentParser

    parser = ArgumentParser(description='Play random sliding-tile games and report the highest tiles')
    parser.add_argument('--games', type=int, default=10, help='Number of games to play')
    parser.add_argument('--height', type=int, default=4, help='Number of rows of the board')
    parser.add_argument('--width', type=int, default=4, help='Number of columns of the board')
    parser.add_argument('--seed', type=int, default=None, help='Seed of the random generator')
    parser.add_argument('--verbose', action='store_true', help='Log every game')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )

    try:
        config = GameConfig(height=args.height, width=args.width, seed=args.seed)
    except ValueError as error:
        print(f'Problem starting the game: {error}', file=sys.stderr)
        return 1

    result = simulate(config, games=args.games)
    for tile, count in sorted(result.items()):
        print(f'{tile}\t{count}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
