from __future__ import annotations
import argparse
import logging

from minesweeper.console import TextGame
from minesweeper.difficulty import Difficulty, PRESETS, get_difficulty
from minesweeper.session import GameSession


def main(argv=None):
    parser = argparse.ArgumentParser(description='Play Minesweeper in the console')
    parser.add_argument('--difficulty', type=str, default='easy', choices=[*PRESETS, 'custom'])
    parser.add_argument('--width', type=int, default=24, help='Board width for --difficulty custom')
    parser.add_argument('--height', type=int, default=16, help='Board height for --difficulty custom')
    parser.add_argument('--mines', type=int, default=50, help='Mine count for --difficulty custom')
    parser.add_argument('--seed', type=int, default=-1, help='RNG seed; <0 uses OS entropy (random every run)')
    parser.add_argument('--ascii', action='store_true', help='Compact board view (# hidden, F flag, . empty)')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format='%(levelname)s %(name)s: %(message)s')

    if args.difficulty == 'custom':
        difficulty = Difficulty.custom(args.width, args.height, args.mines)
    else:
        difficulty = get_difficulty(args.difficulty)
    print(f"[play] {args.difficulty} board: {difficulty.width}x{difficulty.height}, {difficulty.mines} mines")

    session = GameSession.new(difficulty, seed=(None if args.seed < 0 else args.seed))
    TextGame(session, compact=args.ascii).main_loop()


if __name__ == '__main__':
    main()
