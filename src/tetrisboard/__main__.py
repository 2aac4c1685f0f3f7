"""Simple ASCII demo for the board engine.

Run with: `python -m tetrisboard`

Random pieces are dropped into random columns until the game ends or the piece
limit is reached, then the final board is printed.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .board import HEIGHT, WIDTH, Board
from .game_state import GameState


LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tetrisboard", description=__doc__)
    parser.add_argument("--width", type=int, default=WIDTH, help="Board width in cells.")
    parser.add_argument("--height", type=int, default=HEIGHT, help="Board height in cells.")
    parser.add_argument("--pieces", type=int, default=50, help="Maximum number of pieces to drop.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece generator.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    args = parser.parse_args(argv)
    # The widest standard piece spans four columns.
    if args.width < 4 or args.height < 1:
        parser.error("board must be at least 4 cells wide and 1 cell tall")
    return args


def play(state: GameState, pieces: int) -> None:
    for _ in range(pieces):
        if state.over or state.active is None:
            break
        max_column = state.board.width - state.active.width
        column = state.rng.randint(0, max_column)
        state.drop(column)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    state = GameState(board=Board(args.width, args.height))
    state.reset_game(seed=args.seed)
    play(state, args.pieces)
    LOGGER.debug("Finished with max height %d", state.board.max_height())

    print(state.board)
    print(f"pieces={state.pieces} rows_cleared={state.rows_cleared} over={state.over}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
