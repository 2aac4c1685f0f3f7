"""High level game driver built on top of :class:`Board`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
import logging
import random

from .board import Board, PlaceResult
from .piece import PIECES, Piece, TetrominoType


LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Mutable state for a single game session.

    The board only reports placement outcomes; deciding that the game is over
    is the driver's job.  A drop that cannot be placed, or a column reaching
    the top of the board, ends the game.
    """

    board: Board = field(default_factory=Board)
    active: Optional[Piece] = None
    upcoming: Optional[TetrominoType] = None
    pieces: int = 0
    rows_cleared: int = 0
    over: bool = False
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def _random_type(self) -> TetrominoType:
        return self.rng.choice(list(TetrominoType))

    def spawn_piece(self) -> Piece:
        """Make the upcoming shape active and draw a new upcoming shape."""

        shape = self.upcoming or self._random_type()
        self.active = PIECES[shape]
        self.upcoming = self._random_type()
        return self.active

    def drop(self, column: int) -> PlaceResult:
        """Drop the active piece straight down at ``column`` and lock it.

        Filled rows are cleared and the result is committed.  A failed
        placement is undone and ends the game.
        """

        if self.over:
            raise RuntimeError("Cannot drop a piece when the game is over")
        if self.active is None:
            raise RuntimeError("No active piece; call reset_game first")
        piece = self.active
        if not 0 <= column <= self.board.width - piece.width:
            raise ValueError(f"Column {column} out of range for piece of width {piece.width}")

        row = self.board.drop_height(piece, column)
        result = self.board.place(piece, column, row)
        if result.is_error:
            self.board.undo()
            self._game_over(f"piece could not be placed at ({column}, {row}): {result.value}")
            return result

        if result is PlaceResult.ROW_FILLED:
            self.rows_cleared += self.board.clear_rows()
        self.board.commit()
        self.pieces += 1

        if self.board.max_height() >= self.board.height:
            self._game_over("stack reached the top of the board")
        else:
            self.spawn_piece()
        return result

    def reset_game(self, seed: Optional[int] = None) -> None:
        """Reset the board and counters and spawn the first piece."""

        if seed is not None:
            self.rng.seed(seed)
        self.board.new_game()
        self.pieces = 0
        self.rows_cleared = 0
        self.over = False
        self.active = None
        self.upcoming = None
        self.spawn_piece()

    def _game_over(self, reason: str) -> None:
        LOGGER.info(
            "Game over after %d pieces (%d rows cleared): %s",
            self.pieces,
            self.rows_cleared,
            reason,
        )
        self.over = True
        self.active = None
