"""Playfield engine for a block-stacking puzzle game."""

from .board import Board, BoardState, NoBackupAvailableError, PlaceResult
from .piece import PIECES, STICK, Piece, TetrominoType
from .game_state import GameState
from .utils import can_place, occupancy_rows, render_board

__all__ = [
    "Board",
    "BoardState",
    "GameState",
    "NoBackupAvailableError",
    "PIECES",
    "Piece",
    "PlaceResult",
    "STICK",
    "TetrominoType",
    "can_place",
    "occupancy_rows",
    "render_board",
]
