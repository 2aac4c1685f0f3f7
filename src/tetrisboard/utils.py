"""Utility helpers for working with a :class:`~tetrisboard.board.Board`."""

from __future__ import annotations

from typing import List

from .board import Board
from .piece import Piece


def can_place(board: Board, piece: Piece, x: int, y: int) -> bool:
    """Return ``True`` if ``piece`` anchored at ``(x, y)`` fits on ``board``.

    Every destination cell must be inside the board and empty.  Unlike
    :meth:`Board.place` this never touches the grid, so drivers can probe
    candidate positions without opening an undo episode.
    """

    for dx, dy in piece.body:
        if board.occupied(x + dx, y + dy):
            return False
    return True


def occupancy_rows(board: Board) -> List[List[int]]:
    """Return the board as 0/1 rows ordered from the top row down."""

    grid = board.grid_copy()
    return [
        [int(grid[x, y]) for x in range(board.width)]
        for y in range(board.height - 1, -1, -1)
    ]


def render_board(board: Board) -> str:
    """Return a bordered text picture of ``board``, top row first."""

    lines = []
    for row in occupancy_rows(board):
        lines.append("|" + "".join("+" if cell else " " for cell in row) + "|")
    lines.append("-" * (board.width + 2))
    return "\n".join(lines)


__all__ = ["can_place", "occupancy_rows", "render_board"]
