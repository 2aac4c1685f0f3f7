"""Piece definitions consumed by the board.

A piece is nothing more than an ordered set of occupied cell offsets relative
to an anchor in its lower-left corner.  The board never rotates or moves a
piece; it only reads the offsets and the per-column ``lowest_y_vals`` profile
used to compute drop heights quickly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

Offset = Tuple[int, int]


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


@dataclass(frozen=True)
class Piece:
    """Immutable block shape described by ``(dx, dy)`` offsets.

    ``dy`` grows upwards, matching the board where row ``0`` is the bottom.
    The order of ``body`` is significant: the board writes cells in exactly
    this order when placing the piece.
    """

    body: Tuple[Offset, ...]
    width: int = field(init=False)
    height: int = field(init=False)
    lowest_y_vals: Tuple[Optional[int], ...] = field(init=False)

    def __post_init__(self) -> None:
        body = tuple((int(dx), int(dy)) for dx, dy in self.body)
        if not body:
            raise ValueError("Piece body must contain at least one cell")
        if len(set(body)) != len(body):
            raise ValueError("Piece body contains duplicate cells")
        if any(dx < 0 or dy < 0 for dx, dy in body):
            raise ValueError("Piece offsets must be non-negative")

        width = max(dx for dx, _ in body) + 1
        height = max(dy for _, dy in body) + 1
        lowest: list[Optional[int]] = [None] * width
        for dx, dy in body:
            current = lowest[dx]
            if current is None or dy < current:
                lowest[dx] = dy

        # Frozen dataclass: derived fields are set through object.__setattr__
        object.__setattr__(self, "body", body)
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "height", height)
        object.__setattr__(self, "lowest_y_vals", tuple(lowest))

    @classmethod
    def from_offsets(cls, offsets: Sequence[Offset]) -> "Piece":
        return cls(tuple(offsets))

    @classmethod
    def parse(cls, text: str) -> "Piece":
        """Build a piece from whitespace separated integer pairs.

        ``"0 0  0 1  0 2  0 3"`` describes a vertical stick four cells tall.
        """

        tokens = text.split()
        if not tokens or len(tokens) % 2:
            raise ValueError(f"Expected an even number of integers, got {text!r}")
        try:
            values = [int(token) for token in tokens]
        except ValueError as exc:
            raise ValueError(f"Invalid piece description {text!r}") from exc
        return cls(tuple(zip(values[0::2], values[1::2])))

    def __len__(self) -> int:
        return len(self.body)


# Spawn orientation of each tetromino with ``y`` pointing up.
_BASE_SHAPES: Dict[TetrominoType, str] = {
    TetrominoType.I: "0 0 1 0 2 0 3 0",
    TetrominoType.O: "0 0 1 0 0 1 1 1",
    TetrominoType.T: "0 1 1 1 2 1 1 0",
    TetrominoType.S: "0 0 1 0 1 1 2 1",
    TetrominoType.Z: "0 1 1 1 1 0 2 0",
    TetrominoType.J: "0 0 1 0 2 0 0 1",
    TetrominoType.L: "0 0 1 0 2 0 2 1",
}

PIECES: Dict[TetrominoType, Piece] = {
    t_type: Piece.parse(text) for t_type, text in _BASE_SHAPES.items()
}

STICK = Piece.parse("0 0 0 1 0 2 0 3")


__all__ = ["Offset", "Piece", "PIECES", "STICK", "TetrominoType"]
