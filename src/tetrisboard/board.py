"""Board representation for the playfield.

The board stores occupancy in a single NumPy array indexed ``[x, y]`` with
``y == 0`` at the bottom, together with cached per-column heights and per-row
fill counts.  Mutations follow a two-state commit discipline:

``COMMITTED``
    The board is stable.  ``undo`` does nothing and the backup is stale.

``UNCOMMITTED``
    One mutation episode (a placement and/or a row clear) is pending.  The
    backup holds the board as it was when the episode started and ``undo``
    restores it.

Only one level of undo exists.  The snapshot is taken by the first ``place``
or ``clear_rows`` after a commit and is overwritten by the next episode.
"""

from __future__ import annotations

from enum import Enum
import logging

import numpy as np
from numpy.typing import NDArray

from .piece import Piece


# Default dimensions of the standard board.
WIDTH = 10
HEIGHT = 20

Grid = NDArray[np.bool_]
Tally = NDArray[np.int32]

LOGGER = logging.getLogger(__name__)


class NoBackupAvailableError(RuntimeError):
    """Raised when ``undo`` is requested before any snapshot was taken."""


class BoardState(str, Enum):
    """Commit state of a :class:`Board`."""

    COMMITTED = "committed"
    UNCOMMITTED = "uncommitted"


class PlaceResult(str, Enum):
    """Outcome of :meth:`Board.place`."""

    OK = "ok"
    ROW_FILLED = "row_filled"
    OUT_OF_BOUNDS = "out_of_bounds"
    COLLISION = "collision"

    @property
    def is_error(self) -> bool:
        return self in (PlaceResult.OUT_OF_BOUNDS, PlaceResult.COLLISION)


class Board:
    """Fixed size grid accepting piece placements with single-level undo."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Board dimensions must be positive")
        self._width = int(width)
        self._height = int(height)

        self._grid: Grid = np.zeros((self._width, self._height), dtype=np.bool_)
        self._col_heights: Tally = np.zeros(self._width, dtype=np.int32)
        self._row_widths: Tally = np.zeros(self._height, dtype=np.int32)

        # Backup storage is allocated once and filled in place by _snapshot.
        self._backup_grid: Grid = np.zeros_like(self._grid)
        self._backup_col_heights: Tally = np.zeros_like(self._col_heights)
        self._backup_row_widths: Tally = np.zeros_like(self._row_widths)
        self._has_backup = False

        # Uncommitted with no backup: undo raises until the first mutation.
        self._state = BoardState.UNCOMMITTED

    def new_game(self) -> None:
        """Empty every cell and tally and mark the board committed."""

        self._grid.fill(False)
        self._col_heights.fill(0)
        self._row_widths.fill(0)
        self._state = BoardState.COMMITTED

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def state(self) -> BoardState:
        return self._state

    @property
    def committed(self) -> bool:
        return self._state is BoardState.COMMITTED

    def max_height(self) -> int:
        """Return the tallest column height, ``0`` for an empty board."""

        return int(self._col_heights.max())

    def column_height(self, x: int) -> int:
        """Return one more than the highest filled ``y`` in column ``x``.

        Raises:
            IndexError: If ``x`` is outside the board.
        """
        if 0 <= x < self._width:
            return int(self._col_heights[x])
        raise IndexError("Column out of bounds")

    def row_width(self, y: int) -> int:
        """Return the number of filled cells in row ``y``.

        Raises:
            IndexError: If ``y`` is outside the board.
        """
        if 0 <= y < self._height:
            return int(self._row_widths[y])
        raise IndexError("Row out of bounds")

    def occupied(self, x: int, y: int) -> bool:
        """Return ``True`` if the cell at ``(x, y)`` is filled.

        Any coordinates outside the board are treated as occupied so callers
        can probe neighbouring cells without separate bounds checks.
        """

        if 0 <= x < self._width and 0 <= y < self._height:
            return bool(self._grid[x, y])
        return True

    def grid_copy(self) -> Grid:
        """Return an independent copy of the occupancy grid."""

        return self._grid.copy()

    def drop_height(self, piece: Piece, x: int) -> int:
        """Return the ``y`` at which ``piece`` comes to rest when dropped at ``x``.

        Only the cached column heights are consulted; the grid is not scanned.

        Raises:
            IndexError: If a column of the piece falls outside the board.
        """

        result = 0
        for i, lowest in enumerate(piece.lowest_y_vals):
            if lowest is None:
                continue
            result = max(result, self.column_height(x + i) - lowest)
        return result

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def place(self, piece: Piece, x: int, y: int) -> PlaceResult:
        """Write ``piece`` into the grid with its anchor at ``(x, y)``.

        Cells are written in the piece's own order and processing stops at the
        first cell that is out of bounds or already filled.  Cells written
        before that point stay written, so a failed placement leaves the board
        invalid; call :meth:`undo` to restore it.
        """

        self._begin_episode()
        result = PlaceResult.OK
        for dx, dy in piece.body:
            px = x + dx
            py = y + dy
            if not (0 <= px < self._width and 0 <= py < self._height):
                return PlaceResult.OUT_OF_BOUNDS
            if self._grid[px, py]:
                return PlaceResult.COLLISION
            self._grid[px, py] = True
            if self._col_heights[px] < py + 1:
                self._col_heights[px] = py + 1
            self._row_widths[py] += 1
            if self._row_widths[py] == self._width:
                result = PlaceResult.ROW_FILLED
        return result

    def clear_rows(self) -> int:
        """Remove filled rows, shifting the rows above them down.

        Returns the number of rows that were full before compaction.  When no
        row is full the grid is left untouched.
        """

        self._begin_episode()
        top = self.max_height()
        write = 0
        cleared = 0
        for read in range(top):
            if self._row_widths[read] == self._width:
                cleared += 1
                continue
            if write != read:
                self._grid[:, write] = self._grid[:, read]
                self._row_widths[write] = self._row_widths[read]
            write += 1

        if cleared:
            self._grid[:, write:top] = False
            self._row_widths[write:top] = 0
            # Column heights are stale once rows have shifted.
            self.recompute_tallies()
            LOGGER.debug("Cleared %d row(s), max height now %d", cleared, self.max_height())
        return cleared

    def recompute_tallies(self) -> None:
        """Re-derive column heights and row widths from the grid."""

        self._row_widths[:] = self._grid.sum(axis=0)
        filled = self._grid.any(axis=1)
        # Index of the highest filled cell per column, found on the flipped grid.
        top_index = self._height - np.argmax(self._grid[:, ::-1], axis=1)
        self._col_heights[:] = np.where(filled, top_index, 0)

    def commit(self) -> None:
        """Accept the pending mutation; undo becomes a no-op."""

        self._state = BoardState.COMMITTED

    def undo(self) -> None:
        """Revert the pending episode, or do nothing when committed.

        Raises:
            NoBackupAvailableError: If no snapshot has ever been taken.
        """

        if self._state is BoardState.COMMITTED:
            return
        if not self._has_backup:
            raise NoBackupAvailableError("No backup available to undo")
        np.copyto(self._grid, self._backup_grid)
        np.copyto(self._col_heights, self._backup_col_heights)
        np.copyto(self._row_widths, self._backup_row_widths)
        self._state = BoardState.COMMITTED
        LOGGER.debug("Board reverted to last committed state")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _begin_episode(self) -> None:
        if self._state is BoardState.UNCOMMITTED and self._has_backup:
            return
        self._snapshot()
        self._state = BoardState.UNCOMMITTED
        LOGGER.debug("Snapshot taken at max height %d", self.max_height())

    def _snapshot(self) -> None:
        np.copyto(self._backup_grid, self._grid)
        np.copyto(self._backup_col_heights, self._col_heights)
        np.copyto(self._backup_row_widths, self._row_widths)
        self._has_backup = True

    def __str__(self) -> str:
        from .utils import render_board

        return render_board(self)


__all__ = [
    "Board",
    "BoardState",
    "HEIGHT",
    "NoBackupAvailableError",
    "PlaceResult",
    "WIDTH",
]
