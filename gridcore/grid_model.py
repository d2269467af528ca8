"""
Ownership and mutation of the 3-column cell grid.

The grid is an immutable tuple of rows; every mutation builds a new tuple
and swaps it in, so a view reading ``snapshot()`` never sees a half-applied
change. Linear indices map to positions row-major: row = index // 3,
column = index % 3.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .data_models import Cell
from .exceptions import OutOfRangeError

logger = logging.getLogger(__name__)

COLUMNS = 3
MIN_ROWS = 3

Row = Tuple[Optional[Cell], ...]
GridSnapshot = Tuple[Row, ...]

# Type alias for grid change callbacks
GridCallback = Callable[[GridSnapshot], None]


@dataclass(frozen=True, slots=True)
class GridPosition:
    """Position of a cell in the grid."""
    row: int
    column: int
    index: int

    def __str__(self) -> str:
        return f"GridPosition(row={self.row}, col={self.column}, idx={self.index})"


def _empty_row() -> Row:
    return (None,) * COLUMNS


def _empty_grid(rows: int) -> GridSnapshot:
    return tuple(_empty_row() for _ in range(rows))


class GridModel:
    """
    Rows x 3 matrix of cells with at least three rows.

    Empty positions hold None. Registered callbacks receive the new
    snapshot after each mutation that changed something.
    """

    def __init__(self, rows: int = MIN_ROWS) -> None:
        self._grid: GridSnapshot = _empty_grid(max(MIN_ROWS, rows))
        self._callbacks: List[GridCallback] = []

    # ------------------------------------------------------------------
    def register_callback(self, callback: GridCallback) -> None:
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def unregister_callback(self, callback: GridCallback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def _commit(self, grid: GridSnapshot, action: str) -> None:
        self._grid = grid
        logger.debug("Grid %s: %d rows", action, len(grid))
        for callback in list(self._callbacks):
            try:
                callback(grid)
            except Exception as e:
                # Log error but don't let a view break the mutation
                logger.error("Grid callback error: %s", e)

    # ------------------------------------------------------------------
    @property
    def row_count(self) -> int:
        return len(self._grid)

    @property
    def cell_count(self) -> int:
        return len(self._grid) * COLUMNS

    def snapshot(self) -> GridSnapshot:
        return self._grid

    def cells(self) -> List[Optional[Cell]]:
        """All cells in linear-index order."""
        return [cell for row in self._grid for cell in row]

    def position_for_index(self, index: int) -> GridPosition:
        if not 0 <= index < self.cell_count:
            raise OutOfRangeError(f"Cell index {index} outside grid of {self.cell_count} cells")
        return GridPosition(row=index // COLUMNS, column=index % COLUMNS, index=index)

    def index_for_position(self, row: int, column: int) -> int:
        self._check_position(row, column)
        return row * COLUMNS + column

    def get_cell(self, row: int, column: int) -> Optional[Cell]:
        self._check_position(row, column)
        return self._grid[row][column]

    def cell_at(self, index: int) -> Optional[Cell]:
        position = self.position_for_index(index)
        return self._grid[position.row][position.column]

    def _check_position(self, row: int, column: int) -> None:
        if not 0 <= row < len(self._grid):
            raise OutOfRangeError(f"Row {row} outside grid of {len(self._grid)} rows")
        if not 0 <= column < COLUMNS:
            raise OutOfRangeError(f"Column {column} outside 0..{COLUMNS - 1}")

    # ------------------------------------------------------------------
    def add_row(self) -> int:
        """
        Append a row of empty cells.

        Returns:
            New row count
        """
        self._commit(self._grid + (_empty_row(),), "add_row")
        return len(self._grid)

    def remove_row(self, index: int) -> bool:
        """
        Remove a row, shifting later rows up.

        Args:
            index: Row to remove

        Returns:
            True if a row was removed, False when already at the minimum
        """
        if len(self._grid) <= MIN_ROWS:
            logger.debug("remove_row(%d) ignored at minimum of %d rows", index, MIN_ROWS)
            return False
        if not 0 <= index < len(self._grid):
            raise OutOfRangeError(f"Row {index} outside grid of {len(self._grid)} rows")
        self._commit(self._grid[:index] + self._grid[index + 1:], "remove_row")
        return True

    def set_cell(self, row: int, column: int, cell: Optional[Cell]) -> None:
        self._check_position(row, column)
        if cell is not None and cell.is_blank:
            cell = None
        new_row = self._grid[row][:column] + (cell,) + self._grid[row][column + 1:]
        self._commit(self._grid[:row] + (new_row,) + self._grid[row + 1:], "set_cell")

    def swap_cells(self, source_index: int, dest_index: int) -> None:
        """Exchange the contents of two cells given by linear index."""
        source = self.position_for_index(source_index)
        dest = self.position_for_index(dest_index)
        if source == dest:
            return

        rows = [list(row) for row in self._grid]
        rows[source.row][source.column], rows[dest.row][dest.column] = (
            rows[dest.row][dest.column],
            rows[source.row][source.column],
        )
        self._commit(tuple(tuple(row) for row in rows), "swap_cells")

    def reset_grid(self) -> None:
        """Empty every cell, keeping the current number of rows."""
        self._commit(_empty_grid(len(self._grid)), "reset_grid")

    def get_state_summary(self) -> dict[str, int]:
        filled = sum(1 for cell in self.cells() if cell is not None)
        return {
            'rows': self.row_count,
            'cells': self.cell_count,
            'filled': filled,
            'callback_count': len(self._callbacks)
        }
