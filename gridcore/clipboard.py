"""Single-slot copy/paste register for cells."""
import logging
from typing import Optional

from .data_models import Cell

logger = logging.getLogger(__name__)


class CellClipboard:
    """
    Holds at most one cell snapshot.

    Copying overwrites the slot; pasting leaves it in place so the same
    snapshot can be pasted repeatedly. Backdrops are shared catalog values
    and are not duplicated.
    """

    def __init__(self) -> None:
        self._cell: Optional[Cell] = None

    def copy(self, cell: Optional[Cell]) -> Cell:
        if cell is None:
            cell = Cell()
        self._cell = Cell(gift=cell.gift, model=cell.model, backdrop=cell.backdrop, pattern=cell.pattern)
        logger.debug("Copied %s", self._cell)
        return self._cell

    def paste(self) -> Optional[Cell]:
        return self._cell

    def clear(self) -> None:
        self._cell = None

    @property
    def has_content(self) -> bool:
        return self._cell is not None
