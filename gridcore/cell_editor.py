"""
Editing session for a single grid cell.

Holds the in-progress gift/model/backdrop/pattern selection and the option
lists offered for the chosen gift. Nothing reaches the grid until save().
"""
import logging
from typing import Dict, List, Optional, Sequence

from .attribute_cache import AttributeCache
from .clipboard import CellClipboard
from .data_models import Backdrop, Cell, ModelVariant, PatternVariant
from .grid_model import GridModel
from .link_parser import parse_link

logger = logging.getLogger(__name__)


class CellEditor:
    """
    Edits the cell at (row, column) of a grid.

    Changing the gift clears model, pattern and backdrop before the new
    gift's options are requested.
    """

    def __init__(
        self,
        grid: GridModel,
        row: int,
        column: int,
        attributes: AttributeCache,
        backdrops: Sequence[Backdrop] = (),
        clipboard: Optional[CellClipboard] = None,
    ) -> None:
        self.grid = grid
        self.row = row
        self.column = column
        self.attributes = attributes
        self.clipboard = clipboard if clipboard is not None else CellClipboard()
        self._backdrops: Dict[str, Backdrop] = {b.name: b for b in backdrops}

        initial = grid.get_cell(row, column) or Cell()
        self.gift: Optional[str] = initial.gift
        self.model: Optional[str] = initial.model
        self.backdrop: Optional[Backdrop] = initial.backdrop
        self.pattern: Optional[str] = initial.pattern

        self.models: List[ModelVariant] = []
        self.patterns: List[PatternVariant] = []
        # Bumped on each gift change so late option loads for an old gift are dropped
        self._generation = 0

    @property
    def backdrops(self) -> List[Backdrop]:
        return list(self._backdrops.values())

    async def load_options(self) -> None:
        """Load model and pattern options for the current gift."""
        gift = self.gift
        generation = self._generation
        if not gift:
            self.models, self.patterns = [], []
            return

        models = await self.attributes.get_models(gift)
        if generation != self._generation:
            logger.debug("Discarding stale models for %s", gift)
            return
        self.models = list(models)

        patterns = await self.attributes.get_patterns(gift)
        if generation != self._generation:
            logger.debug("Discarding stale patterns for %s", gift)
            return
        self.patterns = list(patterns)

    def _set_gift(self, gift: Optional[str]) -> None:
        self._generation += 1
        self.model = None
        self.pattern = None
        self.backdrop = None
        self.models = []
        self.patterns = []
        self.gift = gift or None

    async def select_gift(self, gift: Optional[str]) -> None:
        """Switch gift, clearing dependent selections, then load its options."""
        self._set_gift(gift)
        logger.debug("Gift selected: %s", self.gift)
        await self.load_options()

    def select_model(self, name: Optional[str]) -> None:
        if self.gift:
            self.model = name or None

    def select_pattern(self, name: Optional[str]) -> None:
        if self.gift:
            self.pattern = name or None

    def select_backdrop(self, name: Optional[str]) -> None:
        if not self.gift:
            return
        self.backdrop = self._backdrops.get(name) if name else None

    async def apply_link(self, text: str) -> bool:
        """
        Select the gift named by a t.me/nft link.

        Returns:
            True if the link was recognised
        """
        gift = parse_link(text)
        if gift is None:
            logger.info("Link not recognised: %r", text)
            return False
        await self.select_gift(gift)
        return True

    def copy(self) -> Cell:
        return self.clipboard.copy(self.snapshot())

    async def paste(self) -> bool:
        """
        Replace every field with the clipboard's snapshot, as-is, then load
        the options for the pasted gift.
        """
        cell = self.clipboard.paste()
        if cell is None:
            return False
        if cell.gift != self.gift:
            self._generation += 1
            self.models, self.patterns = [], []
        self.gift = cell.gift
        self.model = cell.model
        self.backdrop = cell.backdrop
        self.pattern = cell.pattern
        await self.load_options()
        return True

    @property
    def preview_ready(self) -> bool:
        return bool(self.gift and self.model)

    def snapshot(self) -> Cell:
        return Cell(gift=self.gift, model=self.model, backdrop=self.backdrop, pattern=self.pattern)

    def save(self) -> Cell:
        cell = self.snapshot()
        self.grid.set_cell(self.row, self.column, cell)
        logger.info("Saved cell (%d, %d): %s", self.row, self.column, cell)
        return cell
