"""
Application coordinator.

Builds the planner services once, loads the initial catalog and hands out
cell editors. UI layers hold a GiftPlanner and call into it; they never
construct caches themselves.
"""
import asyncio
import logging
from typing import List, Optional, Tuple

from gridconfig import PlannerConfiguration

from .attribute_cache import AttributeCache
from .cell_editor import CellEditor
from .clipboard import CellClipboard
from .data_models import Backdrop, Cell, normalize_gift_name
from .grid_model import GridModel
from .pattern_rings import RingLayout, compute_ring_layout
from .remote_cache import RemoteDataCache
from .session_store import FileSessionStore, SessionStore

logger = logging.getLogger(__name__)

FALLBACK_GIFTS: Tuple[str, ...] = (
    "Santa Hat", "Signet Ring", "Precious Peach", "Plush Pepe", "Spiced Wine",
    "Jelly Bunny", "Durov's Cap", "Perfume Bottle", "Eternal Rose", "Berry Box",
    "Vintage Cigar", "Magic Potion", "Kissed Frog", "Hex Pot", "Evil Eye",
    "Sharp Tongue", "Trapped Heart", "Skull Flower", "Scared Cat", "Spy Agaric",
    "Homemade Cake", "Genie Lamp", "Lunar Snake", "Party Sparkler", "Jester Hat",
    "Witch Hat", "Hanging Star", "Love Candle", "Cookie Heart", "Desk Calendar",
    "Jingle Bells", "Snow Mittens", "Voodoo Doll", "Mad Pumpkin", "Hypno Lollipop",
    "B-Day Candle", "Bunny Muffin", "Astral Shard", "Flying Broom", "Crystal Ball",
    "Eternal Candle", "Swiss Watch", "Ginger Cookie", "Mini Oscar", "Lol Pop",
    "Ion Gem", "Star Notepad", "Loot Bag", "Love Potion", "Toy Bear",
    "Diamond Ring", "Sakura Flower", "Sleigh Bell", "Top Hat", "Record Player",
    "Winter Wreath", "Snow Globe", "Electric Skull", "Tama Gadget", "Candy Cane",
    "Neko Helmet", "Jack-in-the-Box", "Easter Egg", "Bonded Ring", "Pet Snake",
    "Snake Box", "Xmas Stocking", "Big Year", "Holiday Drink", "Gem Signet",
    "Light Sword", "Restless Jar", "Nail Bracelet", "Heroic Helmet", "Bow Tie",
    "Heart Locket", "Lush Bouquet", "Whip Cupcake", "Joyful Bundle", "Cupid Charm",
    "Valentine Box", "Snoop Dogg", "Swag Bag", "Snoop Cigar", "Low Rider",
    "Westside Sign", "Stellar Rocket", "Jolly Chimp", "Moon Pendant", "Ionic Dryer",
    "Input Key", "Mighty Arm", "Artisan Brick", "Clover Pin", "Sky Stilettos",
    "Fresh Socks", "Happy Brownie", "Ice Cream", "Spring Basket", "Instant Ramen",
    "Faith Amulet", "Mousse Cake", "Bling Binky", "Money Pot", "Pretty Posy",
    "Khabib's Papakha", "UFC Strike", "Victory Medal",
)


class GiftPlanner:
    """Owns the grid, clipboard and catalog caches for one session."""

    def __init__(
        self,
        config: Optional[PlannerConfiguration] = None,
        *,
        remote: Optional[RemoteDataCache] = None,
        store: Optional[SessionStore] = None,
    ) -> None:
        self.config = config or PlannerConfiguration()
        if remote is None:
            if store is None:
                store = FileSessionStore(self.config.session_dir) if self.config.session_dir else SessionStore()
            remote = RemoteDataCache(
                store,
                base_url=self.config.api_base_url,
                user_agent=self.config.user_agent,
                max_attempts=self.config.max_attempts,
                backoff_seconds=self.config.backoff_seconds,
                request_timeout=self.config.request_timeout,
            )
        self.remote = remote
        self.attributes = AttributeCache(remote, prewarm_count=self.config.prewarm_count)
        self.grid = GridModel()
        self.clipboard = CellClipboard()

        self.gifts: List[str] = []
        self.backdrops: List[Backdrop] = []
        self.loading = True

    async def start(self) -> None:
        """Load gifts and backdrops, then pre-warm the attribute caches."""
        try:
            gifts = await self.remote.fetch("/gifts", list(FALLBACK_GIFTS))
            self.gifts = [g for g in gifts if isinstance(g, str)] if isinstance(gifts, list) else list(FALLBACK_GIFTS)

            backdrops = await self.remote.fetch("/backdrops", [])
            self.backdrops = self._parse_backdrops(backdrops)

            await self.attributes.prewarm(self.gifts)
            logger.info("Catalog loaded: %d gifts, %d backdrops", len(self.gifts), len(self.backdrops))
        except Exception as exc:
            logger.exception("Failed to load initial data: %s", exc)
        finally:
            self.loading = False

    @staticmethod
    def _parse_backdrops(payload: object) -> List[Backdrop]:
        if not isinstance(payload, list):
            return []
        backdrops = []
        for entry in payload:
            backdrop = Backdrop.from_payload(entry)
            if backdrop is None:
                logger.warning("Skipping malformed backdrop: %r", entry)
                continue
            backdrops.append(backdrop)
        return backdrops

    # ------------------------------------------------------------------
    def open_editor(self, row: int, column: int) -> CellEditor:
        return CellEditor(
            self.grid, row, column, self.attributes,
            backdrops=self.backdrops, clipboard=self.clipboard,
        )

    def model_image_url(self, gift: str, model: str, size: int = 128) -> str:
        return f"{self.config.api_base_url}/model/{normalize_gift_name(gift)}/{model}.png?size={size}"

    def pattern_image_url(self, gift: str, pattern: str, size: int = 256) -> str:
        return f"{self.config.api_base_url}/pattern/{normalize_gift_name(gift)}/{pattern}.png?size={size}"

    def ring_layout(self, cell: Optional[Cell]) -> RingLayout:
        if cell is None:
            return compute_ring_layout(None, None, self.config.api_base_url)
        return compute_ring_layout(cell.gift, cell.pattern, self.config.api_base_url)

    def close(self) -> None:
        self.remote.close()


def main() -> int:
    """Load the catalog once and report what was found."""
    config = PlannerConfiguration.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    planner = GiftPlanner(config)
    try:
        asyncio.run(planner.start())
        summary = planner.grid.get_state_summary()
        logger.info(
            "Ready: %d gifts, %d backdrops, %d gifts pre-warmed, grid %d rows",
            len(planner.gifts), len(planner.backdrops),
            len(planner.attributes.cached_gifts), summary['rows'],
        )
    finally:
        planner.close()
    return 0
