"""
Per-gift model and pattern catalogs.

Entries are loaded on first use through RemoteDataCache and kept for the
session; a gift that has an entry is never fetched again.
"""
import logging
from typing import Any, Dict, List, Sequence, Type, TypeVar

from .data_models import ModelVariant, PatternVariant, Variant, normalize_gift_name
from .remote_cache import RemoteDataCache

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Variant)

DEFAULT_PREWARM_COUNT = 5


def parse_variants(payload: Any, variant_type: Type[V], gift: str) -> List[V]:
    """Convert a raw ``[{name, rarityPermille}]`` payload, skipping bad entries."""
    if not isinstance(payload, list):
        logger.warning("Expected a list of variants for %s, got %s", gift, type(payload).__name__)
        return []
    variants = []
    for entry in payload:
        variant = variant_type.from_payload(entry)
        if variant is None:
            logger.warning("Skipping malformed %s entry for %s: %r", variant_type.__name__, gift, entry)
            continue
        variants.append(variant)
    return variants


class AttributeCache:
    """Lazy model/pattern lookup keyed by gift name."""

    def __init__(self, remote: RemoteDataCache, prewarm_count: int = DEFAULT_PREWARM_COUNT) -> None:
        self.remote = remote
        self.prewarm_count = prewarm_count
        self._models: Dict[str, List[ModelVariant]] = {}
        self._patterns: Dict[str, List[PatternVariant]] = {}

    async def get_models(self, gift: str) -> List[ModelVariant]:
        if gift in self._models:
            return self._models[gift]
        payload = await self.remote.fetch(f"/models/{normalize_gift_name(gift)}?sorted", [])
        models = parse_variants(payload, ModelVariant, gift)
        # A concurrent call may have filled the entry while we were waiting
        return self._models.setdefault(gift, models)

    async def get_patterns(self, gift: str) -> List[PatternVariant]:
        if gift in self._patterns:
            return self._patterns[gift]
        payload = await self.remote.fetch(f"/patterns/{normalize_gift_name(gift)}?sorted", [])
        patterns = parse_variants(payload, PatternVariant, gift)
        return self._patterns.setdefault(gift, patterns)

    async def prewarm(self, gifts: Sequence[str]) -> int:
        """
        Load models and patterns for the first gifts in catalog order.

        Gifts are processed one after another, models before patterns.

        Returns:
            Number of gifts warmed
        """
        count = min(self.prewarm_count, len(gifts))
        for gift in gifts[:count]:
            await self.get_models(gift)
            await self.get_patterns(gift)
        logger.info("Pre-warmed attribute caches for %d gifts", count)
        return count

    def has_models(self, gift: str) -> bool:
        return gift in self._models

    def has_patterns(self, gift: str) -> bool:
        return gift in self._patterns

    def cached_models(self, gift: str) -> List[ModelVariant]:
        return list(self._models.get(gift, []))

    def cached_patterns(self, gift: str) -> List[PatternVariant]:
        return list(self._patterns.get(gift, []))

    @property
    def cached_gifts(self) -> List[str]:
        return list(self._models)
