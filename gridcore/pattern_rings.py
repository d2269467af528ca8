"""
Concentric ring placement of a cell's pattern symbol.

No UI framework dependencies - the layout is a list of top-left
coordinates on a 256x256 canvas, all pointing at one shared symbol image.
"""
import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Tuple

from .data_models import normalize_gift_name
from .remote_cache import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

CANVAS_SIZE = 256
CENTER_X = 128
CENTER_Y = 128
RING_RADII = (50, 90, 130, 170)
SYMBOL_SIZE = 32
SPACING_FACTOR = 1.4
ODD_RING_OFFSET_DEGREES = 15.0
SYMBOL_IMAGE_SIZE = 64


@dataclass(frozen=True, slots=True)
class SymbolRef:
    """The single image every placement on a layout refers to."""
    url: str
    width: int = SYMBOL_SIZE
    height: int = SYMBOL_SIZE


@dataclass(frozen=True, slots=True)
class RingPlacement:
    x: float
    y: float
    ring: int
    angle_degrees: float


@dataclass(frozen=True, slots=True)
class RingLayout:
    symbol: Optional[SymbolRef]
    placements: Tuple[RingPlacement, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.placements

    def __len__(self) -> int:
        return len(self.placements)


EMPTY_LAYOUT = RingLayout(symbol=None)


def symbol_count(radius: float, symbol_size: int = SYMBOL_SIZE) -> int:
    """Symbols that fit on a ring at 1.4x symbol size spacing."""
    return math.floor((2 * math.pi * radius) / (symbol_size * SPACING_FACTOR))


def ring_offset(ring_index: int) -> float:
    return 0.0 if ring_index % 2 == 0 else ODD_RING_OFFSET_DEGREES


def ring_placements(radius: float, ring_index: int) -> List[RingPlacement]:
    count = symbol_count(radius)
    if count <= 0:
        return []
    step = 360 / count
    offset = ring_offset(ring_index)
    half = SYMBOL_SIZE / 2
    placements = []
    for k in range(count):
        angle = k * step + offset
        radians = math.radians(angle)
        placements.append(RingPlacement(
            x=CENTER_X + radius * math.cos(radians) - half,
            y=CENTER_Y + radius * math.sin(radians) - half,
            ring=ring_index,
            angle_degrees=angle,
        ))
    return placements


def pattern_symbol_url(gift: str, pattern: str, base_url: str = DEFAULT_BASE_URL,
                       size: int = SYMBOL_IMAGE_SIZE) -> str:
    return f"{base_url.rstrip('/')}/pattern/{normalize_gift_name(gift)}/{pattern}.png?size={size}"


@lru_cache(maxsize=256)
def compute_ring_layout(gift: Optional[str], pattern: Optional[str],
                        base_url: str = DEFAULT_BASE_URL) -> RingLayout:
    """
    Lay out the pattern symbol on every ring.

    Args:
        gift: Gift name, layout is empty without it
        pattern: Pattern variant name, layout is empty without it
        base_url: Catalog base used for the symbol image URL

    Returns:
        RingLayout whose placements all share one SymbolRef
    """
    if not gift or not pattern:
        return EMPTY_LAYOUT

    placements: List[RingPlacement] = []
    for ring_index, radius in enumerate(RING_RADII):
        placements.extend(ring_placements(radius, ring_index))
    return RingLayout(
        symbol=SymbolRef(url=pattern_symbol_url(gift, pattern, base_url)),
        placements=tuple(placements),
    )


class PatternRings:
    """
    Tracks the layout currently shown for one cell.

    The layout is recomputed only when the (gift, pattern) pair changes and
    is cleared as soon as either value goes missing.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL) -> None:
        self.base_url = base_url
        self._key: Tuple[Optional[str], Optional[str]] = (None, None)
        self._layout: RingLayout = EMPTY_LAYOUT

    @property
    def layout(self) -> RingLayout:
        return self._layout

    def update(self, gift: Optional[str], pattern: Optional[str]) -> bool:
        """
        Refresh for a new pair.

        Returns:
            True if the placements changed
        """
        key = (gift or None, pattern or None)
        if key == self._key:
            return False
        self._key = key
        self._layout = compute_ring_layout(key[0], key[1], self.base_url)
        logger.debug("Ring layout for %s/%s: %d placements", key[0], key[1], len(self._layout))
        return True
