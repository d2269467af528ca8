"""Core data structures for the gift grid planner.

Catalog entries (variants, backdrops) and the Cell value stored in the grid.
"""
from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_EDGE_COLOR = "#000"
DEFAULT_CENTER_COLOR = "#333"


def normalize_gift_name(name: str) -> str:
    """Lowercase a gift name and turn spaces into hyphens for URL paths."""
    return name.lower().replace(" ", "-")


@dataclass(frozen=True, slots=True)
class Variant:
    """A named model or pattern of one gift, with its rarity."""
    name: str
    rarity_permille: int = 0

    @classmethod
    def from_payload(cls, data: Any) -> Optional["Variant"]:
        """Build from a ``{name, rarityPermille}`` entry, None if malformed."""
        if not isinstance(data, dict) or not isinstance(data.get("name"), str):
            return None
        rarity = data.get("rarityPermille", 0)
        if isinstance(rarity, bool) or not isinstance(rarity, (int, float)):
            return None
        return cls(name=data["name"], rarity_permille=max(0, min(1000, int(rarity))))

    @property
    def display_label(self) -> str:
        return f"{self.name} ({self.rarity_permille / 10:.1f}‰)"


class ModelVariant(Variant):
    __slots__ = ()


class PatternVariant(Variant):
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class BackdropHex:
    edge_color: str = DEFAULT_EDGE_COLOR
    center_color: str = DEFAULT_CENTER_COLOR


@dataclass(frozen=True, slots=True)
class Backdrop:
    """A background gradient shared by every gift."""
    name: str
    hex: Optional[BackdropHex] = None

    @classmethod
    def from_payload(cls, data: Any) -> Optional["Backdrop"]:
        if not isinstance(data, dict) or not isinstance(data.get("name"), str):
            return None
        hex_data = data.get("hex")
        backdrop_hex = None
        if isinstance(hex_data, dict):
            backdrop_hex = BackdropHex(
                edge_color=hex_data.get("edgeColor") or DEFAULT_EDGE_COLOR,
                center_color=hex_data.get("centerColor") or DEFAULT_CENTER_COLOR,
            )
        return cls(name=data["name"], hex=backdrop_hex)

    @property
    def edge_color(self) -> str:
        return self.hex.edge_color if self.hex else DEFAULT_EDGE_COLOR

    @property
    def center_color(self) -> str:
        return self.hex.center_color if self.hex else DEFAULT_CENTER_COLOR


@dataclass(frozen=True, slots=True)
class Cell:
    """
    One grid position's Gift/Model/Backdrop/Pattern combination.

    Model, pattern and backdrop only mean something once a gift is set, so
    clearing the gift clears all three.
    """
    gift: Optional[str] = None
    model: Optional[str] = None
    backdrop: Optional[Backdrop] = None
    pattern: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.gift and (self.model or self.backdrop or self.pattern):
            object.__setattr__(self, "gift", None)
            object.__setattr__(self, "model", None)
            object.__setattr__(self, "backdrop", None)
            object.__setattr__(self, "pattern", None)

    @property
    def is_blank(self) -> bool:
        return not (self.gift or self.model or self.backdrop or self.pattern)

    def __str__(self) -> str:
        backdrop = self.backdrop.name if self.backdrop else None
        return f"Cell(gift={self.gift}, model={self.model}, backdrop={backdrop}, pattern={self.pattern})"
