"""Wardrobe item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from models.color import DominantColor, canonical_hex, coerce_dominant_colors
from models.taxonomy import validate_category, validate_compatibility


@dataclass
class WardrobeItem:
    """A garment in the user's wardrobe with its measured colors."""

    item_id: str
    user_id: str
    image_url: str
    category: str
    name: Optional[str] = None
    color_code: Optional[str] = None
    dominant_colors: List[DominantColor] = field(default_factory=list)
    chromatic_compatibility: Optional[str] = None
    is_favorite: bool = False
    is_capsule: bool = False
    occasion: Optional[str] = None
    season_tag: Optional[str] = None

    def __post_init__(self) -> None:
        self.category = validate_category(self.category)
        self.dominant_colors = coerce_dominant_colors(self.dominant_colors)
        self.chromatic_compatibility = validate_compatibility(self.chromatic_compatibility)
        if self.color_code:
            self.color_code = canonical_hex(self.color_code)

    @property
    def has_color_data(self) -> bool:
        return bool(self.dominant_colors) or bool(self.color_code)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item_id": self.item_id,
            "user_id": self.user_id,
            "image_url": self.image_url,
            "category": self.category,
            "name": self.name,
            "color_code": self.color_code,
            "dominant_colors": [color.to_dict() for color in self.dominant_colors],
            "chromatic_compatibility": self.chromatic_compatibility,
            "is_favorite": self.is_favorite,
            "is_capsule": self.is_capsule,
            "occasion": self.occasion,
            "season_tag": self.season_tag,
        }


def from_raw_metadata(metadata: Dict[str, Any]) -> WardrobeItem:
    """Factory to build a :class:`WardrobeItem` from a loose store record."""

    required_fields = ["item_id", "user_id", "image_url", "category"]
    missing = [name for name in required_fields if not metadata.get(name)]
    if missing:
        raise ValueError(f"Missing required fields for WardrobeItem: {missing}")

    return WardrobeItem(
        item_id=str(metadata["item_id"]),
        user_id=str(metadata["user_id"]),
        image_url=str(metadata["image_url"]),
        category=str(metadata["category"]),
        name=metadata.get("name"),
        color_code=metadata.get("color_code"),
        dominant_colors=metadata.get("dominant_colors") or [],
        chromatic_compatibility=metadata.get("chromatic_compatibility"),
        is_favorite=bool(metadata.get("is_favorite", False)),
        is_capsule=bool(metadata.get("is_capsule", False)),
        occasion=metadata.get("occasion"),
        season_tag=metadata.get("season_tag"),
    )


__all__ = ["WardrobeItem", "from_raw_metadata"]
