"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.color import Color, DominantColor, GarmentColorAnalysis, normalize_color
from models.season import SeasonCharacteristics, SeasonColors, SeasonPalette
from models.wardrobe_item import WardrobeItem, from_raw_metadata

__all__ = [
    "Color",
    "DominantColor",
    "GarmentColorAnalysis",
    "normalize_color",
    "SeasonCharacteristics",
    "SeasonColors",
    "SeasonPalette",
    "WardrobeItem",
    "from_raw_metadata",
]
