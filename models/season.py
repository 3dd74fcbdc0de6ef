"""Season palette domain models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from models.color import Color
from models.taxonomy import CHROMAS, DEPTHS, TEMPERATURES, normalize_main_season, validate_choice


@dataclass(frozen=True)
class SeasonCharacteristics:
    """Temperature, depth and chroma profile of a season."""

    temperature: str
    depth: str
    chroma: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "temperature", validate_choice(self.temperature, TEMPERATURES, "temperature"))
        object.__setattr__(self, "depth", validate_choice(self.depth, DEPTHS, "depth"))
        object.__setattr__(self, "chroma", validate_choice(self.chroma, CHROMAS, "chroma"))

    def matches(self, partial: Dict[str, Optional[str]]) -> int:
        """Count how many of the supplied fields agree with this profile."""

        count = 0
        for key in ("temperature", "depth", "chroma"):
            wanted = partial.get(key)
            if wanted and getattr(self, key) == wanted:
                count += 1
        return count


@dataclass(frozen=True)
class SeasonColors:
    """Recommended and avoided colors of a season plus display-only extras."""

    primary: Tuple[Color, ...]
    avoid: Tuple[Color, ...] = ()
    neutrals: Tuple[Color, ...] = ()
    accents: Tuple[Color, ...] = ()

    def __post_init__(self) -> None:
        overlap = {c.hex for c in self.primary} & {c.hex for c in self.avoid}
        if overlap:
            raise ValueError(f"primary and avoid colors overlap: {sorted(overlap)}")


@dataclass(frozen=True)
class SeasonPalette:
    """One season/subtype row of the catalog. Never mutated after load."""

    id: str
    name: str
    subtype: str
    main_season: str
    characteristics: SeasonCharacteristics
    colors: SeasonColors
    short_description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "main_season", normalize_main_season(self.main_season))

    @property
    def display_name(self) -> str:
        return f"{self.name} {self.subtype}".strip()

    def recommended_color_names(self) -> List[str]:
        return [color.name for color in self.colors.primary]

    def avoid_color_names(self) -> List[str]:
        return [color.name for color in self.colors.avoid]

    def to_analysis_record(self) -> Dict[str, Any]:
        """Profile representation written when a season is persisted."""

        return {
            "season_id": self.id,
            "season": self.name,
            "display_name": self.display_name,
            "subtype": self.subtype,
            "recommended_colors": self.recommended_color_names(),
            "avoid_colors": self.avoid_color_names(),
            "recommended_hex": [color.hex for color in self.colors.primary],
            "avoid_hex": [color.hex for color in self.colors.avoid],
        }


def build_palette(
    season_id: str,
    primary: List[Color],
    avoid: List[Color] | None = None,
    *,
    name: str = "",
    subtype: str = "",
    main_season: str = "winter",
    temperature: str = "cool",
    depth: str = "medium",
    chroma: str = "clear",
) -> SeasonPalette:
    """Convenience constructor for ad-hoc palettes outside the static catalog."""

    return SeasonPalette(
        id=season_id,
        name=name or season_id,
        subtype=subtype,
        main_season=main_season,
        characteristics=SeasonCharacteristics(temperature=temperature, depth=depth, chroma=chroma),
        colors=SeasonColors(primary=tuple(primary), avoid=tuple(avoid or ())),
    )


__all__ = ["SeasonCharacteristics", "SeasonColors", "SeasonPalette", "build_palette"]
