"""Color value types and the Portuguese color-name normalizer."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from models.taxonomy import BRIGHTNESSES, OVERALL_TONES, SATURATIONS, validate_choice

logger = logging.getLogger(__name__)

NEUTRAL_GRAY = "#808080"
_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")

# Common names across the twelve seasonal palettes, keyed lower-case.
COLOR_NAME_TO_HEX: Dict[str, str] = {
    # neutros
    "branco puro": "#FFFFFF",
    "branco": "#FFFFFF",
    "preto": "#000000",
    "cinza": "#808080",
    "cinza claro": "#D3D3D3",
    "cinza escuro": "#696969",
    "bege": "#F5F5DC",
    "creme": "#FFFDD0",
    "marfim": "#FFFFF0",
    "caramelo": "#C68E17",
    "nude": "#E3BC9A",
    # azuis
    "marinho": "#000080",
    "azul marinho": "#000080",
    "azul royal": "#4169E1",
    "azul bebê": "#89CFF0",
    "azul celeste": "#87CEEB",
    "azul petróleo": "#005F69",
    "azul cobalto": "#0047AB",
    "azul aço": "#4682B4",
    "azul claro": "#ADD8E6",
    "azul": "#0000FF",
    "indigo": "#4B0082",
    "índigo": "#4B0082",
    "teal": "#008080",
    "teal escuro": "#008B8B",
    "turquesa": "#40E0D0",
    # vermelhos e rosas
    "carmesim": "#DC143C",
    "vermelho": "#FF0000",
    "vermelho escuro": "#8B0000",
    "vermelho tomate": "#FF6347",
    "bordô": "#800020",
    "rosa": "#FFC0CB",
    "rosa choque": "#FF1493",
    "rosa claro": "#FFB6C1",
    "rosa antigo": "#BC8F8F",
    "magenta": "#FF00FF",
    "fúcsia": "#FF00FF",
    "coral": "#FF7F50",
    "salmão": "#FA8072",
    # verdes
    "verde": "#008000",
    "verde esmeralda": "#50C878",
    "verde musgo": "#8A9A5B",
    "verde oliva": "#808000",
    "verde floresta": "#228B22",
    "verde menta": "#98FF98",
    "verde limão": "#32CD32",
    "verde jade": "#00A86B",
    # amarelos e laranjas
    "amarelo": "#FFD700",
    "amarelo mostarda": "#FFDB58",
    "amarelo ouro": "#FFD700",
    "dourado": "#DAA520",
    "laranja": "#FFA500",
    "laranja dourado": "#DAA520",
    "laranja queimado": "#CC5500",
    "pêssego": "#FFDAB9",
    "terracota": "#E2725B",
    # roxos e violetas
    "roxo": "#800080",
    "violeta": "#8B00FF",
    "lavanda": "#E6E6FA",
    "lilás": "#C8A2C8",
    "ameixa": "#8E4585",
    "berinjela": "#614051",
    "púrpura": "#800080",
    # marrons
    "marrom": "#8B4513",
    "marrom escuro": "#654321",
    "chocolate": "#D2691E",
    "café": "#6F4E37",
    "caqui": "#BDB76B",
    "castanho": "#8B4513",
    "mogno": "#C04000",
    "ferrugem": "#B7410E",
    # outros
    "vinho": "#722F37",
    "borgonha": "#800020",
    "champagne": "#F7E7CE",
    "cobre": "#B87333",
    "bronze": "#CD7F32",
    "prata": "#C0C0C0",
    "ouro": "#FFD700",
}


def is_valid_hex(value: Any) -> bool:
    """Return True for ``#RRGGBB`` strings (the leading ``#`` is optional)."""

    return isinstance(value, str) and bool(_HEX_PATTERN.match(value.strip()))


def canonical_hex(value: str) -> str:
    """Return the upper-case ``#RRGGBB`` form of a hex string.

    Raises a :class:`ValueError` when the value is not a six digit hex color.
    """

    match = _HEX_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise ValueError(f"Invalid hex color '{value}'. Expected '#RRGGBB'.")
    return f"#{match.group(1).upper()}"


def hex_to_rgb(value: str) -> Optional[Tuple[int, int, int]]:
    """Decode a hex string into an (R, G, B) tuple, or None when malformed."""

    match = _HEX_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if not match:
        return None
    digits = match.group(1)
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))  # type: ignore[return-value]


@dataclass(frozen=True)
class Color:
    """A display color: canonical hex plus a human readable name."""

    hex: str
    name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "hex", canonical_hex(self.hex))
        object.__setattr__(self, "name", str(self.name))

    def to_dict(self) -> Dict[str, str]:
        return {"hex": self.hex, "name": self.name}


@dataclass(frozen=True)
class DominantColor:
    """A color measured on a garment image with its share of the visible area.

    The hex is kept as reported by the vision service; the classifier treats
    undecodable values as maximally distant instead of rejecting them.
    """

    hex: str
    name: str
    percentage: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "percentage", float(self.percentage))
        if self.percentage < 0:
            raise ValueError(f"percentage must be non-negative, got {self.percentage}")

    def to_dict(self) -> Dict[str, Any]:
        return {"hex": self.hex, "name": self.name, "percentage": self.percentage}


@dataclass
class GarmentColorAnalysis:
    """Full color analysis of a garment as returned by the vision service."""

    dominant_colors: List[DominantColor] = field(default_factory=list)
    overall_tone: str = "neutral"
    saturation: str = "neutral"
    brightness: str = "medium"

    def __post_init__(self) -> None:
        self.dominant_colors = coerce_dominant_colors(self.dominant_colors)
        self.overall_tone = validate_choice(self.overall_tone, OVERALL_TONES, "overall_tone")
        self.saturation = validate_choice(self.saturation, SATURATIONS, "saturation")
        self.brightness = validate_choice(self.brightness, BRIGHTNESSES, "brightness")


ColorInput = Union[str, Color, Mapping[str, Any]]


def normalize_color(value: ColorInput) -> Color:
    """Resolve a color name or ``{hex, name}`` pair into a :class:`Color`.

    Unknown names and malformed pairs degrade to neutral gray and keep the
    original label; this function never raises.
    """

    if isinstance(value, Color):
        return value
    if isinstance(value, Mapping):
        name = str(value.get("name") or "")
        raw_hex = value.get("hex")
        if is_valid_hex(raw_hex):
            return Color(hex=raw_hex, name=name)
        if name:
            return normalize_color(name)
        logger.debug("unresolvable color payload %s", value)
        return Color(hex=NEUTRAL_GRAY, name=name)

    text = str(value)
    hex_value = COLOR_NAME_TO_HEX.get(text.strip().lower())
    if hex_value is None:
        logger.debug("unknown color name %r, using neutral gray", text)
        return Color(hex=NEUTRAL_GRAY, name=text)
    return Color(hex=hex_value, name=text)


def coerce_dominant_colors(values: Any) -> List[DominantColor]:
    """Build :class:`DominantColor` instances from loose payloads."""

    if not values:
        return []
    colors: List[DominantColor] = []
    for value in values:
        if isinstance(value, DominantColor):
            colors.append(value)
        elif isinstance(value, Mapping):
            colors.append(
                DominantColor(
                    hex=str(value.get("hex", "")),
                    name=str(value.get("name", "")),
                    percentage=float(value.get("percentage", 0.0) or 0.0),
                )
            )
        elif hasattr(value, "hex") and hasattr(value, "percentage"):
            colors.append(
                DominantColor(hex=str(value.hex), name=str(getattr(value, "name", "")), percentage=value.percentage)
            )
        else:
            raise ValueError(f"Unsupported dominant color payload: {value!r}")
    return colors


__all__ = [
    "COLOR_NAME_TO_HEX",
    "NEUTRAL_GRAY",
    "Color",
    "ColorInput",
    "DominantColor",
    "GarmentColorAnalysis",
    "canonical_hex",
    "coerce_dominant_colors",
    "hex_to_rgb",
    "is_valid_hex",
    "normalize_color",
]
