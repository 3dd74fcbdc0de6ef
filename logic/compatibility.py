"""Distance-based compatibility classification of garments against a season."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from models.color import Color, DominantColor, GarmentColorAnalysis, coerce_dominant_colors, hex_to_rgb
from models.season import SeasonPalette
from models.taxonomy import AVOID, IDEAL, NEUTRAL, UNKNOWN

logger = logging.getLogger(__name__)

_MAX_RGB_DISTANCE = math.sqrt(3 * 255 ** 2)
MAX_DISTANCE = 1.0


@dataclass(frozen=True)
class ClassifierThresholds:
    """Tunable decision constants on the normalised [0, 1] distance scale."""

    ideal_threshold: float = 0.15
    avoid_margin: float = 0.05


DEFAULT_THRESHOLDS = ClassifierThresholds()


@dataclass(frozen=True)
class PaletteScore:
    """Weighted distances of a garment to the primary and avoid sets."""

    d_primary: float
    d_avoid: float


def color_distance(hex1: str, hex2: str) -> float:
    """Euclidean RGB distance normalised to [0, 1]; malformed hex is maximal."""

    rgb1 = hex_to_rgb(hex1)
    rgb2 = hex_to_rgb(hex2)
    if rgb1 is None or rgb2 is None:
        return MAX_DISTANCE
    return math.dist(rgb1, rgb2) / _MAX_RGB_DISTANCE


def _min_distance(hex_value: str, palette: Sequence[Color]) -> float:
    if not palette:
        return MAX_DISTANCE
    return min(color_distance(hex_value, color.hex) for color in palette)


def _weights(colors: Sequence[DominantColor]) -> list[float]:
    total = sum(color.percentage for color in colors)
    if total <= 0:
        return [1.0 / len(colors)] * len(colors)
    return [color.percentage / total for color in colors]


def weighted_distance(colors: Sequence[DominantColor], palette: Sequence[Color]) -> float:
    """Share-weighted sum of each color's closest distance to ``palette``."""

    weights = _weights(colors)
    return sum(weight * _min_distance(color.hex, palette) for color, weight in zip(colors, weights))


def score_palette(dominant_colors: Iterable[DominantColor], season: SeasonPalette) -> PaletteScore:
    colors = coerce_dominant_colors(list(dominant_colors))
    return PaletteScore(
        d_primary=weighted_distance(colors, season.colors.primary),
        d_avoid=weighted_distance(colors, season.colors.avoid),
    )


def decide(score: PaletteScore, thresholds: ClassifierThresholds = DEFAULT_THRESHOLDS) -> str:
    """Apply the label policy: closer to avoid wins, then closeness to primary."""

    if score.d_primary - score.d_avoid > thresholds.avoid_margin:
        return AVOID
    if score.d_primary < thresholds.ideal_threshold:
        return IDEAL
    return NEUTRAL


def classify(
    dominant_colors: Optional[Iterable[DominantColor]],
    season: Optional[SeasonPalette],
    thresholds: ClassifierThresholds = DEFAULT_THRESHOLDS,
) -> str:
    """Return the compatibility label of a garment for ``season``.

    Missing inputs yield ``unknown`` instead of raising.
    """

    colors = coerce_dominant_colors(list(dominant_colors or []))
    if season is None or not colors:
        return UNKNOWN
    score = score_palette(colors, season)
    label = decide(score, thresholds)
    logger.debug(
        "classified %d colors against %s: d_primary=%.3f d_avoid=%.3f -> %s",
        len(colors),
        season.id,
        score.d_primary,
        score.d_avoid,
        label,
    )
    return label


def classify_color_code(
    color_code: Optional[str],
    season: Optional[SeasonPalette],
    thresholds: ClassifierThresholds = DEFAULT_THRESHOLDS,
) -> str:
    """Classify an item that only carries a single main color code."""

    if not color_code:
        return UNKNOWN
    return classify([DominantColor(hex=color_code, name="cor principal", percentage=1.0)], season, thresholds)


def classify_analysis(
    analysis: Optional[GarmentColorAnalysis],
    season: Optional[SeasonPalette],
    thresholds: ClassifierThresholds = DEFAULT_THRESHOLDS,
) -> str:
    """Classify a full vision analysis by its dominant colors alone.

    ``overall_tone``, ``saturation`` and ``brightness`` are descriptive and do
    not change the label, so two analyses with the same colors always agree.
    """

    if analysis is None:
        return UNKNOWN
    return classify(analysis.dominant_colors, season, thresholds)


__all__ = [
    "ClassifierThresholds",
    "DEFAULT_THRESHOLDS",
    "MAX_DISTANCE",
    "PaletteScore",
    "classify",
    "classify_analysis",
    "classify_color_code",
    "color_distance",
    "decide",
    "score_palette",
    "weighted_distance",
]
