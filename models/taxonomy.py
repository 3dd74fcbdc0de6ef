"""Canonical vocabularies for seasons, garments and compatibility labels.

This module centralises the fixed enumerations used by the season catalog,
the classifier and the wardrobe models so that validation stays consistent
across stores, schemas and services.
"""

from typing import Dict, Iterable, List, Optional


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower().replace(" ", "_")


MAIN_SEASONS = ["spring", "summer", "autumn", "winter"]
TEMPERATURES = ["warm", "cool", "neutral-warm", "neutral-cool"]
DEPTHS = ["light", "medium", "deep"]
CHROMAS = ["bright", "muted", "clear"]

OVERALL_TONES = ["warm", "cool", "neutral"]
SATURATIONS = ["vivid", "muted", "neutral"]
BRIGHTNESSES = ["light", "medium", "dark"]

IDEAL = "ideal"
NEUTRAL = "neutral"
AVOID = "avoid"
UNKNOWN = "unknown"
COMPATIBILITY_LABELS = [IDEAL, NEUTRAL, AVOID, UNKNOWN]

GARMENT_CATEGORIES = [
    "top",
    "bottom",
    "dress",
    "outerwear",
    "shoes",
    "accessory",
    "bag",
    "jewelry",
]

# Portuguese labels used by the season catalog mapped onto canonical keys.
MAIN_SEASON_ALIASES: Dict[str, str] = {
    "primavera": "spring",
    "verão": "summer",
    "verao": "summer",
    "outono": "autumn",
    "inverno": "winter",
}


def normalize_main_season(value: str) -> str:
    """Map a main season label (English or Portuguese) onto its canonical key."""

    key = value.strip().lower()
    key = MAIN_SEASON_ALIASES.get(key, key)
    if key not in MAIN_SEASONS:
        raise ValueError(f"Unsupported main season '{value}'. Allowed: {MAIN_SEASONS}")
    return key


def validate_category(value: str) -> str:
    """Validate and normalise a garment category.

    Raises a :class:`ValueError` if the category is not part of the canonical
    taxonomy.
    """

    key = _normalize_key(value)
    if key not in GARMENT_CATEGORIES:
        raise ValueError(f"Unsupported category '{value}'. Allowed: {GARMENT_CATEGORIES}")
    return key


def normalize_compatibility(value: Optional[str]) -> str:
    """Collapse missing or unrecognised labels onto ``unknown``."""

    if not value:
        return UNKNOWN
    key = str(value).strip().lower()
    return key if key in COMPATIBILITY_LABELS else UNKNOWN


def validate_compatibility(value: Optional[str]) -> Optional[str]:
    """Validate a stored label, allowing ``None`` for never-classified items."""

    if value is None:
        return None
    key = str(value).strip().lower()
    if key not in COMPATIBILITY_LABELS:
        raise ValueError(f"Unsupported compatibility '{value}'. Allowed: {COMPATIBILITY_LABELS}")
    return key


def validate_choice(value: str, allowed: Iterable[str], field_name: str) -> str:
    """Validate a value against a fixed enumeration."""

    key = value.strip().lower()
    allowed_list: List[str] = list(allowed)
    if key not in allowed_list:
        raise ValueError(f"Unsupported {field_name} '{value}'. Allowed: {allowed_list}")
    return key


__all__ = [
    "MAIN_SEASONS",
    "TEMPERATURES",
    "DEPTHS",
    "CHROMAS",
    "OVERALL_TONES",
    "SATURATIONS",
    "BRIGHTNESSES",
    "IDEAL",
    "NEUTRAL",
    "AVOID",
    "UNKNOWN",
    "COMPATIBILITY_LABELS",
    "GARMENT_CATEGORIES",
    "normalize_main_season",
    "validate_category",
    "normalize_compatibility",
    "validate_compatibility",
    "validate_choice",
]
