"""Wardrobe and look level aggregation of compatibility labels."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Mapping

from models.taxonomy import AVOID, IDEAL, NEUTRAL, UNKNOWN, normalize_compatibility

LABEL_SCORES = {IDEAL: 100, NEUTRAL: 50, AVOID: 0, UNKNOWN: 25}


@dataclass(frozen=True)
class WardrobeStats:
    """Bucket counts; the four buckets always sum to ``total``."""

    ideal: int = 0
    neutral: int = 0
    avoid: int = 0
    unknown: int = 0
    total: int = 0

    @property
    def ideal_ratio(self) -> float:
        return self.ideal / self.total if self.total else 0.0

    @property
    def ideal_percentage(self) -> int:
        return round(self.ideal_ratio * 100)

    def to_dict(self) -> Dict[str, Any]:
        return {**asdict(self), "ideal_ratio": self.ideal_ratio}


def label_of(item: Any) -> str:
    """Read ``chromatic_compatibility`` from a mapping or an object."""

    if isinstance(item, Mapping):
        raw = item.get("chromatic_compatibility")
    else:
        raw = getattr(item, "chromatic_compatibility", None)
    return normalize_compatibility(raw)


def aggregate(items: Iterable[Any]) -> WardrobeStats:
    """Count items per label; null or unrecognised labels count as unknown."""

    counts = {IDEAL: 0, NEUTRAL: 0, AVOID: 0, UNKNOWN: 0}
    total = 0
    for item in items:
        counts[label_of(item)] += 1
        total += 1
    return WardrobeStats(total=total, **counts)


def filter_by_compatibility(items: Iterable[Any], label: str) -> List[Any]:
    wanted = normalize_compatibility(label)
    return [item for item in items if label_of(item) == wanted]


def look_harmony_score(items: Iterable[Any]) -> int:
    """Harmony of a look in 0-100: ideal pieces count fully, neutral ones half."""

    stats = aggregate(items)
    if not stats.total:
        return 0
    return round((stats.ideal * 100 + stats.neutral * 50) / stats.total)


def harmony_level(score: int) -> str:
    if score >= 80:
        return "excellent"
    if score >= 50:
        return "good"
    return "low"


def chromatic_score(items: Iterable[Any]) -> int:
    """Mean per-item score where unclassified pieces get partial credit."""

    labels = [label_of(item) for item in items]
    if not labels:
        return 0
    return round(sum(LABEL_SCORES[label] for label in labels) / len(labels))


__all__ = [
    "LABEL_SCORES",
    "WardrobeStats",
    "aggregate",
    "chromatic_score",
    "filter_by_compatibility",
    "harmony_level",
    "label_of",
    "look_harmony_score",
]
