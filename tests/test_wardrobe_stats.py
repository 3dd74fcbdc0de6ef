"""Wardrobe and look aggregation."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.wardrobe_stats import (
    WardrobeStats,
    aggregate,
    chromatic_score,
    filter_by_compatibility,
    harmony_level,
    look_harmony_score,
)
from models.wardrobe_item import WardrobeItem


def _items(*labels):
    return [{"item_id": str(i), "chromatic_compatibility": label} for i, label in enumerate(labels)]


def test_empty_wardrobe() -> None:
    stats = aggregate([])
    assert stats == WardrobeStats()
    assert stats.ideal_ratio == 0.0
    assert stats.ideal_percentage == 0


def test_counts_partition_total() -> None:
    stats = aggregate(_items("ideal", "ideal", "neutral", "avoid", None, "bogus", "IDEAL"))
    assert (stats.ideal, stats.neutral, stats.avoid, stats.unknown) == (3, 1, 1, 2)
    assert stats.total == 7
    assert stats.ideal + stats.neutral + stats.avoid + stats.unknown == stats.total


def test_ideal_ratio() -> None:
    stats = aggregate(_items("ideal", "ideal", "avoid"))
    assert stats.ideal_percentage == 67
    assert stats.to_dict()["ideal_ratio"] == stats.ideal / 3


def test_aggregate_reads_item_objects() -> None:
    items = [
        WardrobeItem(item_id="a", user_id="u", image_url="img", category="top", chromatic_compatibility="avoid"),
        WardrobeItem(item_id="b", user_id="u", image_url="img", category="shoes"),
    ]
    stats = aggregate(items)
    assert stats.avoid == 1
    assert stats.unknown == 1


def test_filter_by_compatibility() -> None:
    items = _items("ideal", None, "avoid", "ideal")
    assert [item["item_id"] for item in filter_by_compatibility(items, "ideal")] == ["0", "3"]
    assert [item["item_id"] for item in filter_by_compatibility(items, "unknown")] == ["1"]


def test_look_harmony() -> None:
    assert look_harmony_score([]) == 0
    assert look_harmony_score(_items("ideal", "ideal")) == 100
    assert look_harmony_score(_items("ideal", "neutral")) == 75
    assert look_harmony_score(_items("avoid", None)) == 0

    assert harmony_level(100) == "excellent"
    assert harmony_level(80) == "excellent"
    assert harmony_level(75) == "good"
    assert harmony_level(49) == "low"


def test_chromatic_score_gives_unknown_partial_credit() -> None:
    assert chromatic_score([]) == 0
    assert chromatic_score(_items("ideal", None)) == 62
    assert chromatic_score(_items("neutral", "avoid")) == 25
