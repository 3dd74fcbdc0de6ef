"""Write path for compatibility labels: single upload and bulk reconciliation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from chromatic_app.logging_config import get_logger, log_event, operation_context
from logic.compatibility import DEFAULT_THRESHOLDS, ClassifierThresholds, classify, classify_color_code
from models.color import DominantColor, coerce_dominant_colors
from models.season import SeasonPalette
from models.wardrobe_item import WardrobeItem
from tools.wardrobe_store import WardrobeStore

logger = get_logger(__name__)


@dataclass
class RecomputeSummary:
    """Result of a reconciliation pass over a user's wardrobe."""

    season_id: Optional[str]
    total: int = 0
    succeeded: int = 0
    failures: List[Dict[str, str]] = field(default_factory=list)
    labels: Dict[str, str] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return self.error is None and not self.failures


@dataclass
class ItemClassification:
    """Outcome of classifying and storing one garment at upload time."""

    item_id: str
    label: str
    stored: bool
    reason: Optional[str] = None


def label_for_item(
    item: WardrobeItem,
    season: Optional[SeasonPalette],
    thresholds: ClassifierThresholds = DEFAULT_THRESHOLDS,
) -> str:
    """Classify an item by its dominant colors, falling back to its color code."""

    if item.dominant_colors:
        return classify(item.dominant_colors, season, thresholds)
    return classify_color_code(item.color_code, season, thresholds)


def _chunks(item_ids: List[str], size: int) -> Iterable[List[str]]:
    for start in range(0, len(item_ids), size):
        yield item_ids[start : start + size]


class WardrobeRecomputer:
    """Recompute-and-overwrite labels for a wardrobe in bounded batches.

    Every label is derived from the item and the season alone, so a run that
    is interrupted can simply be repeated.
    """

    def __init__(
        self,
        store: WardrobeStore,
        batch_size: int = 25,
        thresholds: ClassifierThresholds = DEFAULT_THRESHOLDS,
    ) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.store = store
        self.batch_size = batch_size
        self.thresholds = thresholds

    def recompute(self, user_id: str, season: Optional[SeasonPalette]) -> RecomputeSummary:
        season_id = season.id if season else None
        summary = RecomputeSummary(season_id=season_id)
        with operation_context("recompute_wardrobe") as correlation_id:
            try:
                items, unreadable = self.store.scan_items_with_colors(user_id)
            except Exception as exc:
                log_event(
                    logger,
                    logging.ERROR,
                    "recompute_list_failed",
                    correlation_id=correlation_id,
                    error=str(exc),
                )
                summary.error = f"Could not read wardrobe items: {exc}"
                return summary

            summary.total = len(items) + len(unreadable)
            summary.failures.extend(unreadable)
            for item in items:
                try:
                    summary.labels[item.item_id] = label_for_item(item, season, self.thresholds)
                except ValueError as exc:
                    summary.failures.append({"item_id": item.item_id, "reason": str(exc)})

            for batch in _chunks(list(summary.labels), self.batch_size):
                self._write_batch(user_id, batch, summary, correlation_id)

            log_event(
                logger,
                logging.INFO,
                "recompute_completed",
                correlation_id=correlation_id,
                season_id=season_id,
                total=summary.total,
                succeeded=summary.succeeded,
                failed=summary.failed,
            )
        return summary

    def _write_batch(
        self, user_id: str, batch: List[str], summary: RecomputeSummary, correlation_id: str
    ) -> None:
        labels = {item_id: summary.labels[item_id] for item_id in batch}
        try:
            written = self.store.bulk_update_compatibility(user_id, labels)
        except Exception as exc:
            log_event(
                logger,
                logging.WARNING,
                "recompute_batch_failed",
                correlation_id=correlation_id,
                batch_size=len(batch),
                error=str(exc),
            )
        else:
            if written == len(batch):
                summary.succeeded += len(batch)
                return
            # Some rows vanished since listing; find out which item by item.
            log_event(
                logger,
                logging.WARNING,
                "recompute_batch_short",
                correlation_id=correlation_id,
                batch_size=len(batch),
                written=written,
            )

        for item_id, label in labels.items():
            try:
                if self.store.update_compatibility(user_id, item_id, label):
                    summary.succeeded += 1
                else:
                    summary.failures.append({"item_id": item_id, "reason": "item not found"})
            except Exception as exc:
                logger.error(
                    "Failed to store compatibility",
                    extra={"item_id": item_id, "error": str(exc), "correlation_id": correlation_id},
                )
                summary.failures.append({"item_id": item_id, "reason": str(exc)})

    def classify_and_store(
        self,
        user_id: str,
        item_id: str,
        dominant_colors: Iterable[DominantColor],
        season: Optional[SeasonPalette],
    ) -> ItemClassification:
        """Upload-time path: label one garment and persist colors and label together."""

        colors = coerce_dominant_colors(list(dominant_colors))
        label = classify(colors, season, self.thresholds)
        try:
            stored = self.store.update_compatibility(user_id, item_id, label, dominant_colors=colors)
        except Exception as exc:
            log_event(
                logger,
                logging.ERROR,
                "classification_store_failed",
                item_id=item_id,
                error=str(exc),
            )
            return ItemClassification(item_id=item_id, label=label, stored=False, reason=str(exc))
        if not stored:
            return ItemClassification(item_id=item_id, label=label, stored=False, reason="item not found")
        return ItemClassification(item_id=item_id, label=label, stored=True)


__all__ = ["ItemClassification", "RecomputeSummary", "WardrobeRecomputer", "label_for_item"]
