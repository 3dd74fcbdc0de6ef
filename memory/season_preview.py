"""Session-scoped season preview layered over the persisted profile season."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from chromatic_app.logging_config import get_logger, log_event, operation_context
from logic.recompute import RecomputeSummary, WardrobeRecomputer
from memory.user_profile import ProfileStore
from models.season import SeasonPalette
from tools.season_catalog import SeasonCatalog

LOGGER = get_logger(__name__)

INACTIVE = "inactive"
PREVIEWING = "previewing"


@dataclass
class PromotionOutcome:
    """Result of promoting a preview season to the profile."""

    ok: bool
    reason: Optional[str] = None
    season_id: Optional[str] = None
    recompute: Optional[RecomputeSummary] = None


class SeasonPreviewSession:
    """Holds one user's preview season; never shared between sessions.

    The preview lives next to the persisted season rather than replacing it,
    so what the user sees and what is saved are always distinguishable.
    """

    def __init__(
        self,
        user_id: Optional[str],
        profile_store: ProfileStore,
        catalog: SeasonCatalog,
        recomputer: Optional[WardrobeRecomputer] = None,
    ) -> None:
        self.user_id = user_id
        self.profile_store = profile_store
        self.catalog = catalog
        self.recomputer = recomputer
        self._preview: Optional[SeasonPalette] = None
        self._lock = threading.Lock()

    @property
    def preview(self) -> Optional[SeasonPalette]:
        return self._preview

    @property
    def state(self) -> str:
        return PREVIEWING if self._preview is not None else INACTIVE

    @property
    def is_previewing(self) -> bool:
        return self._preview is not None

    def set_preview(self, season: SeasonPalette) -> None:
        """Start or replace the preview; the latest candidate wins."""

        if season is None:
            raise ValueError("set_preview requires a season; use clear_preview to dismiss")
        with self._lock:
            self._preview = season
        LOGGER.info("Season preview set", extra={"season_id": season.id})

    def clear_preview(self) -> None:
        with self._lock:
            self._preview = None

    def get_effective_season(self, persisted: Optional[SeasonPalette]) -> Optional[SeasonPalette]:
        return self._preview or persisted

    def persisted_season(self) -> Optional[SeasonPalette]:
        """Resolve the profile's stored season id through the catalog."""

        if not self.user_id:
            return None
        profile = self.profile_store.get_profile(self.user_id)
        return self.catalog.by_id(profile.color_season)

    def effective_season(self) -> Optional[SeasonPalette]:
        return self.get_effective_season(self.persisted_season())

    def promote_to_persisted(self) -> PromotionOutcome:
        """Save the preview as the profile season and relabel the wardrobe.

        Failures are reported on the outcome; the persisted season is only
        touched when a preview and a user are both present.
        """

        with operation_context("promote_season_preview") as correlation_id:
            season = self._preview
            if season is None:
                return PromotionOutcome(ok=False, reason="no active preview")
            if not self.user_id:
                return PromotionOutcome(ok=False, reason="no identified user", season_id=season.id)

            analysis = {
                **season.to_analysis_record(),
                "updated_at": datetime.now(timezone.utc).isoformat(),
            }
            try:
                self.profile_store.update_profile(
                    self.user_id, {"color_season": season.id, "color_analysis": analysis}
                )
            except Exception as exc:
                log_event(
                    LOGGER,
                    logging.ERROR,
                    "season_promotion_failed",
                    correlation_id=correlation_id,
                    season_id=season.id,
                    error=str(exc),
                )
                return PromotionOutcome(ok=False, reason=f"could not save season: {exc}", season_id=season.id)

            with self._lock:
                if self._preview is season:
                    self._preview = None

            summary = self.recomputer.recompute(self.user_id, season) if self.recomputer else None
            log_event(
                LOGGER,
                logging.INFO,
                "season_promoted",
                correlation_id=correlation_id,
                season_id=season.id,
                recomputed=summary.succeeded if summary else 0,
            )
            return PromotionOutcome(ok=True, season_id=season.id, recompute=summary)


__all__ = ["INACTIVE", "PREVIEWING", "PromotionOutcome", "SeasonPreviewSession"]
