"""Engine bootstrap: wires the catalog, stores and services together."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from chromatic_app.config import EngineConfig
from chromatic_app.logging_config import configure_logging, get_logger, log_event
from logic.compatibility import ClassifierThresholds, classify
from logic.recompute import ItemClassification, RecomputeSummary, WardrobeRecomputer
from logic.validation import ClassifyInput, ClassifyItemInput
from logic.wardrobe_stats import WardrobeStats, aggregate
from memory.season_preview import SeasonPreviewSession
from memory.user_profile import JSONProfileStore, ProfileStore
from models.color import DominantColor
from models.season import SeasonPalette
from tools.observability import instrument_operation
from tools.season_catalog import SeasonCatalog, default_catalog
from tools.wardrobe_store import SQLiteWardrobeStore, WardrobeStore

LOGGER = get_logger(__name__)


class ChromaticEngineApp:
    """Entry point exposing classification, stats and season previews."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        catalog: SeasonCatalog | None = None,
        wardrobe_store: WardrobeStore | None = None,
        profile_store: ProfileStore | None = None,
    ) -> None:
        self.config = config or EngineConfig.from_env()
        configure_logging(self.config.log_level)

        self.catalog = catalog or default_catalog()
        self.wardrobe_store = wardrobe_store or SQLiteWardrobeStore(self.config.wardrobe_db_path)
        self.profile_store = profile_store or JSONProfileStore(self.config.profile_store_dir)
        self.thresholds = ClassifierThresholds(
            ideal_threshold=self.config.ideal_threshold,
            avoid_margin=self.config.avoid_margin,
        )
        self.recomputer = WardrobeRecomputer(
            self.wardrobe_store,
            batch_size=self.config.recompute_batch_size,
            thresholds=self.thresholds,
        )

    def init(self) -> List[SeasonPalette]:
        """Load the season catalog; safe to call repeatedly."""

        return self.catalog.init()

    def is_ready(self) -> bool:
        return self.catalog.is_ready()

    def open_session(self, user_id: Optional[str]) -> SeasonPreviewSession:
        """Create a preview session owned by a single user session."""

        return SeasonPreviewSession(
            user_id=user_id,
            profile_store=self.profile_store,
            catalog=self.catalog,
            recomputer=self.recomputer,
        )

    @instrument_operation("classify", input_model=ClassifyInput, summarize=lambda label: {"label": label})
    def classify(self, dominant_colors: Iterable[DominantColor] = (), season_id: Optional[str] = None) -> str:
        """Classify colors against a catalog season id; unknown ids yield ``unknown``."""

        return classify(dominant_colors, self.catalog.by_id(season_id), self.thresholds)

    def classify_for_season(
        self, dominant_colors: Iterable[DominantColor], season: Optional[SeasonPalette]
    ) -> str:
        return classify(dominant_colors, season, self.thresholds)

    @instrument_operation(
        "classify_item",
        input_model=ClassifyItemInput,
        summarize=lambda result: {"label": result.label, "stored": result.stored},
    )
    def classify_item(
        self,
        user_id: str,
        item_id: str,
        dominant_colors: Iterable[DominantColor] = (),
        session: Optional[SeasonPreviewSession] = None,
    ) -> ItemClassification:
        """Label a freshly uploaded garment against the user's persisted season."""

        preview_session = session or self.open_session(user_id)
        season = preview_session.persisted_season()
        return self.recomputer.classify_and_store(user_id, item_id, dominant_colors, season)

    def recompute_wardrobe(self, user_id: str) -> RecomputeSummary:
        """Re-run the reconciliation pass against the persisted season."""

        season = self.open_session(user_id).persisted_season()
        return self.recomputer.recompute(user_id, season)

    def aggregate_wardrobe(self, user_id: str) -> WardrobeStats:
        stats = aggregate(self.wardrobe_store.list_items_for_user(user_id))
        log_event(LOGGER, logging.DEBUG, "wardrobe_stats_computed", total=stats.total, ideal=stats.ideal)
        return stats

    def describe_season(self, season_id: str) -> Optional[Dict[str, Any]]:
        season = self.catalog.by_id(season_id)
        if season is None:
            return None
        return {
            "id": season.id,
            "display_name": season.display_name,
            "main_season": season.main_season,
            "characteristics": {
                "temperature": season.characteristics.temperature,
                "depth": season.characteristics.depth,
                "chroma": season.characteristics.chroma,
            },
            **season.to_analysis_record(),
        }


__all__ = ["ChromaticEngineApp"]
