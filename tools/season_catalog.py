"""Season palette catalog service with a load-once lifecycle."""
from __future__ import annotations

import importlib
import logging
import threading
from functools import lru_cache
from typing import Any, Callable, Dict, Iterable, List, Optional

from pydantic import ValidationError

from chromatic_app.logging_config import get_logger, log_event
from models.season import SeasonPalette
from logic.validation import SeasonRowSchema

LOGGER = get_logger(__name__)

RowLoader = Callable[[], Iterable[Dict[str, Any]]]


class CatalogValidationError(ValueError):
    """Raised when a catalog row is malformed; the catalog refuses to load."""


def load_static_rows() -> List[Dict[str, Any]]:
    """Import the bundled season table on demand."""

    module = importlib.import_module("models.season_data")
    return list(module.SEASON_ROWS)


def parse_rows(rows: Iterable[Dict[str, Any]]) -> List[SeasonPalette]:
    """Validate raw rows and build palettes, failing on the first bad row."""

    palettes: List[SeasonPalette] = []
    seen: set[str] = set()
    for index, row in enumerate(rows):
        try:
            palette = SeasonRowSchema.model_validate(row).to_palette()
        except (ValidationError, ValueError) as exc:
            row_id = row.get("id") if isinstance(row, dict) else None
            raise CatalogValidationError(f"Invalid season row {index} ({row_id}): {exc}") from exc
        if palette.id in seen:
            raise CatalogValidationError(f"Duplicate season id '{palette.id}'")
        seen.add(palette.id)
        palettes.append(palette)
    return palettes


class SeasonCatalog:
    """Read-only season table loaded at most once per instance.

    Queries operate on the cached table only and return empty results until
    :meth:`init` has completed; callers treat empty as "not loaded yet".
    """

    def __init__(self, loader: Optional[RowLoader] = None) -> None:
        self._loader = loader or load_static_rows
        self._lock = threading.Lock()
        self._seasons: Optional[List[SeasonPalette]] = None
        self._by_id: Dict[str, SeasonPalette] = {}
        self.load_count = 0

    def init(self) -> List[SeasonPalette]:
        """Load and cache the catalog; concurrent callers share a single load."""

        cached = self._seasons
        if cached is not None:
            return cached
        with self._lock:
            if self._seasons is not None:
                return self._seasons
            self.load_count += 1
            try:
                palettes = parse_rows(self._loader())
            except CatalogValidationError:
                log_event(LOGGER, logging.ERROR, "season_catalog_invalid", exc_info=True)
                raise
            self._by_id = {palette.id: palette for palette in palettes}
            self._seasons = palettes
            log_event(LOGGER, logging.INFO, "season_catalog_loaded", seasons=len(palettes))
            return palettes

    def is_ready(self) -> bool:
        return self._seasons is not None

    def seasons(self) -> List[SeasonPalette]:
        return list(self._seasons or [])

    def by_id(self, season_id: Optional[str]) -> Optional[SeasonPalette]:
        if not season_id:
            return None
        return self._by_id.get(season_id)

    def by_main_season(self, main_season: str) -> List[SeasonPalette]:
        return [s for s in self.seasons() if s.main_season == main_season]

    def by_temperature(self, temperature: str) -> List[SeasonPalette]:
        return [s for s in self.seasons() if s.characteristics.temperature == temperature]

    def by_depth(self, depth: str) -> List[SeasonPalette]:
        return [s for s in self.seasons() if s.characteristics.depth == depth]

    def find_closest(self, characteristics: Dict[str, Optional[str]] | None = None) -> List[SeasonPalette]:
        """Return palettes sharing at least two of the supplied traits.

        With fewer than two traits supplied nothing can qualify, so the
        result is empty.
        """

        supplied = {
            key: value
            for key, value in (characteristics or {}).items()
            if key in ("temperature", "depth", "chroma") and value
        }
        if len(supplied) < 2:
            return []
        return [s for s in self.seasons() if s.characteristics.matches(supplied) >= 2]


@lru_cache(maxsize=1)
def default_catalog() -> SeasonCatalog:
    """Process-wide catalog backed by the bundled season table."""

    return SeasonCatalog()


__all__ = [
    "CatalogValidationError",
    "SeasonCatalog",
    "default_catalog",
    "load_static_rows",
    "parse_rows",
]
