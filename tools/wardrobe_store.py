"""Wardrobe storage abstractions and SQLite implementation."""
from __future__ import annotations

import json
import sqlite3
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

from models.color import DominantColor
from models.taxonomy import validate_compatibility
from models.wardrobe_item import WardrobeItem, from_raw_metadata


class WardrobeStore:
    """Persistence interface for wardrobe items."""

    def create_item(self, item: WardrobeItem) -> WardrobeItem:
        raise NotImplementedError

    def get_item(self, user_id: str, item_id: str) -> Optional[WardrobeItem]:
        raise NotImplementedError

    def list_items_for_user(self, user_id: str) -> List[WardrobeItem]:
        raise NotImplementedError

    def list_items_with_colors(self, user_id: str) -> List[WardrobeItem]:
        raise NotImplementedError

    def scan_items_with_colors(self, user_id: str) -> Tuple[List[WardrobeItem], List[Dict[str, str]]]:
        """Like :meth:`list_items_with_colors`, but rows that fail to load are
        returned as ``{"item_id", "reason"}`` entries instead of raising."""

        return self.list_items_with_colors(user_id), []

    def update_item(self, user_id: str, item_id: str, updated_fields: Dict[str, object]) -> Optional[WardrobeItem]:
        raise NotImplementedError

    def delete_item(self, user_id: str, item_id: str) -> bool:
        raise NotImplementedError

    def update_compatibility(
        self,
        user_id: str,
        item_id: str,
        label: str,
        dominant_colors: Optional[List[DominantColor]] = None,
    ) -> bool:
        raise NotImplementedError

    def bulk_update_compatibility(self, user_id: str, labels: Mapping[str, str]) -> int:
        """Write many labels in one round trip; returns the number of rows updated."""

        raise NotImplementedError


class SQLiteWardrobeStore(WardrobeStore):
    """Local SQLite-backed store for wardrobe items."""

    def __init__(self, database_path: str | Path = "data/wardrobe.db") -> None:
        self.database_path = Path(database_path)
        if self.database_path.parent and not self.database_path.parent.exists():
            self.database_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_tables()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.database_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_tables(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS wardrobe_items (
                    user_id TEXT NOT NULL,
                    item_id TEXT NOT NULL,
                    image_url TEXT,
                    category TEXT,
                    name TEXT,
                    color_code TEXT,
                    dominant_colors TEXT,
                    chromatic_compatibility TEXT,
                    is_favorite INTEGER DEFAULT 0,
                    is_capsule INTEGER DEFAULT 0,
                    occasion TEXT,
                    season_tag TEXT,
                    PRIMARY KEY (user_id, item_id)
                );
                """
            )

    @staticmethod
    def _serialise_colors(values: Optional[List[DominantColor]]) -> Optional[str]:
        if not values:
            return None
        return json.dumps([color.to_dict() for color in values])

    @staticmethod
    def _deserialise_list(raw: Optional[str]) -> List[dict]:
        return json.loads(raw) if raw else []

    def create_item(self, item: WardrobeItem) -> WardrobeItem:
        with self._connect() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO wardrobe_items (
                    user_id, item_id, image_url, category, name, color_code, dominant_colors,
                    chromatic_compatibility, is_favorite, is_capsule, occasion, season_tag
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    item.user_id,
                    item.item_id,
                    item.image_url,
                    item.category,
                    item.name,
                    item.color_code,
                    self._serialise_colors(item.dominant_colors),
                    item.chromatic_compatibility,
                    int(item.is_favorite),
                    int(item.is_capsule),
                    item.occasion,
                    item.season_tag,
                ),
            )
        return item

    def _row_to_item(self, row: sqlite3.Row) -> WardrobeItem:
        return from_raw_metadata(
            {
                "item_id": row["item_id"],
                "user_id": row["user_id"],
                "image_url": row["image_url"],
                "category": row["category"],
                "name": row["name"],
                "color_code": row["color_code"],
                "dominant_colors": self._deserialise_list(row["dominant_colors"]),
                "chromatic_compatibility": row["chromatic_compatibility"],
                "is_favorite": bool(row["is_favorite"]),
                "is_capsule": bool(row["is_capsule"]),
                "occasion": row["occasion"],
                "season_tag": row["season_tag"],
            }
        )

    def get_item(self, user_id: str, item_id: str) -> Optional[WardrobeItem]:
        with self._connect() as conn:
            cursor = conn.execute(
                "SELECT * FROM wardrobe_items WHERE user_id = ? AND item_id = ?",
                (user_id, item_id),
            )
            row = cursor.fetchone()
            return self._row_to_item(row) if row else None

    def list_items_for_user(self, user_id: str) -> List[WardrobeItem]:
        with self._connect() as conn:
            cursor = conn.execute(
                "SELECT * FROM wardrobe_items WHERE user_id = ? ORDER BY item_id",
                (user_id,),
            )
            return [self._row_to_item(row) for row in cursor.fetchall()]

    def _colored_rows(self, user_id: str) -> List[sqlite3.Row]:
        with self._connect() as conn:
            cursor = conn.execute(
                "SELECT * FROM wardrobe_items WHERE user_id = ? "
                "AND (dominant_colors IS NOT NULL OR color_code IS NOT NULL) ORDER BY item_id",
                (user_id,),
            )
            return cursor.fetchall()

    def list_items_with_colors(self, user_id: str) -> List[WardrobeItem]:
        return [self._row_to_item(row) for row in self._colored_rows(user_id)]

    def scan_items_with_colors(self, user_id: str) -> Tuple[List[WardrobeItem], List[Dict[str, str]]]:
        items: List[WardrobeItem] = []
        failures: List[Dict[str, str]] = []
        for row in self._colored_rows(user_id):
            try:
                items.append(self._row_to_item(row))
            except (ValueError, TypeError) as exc:
                failures.append({"item_id": row["item_id"], "reason": f"unreadable row: {exc}"})
        return items, failures

    def update_item(self, user_id: str, item_id: str, updated_fields: Dict[str, object]) -> Optional[WardrobeItem]:
        current = self.get_item(user_id, item_id)
        if not current:
            return None

        record = current.to_dict()
        for key, value in updated_fields.items():
            if key in {"user_id", "item_id"}:
                continue
            if key in record:
                record[key] = value

        validated = from_raw_metadata(record)
        return self.create_item(validated)

    def delete_item(self, user_id: str, item_id: str) -> bool:
        with self._connect() as conn:
            cursor = conn.execute(
                "DELETE FROM wardrobe_items WHERE user_id = ? AND item_id = ?",
                (user_id, item_id),
            )
            return cursor.rowcount > 0

    def update_compatibility(
        self,
        user_id: str,
        item_id: str,
        label: str,
        dominant_colors: Optional[List[DominantColor]] = None,
    ) -> bool:
        label = validate_compatibility(label) or "unknown"
        with self._connect() as conn:
            if dominant_colors is None:
                cursor = conn.execute(
                    "UPDATE wardrobe_items SET chromatic_compatibility = ? WHERE user_id = ? AND item_id = ?",
                    (label, user_id, item_id),
                )
            else:
                cursor = conn.execute(
                    "UPDATE wardrobe_items SET chromatic_compatibility = ?, dominant_colors = ? "
                    "WHERE user_id = ? AND item_id = ?",
                    (label, self._serialise_colors(dominant_colors), user_id, item_id),
                )
            return cursor.rowcount > 0

    def bulk_update_compatibility(self, user_id: str, labels: Mapping[str, str]) -> int:
        rows = [(validate_compatibility(label), user_id, item_id) for item_id, label in labels.items()]
        if not rows:
            return 0
        with self._connect() as conn:
            cursor = conn.executemany(
                "UPDATE wardrobe_items SET chromatic_compatibility = ? WHERE user_id = ? AND item_id = ?",
                rows,
            )
            return cursor.rowcount


__all__ = ["WardrobeStore", "SQLiteWardrobeStore"]
