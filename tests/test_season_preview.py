"""Season preview state, effective season and promotion."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.recompute import WardrobeRecomputer
from memory.season_preview import INACTIVE, PREVIEWING, SeasonPreviewSession
from memory.user_profile import JSONProfileStore, UserProfile
from models.wardrobe_item import from_raw_metadata
from tools.season_catalog import SeasonCatalog
from tools.wardrobe_store import SQLiteWardrobeStore

USER = "user-42"


class ReadOnlyProfileStore(JSONProfileStore):
    def update_profile(self, user_id: str, updates: Dict[str, Any]) -> UserProfile:
        raise OSError("disk is read-only")


@pytest.fixture(scope="module")
def catalog() -> SeasonCatalog:
    loaded = SeasonCatalog()
    loaded.init()
    return loaded


@pytest.fixture()
def profiles(tmp_path: Path) -> JSONProfileStore:
    return JSONProfileStore(tmp_path / "profiles")


@pytest.fixture()
def wardrobe(tmp_path: Path) -> SQLiteWardrobeStore:
    store = SQLiteWardrobeStore(tmp_path / "wardrobe.db")
    rows = [
        ("navy-dress", [{"hex": "#000080", "name": "Marinho", "percentage": 0.9}], None),
        ("orange-top", [], "#FF8C00"),
        ("mystery-bag", [], None),
    ]
    for item_id, colors, code in rows:
        store.create_item(
            from_raw_metadata(
                {
                    "item_id": item_id,
                    "user_id": USER,
                    "image_url": "img",
                    "category": "bag" if "bag" in item_id else "dress",
                    "dominant_colors": colors,
                    "color_code": code,
                    "chromatic_compatibility": "neutral" if colors or code else None,
                }
            )
        )
    return store


@pytest.fixture()
def session(profiles, catalog, wardrobe) -> SeasonPreviewSession:
    return SeasonPreviewSession(USER, profiles, catalog, WardrobeRecomputer(wardrobe))


def test_session_starts_inactive(session: SeasonPreviewSession) -> None:
    assert session.state == INACTIVE
    assert session.preview is None
    assert session.effective_season() is None


def test_preview_transitions(session: SeasonPreviewSession, catalog: SeasonCatalog) -> None:
    session.set_preview(catalog.by_id("spring-light"))
    assert session.state == PREVIEWING
    session.set_preview(catalog.by_id("winter-cool"))
    assert session.preview.id == "winter-cool"
    session.clear_preview()
    assert session.state == INACTIVE
    session.clear_preview()
    assert session.state == INACTIVE


def test_set_preview_requires_a_season(session: SeasonPreviewSession) -> None:
    with pytest.raises(ValueError):
        session.set_preview(None)


def test_effective_season_prefers_preview(session, catalog, profiles) -> None:
    persisted = catalog.by_id("autumn-deep")
    assert session.get_effective_season(persisted) is persisted
    assert session.get_effective_season(None) is None

    preview = catalog.by_id("summer-soft")
    session.set_preview(preview)
    assert session.get_effective_season(persisted) is preview
    assert session.get_effective_season(None) is preview

    profiles.update_profile(USER, {"color_season": "autumn-deep"})
    session.clear_preview()
    assert session.effective_season().id == "autumn-deep"


def test_preview_does_not_touch_profile(session, catalog, profiles) -> None:
    profiles.update_profile(USER, {"color_season": "spring-light"})
    session.set_preview(catalog.by_id("winter-cool"))
    assert profiles.get_profile(USER).color_season == "spring-light"
    assert session.persisted_season().id == "spring-light"


def test_promote_without_preview_fails(session, profiles) -> None:
    profiles.update_profile(USER, {"color_season": "spring-light"})
    outcome = session.promote_to_persisted()
    assert outcome.ok is False
    assert outcome.reason == "no active preview"
    assert profiles.get_profile(USER).color_season == "spring-light"


def test_promote_without_user_fails(profiles, catalog) -> None:
    anonymous = SeasonPreviewSession(None, profiles, catalog)
    anonymous.set_preview(catalog.by_id("winter-cool"))
    outcome = anonymous.promote_to_persisted()
    assert outcome.ok is False
    assert outcome.reason == "no identified user"
    assert anonymous.is_previewing
    assert anonymous.persisted_season() is None


def test_promote_persists_and_recomputes(session, catalog, profiles, wardrobe) -> None:
    winter = catalog.by_id("winter-cool")
    session.set_preview(winter)

    outcome = session.promote_to_persisted()

    assert outcome.ok is True
    assert outcome.season_id == "winter-cool"
    assert session.state == INACTIVE

    profile = profiles.get_profile(USER)
    assert profile.color_season == "winter-cool"
    assert profile.color_analysis["recommended_colors"] == winter.recommended_color_names()
    assert profile.color_analysis["avoid_hex"] == [c.hex for c in winter.colors.avoid]
    assert "updated_at" in profile.color_analysis

    assert outcome.recompute.succeeded == 2
    assert wardrobe.get_item(USER, "navy-dress").chromatic_compatibility == "ideal"
    assert wardrobe.get_item(USER, "orange-top").chromatic_compatibility == "avoid"
    assert wardrobe.get_item(USER, "mystery-bag").chromatic_compatibility is None


def test_second_promotion_is_rejected(session, catalog, profiles) -> None:
    session.set_preview(catalog.by_id("winter-cool"))
    assert session.promote_to_persisted().ok

    retry = session.promote_to_persisted()
    assert retry.ok is False
    assert retry.reason == "no active preview"
    assert profiles.get_profile(USER).color_season == "winter-cool"


def test_failed_profile_write_keeps_preview(tmp_path, catalog, wardrobe) -> None:
    session = SeasonPreviewSession(
        USER, ReadOnlyProfileStore(tmp_path / "ro"), catalog, WardrobeRecomputer(wardrobe)
    )
    session.set_preview(catalog.by_id("winter-cool"))

    outcome = session.promote_to_persisted()

    assert outcome.ok is False
    assert outcome.reason.startswith("could not save season")
    assert session.state == PREVIEWING
    assert wardrobe.get_item(USER, "navy-dress").chromatic_compatibility == "neutral"


def test_sessions_are_isolated(profiles, catalog) -> None:
    first = SeasonPreviewSession("a", profiles, catalog)
    second = SeasonPreviewSession("b", profiles, catalog)
    first.set_preview(catalog.by_id("winter-cool"))
    assert second.preview is None


def test_profile_store_defaults(profiles) -> None:
    profile = profiles.get_profile("new-user")
    assert profile.color_season is None
    assert profile.color_analysis is None
    assert not (profiles.base_dir / "new-user.json").exists()


@pytest.mark.parametrize("user_id", ["../escaped", "nested/user", ""])
def test_profile_store_rejects_paths_outside_base_dir(tmp_path: Path, user_id: str) -> None:
    store = JSONProfileStore(tmp_path / "profiles")
    with pytest.raises(ValueError):
        store.update_profile(user_id, {"color_season": "winter-cool"})
    assert not (tmp_path / "escaped.json").exists()


def test_promotion_for_unsafe_user_id_fails_cleanly(tmp_path: Path, catalog) -> None:
    session = SeasonPreviewSession("../escaped", JSONProfileStore(tmp_path / "profiles"), catalog)
    session.set_preview(catalog.by_id("winter-cool"))

    outcome = session.promote_to_persisted()

    assert outcome.ok is False
    assert outcome.reason.startswith("could not save season")
    assert not (tmp_path / "escaped.json").exists()
