"""User profile store holding the persisted color season."""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class UserProfile:
    user_id: str
    color_season: Optional[str] = None
    color_analysis: Optional[Dict[str, Any]] = None
    preferences: Dict[str, Any] = field(default_factory=dict)


class ProfileStore:
    """Interface for the persisted profile record."""

    def get_profile(self, user_id: str) -> UserProfile:
        raise NotImplementedError

    def update_profile(self, user_id: str, updates: Dict[str, Any]) -> UserProfile:
        raise NotImplementedError


class JSONProfileStore(ProfileStore):
    """Simple JSON-backed profile store, one file per user."""

    def __init__(self, base_dir: str | Path = "data/profiles") -> None:
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _profile_path(self, user_id: str) -> Path:
        """Map a user id to its file, refusing ids that would leave ``base_dir``."""

        base = self.base_dir.resolve()
        path = (base / f"{user_id}.json").resolve()
        if not user_id or path.parent != base:
            raise ValueError(f"Invalid user id for profile storage: {user_id!r}")
        return path

    def get_profile(self, user_id: str) -> UserProfile:
        path = self._profile_path(user_id)
        if not path.exists():
            return UserProfile(user_id=user_id)

        data = json.loads(path.read_text())
        return UserProfile(
            user_id=user_id,
            color_season=data.get("color_season"),
            color_analysis=data.get("color_analysis"),
            preferences=data.get("preferences", {}),
        )

    def update_profile(self, user_id: str, updates: Dict[str, Any]) -> UserProfile:
        profile = self.get_profile(user_id)
        for key, value in updates.items():
            if key != "user_id" and hasattr(profile, key):
                setattr(profile, key, value)
        self._profile_path(user_id).write_text(json.dumps(asdict(profile), indent=2, ensure_ascii=False))
        return profile
