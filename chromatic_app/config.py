"""Configuration helpers for the chromatic compatibility engine."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_IDEAL_THRESHOLD = 0.15
DEFAULT_AVOID_MARGIN = 0.05
DEFAULT_RECOMPUTE_BATCH_SIZE = 25
DEFAULT_MAX_PREVIEW_SESSIONS = 1000


@dataclass
class EngineConfig:
    """Configuration values for the engine.

    Storage locations point at the local collaborators used in development;
    the classifier thresholds are tunable constants rather than fixed truth.
    """

    wardrobe_db_path: str = "data/wardrobe.db"
    profile_store_dir: str = "data/profiles"
    ideal_threshold: float = DEFAULT_IDEAL_THRESHOLD
    avoid_margin: float = DEFAULT_AVOID_MARGIN
    recompute_batch_size: int = DEFAULT_RECOMPUTE_BATCH_SIZE
    max_preview_sessions: int = DEFAULT_MAX_PREVIEW_SESSIONS
    log_level: str = "INFO"
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is merged with environment variables, which take priority.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("ENGINE_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        wardrobe_db_path = get_value("wardrobe_db_path", "data/wardrobe.db")
        profile_store_dir = get_value("profile_store_dir", "data/profiles")
        ideal_threshold = get_value("ideal_threshold")
        avoid_margin = get_value("avoid_margin")
        batch_size = get_value("recompute_batch_size")
        max_sessions = get_value("max_preview_sessions")
        log_level = get_value("log_level", "INFO")

        config = cls(
            wardrobe_db_path=str(wardrobe_db_path or "data/wardrobe.db"),
            profile_store_dir=str(profile_store_dir or "data/profiles"),
            ideal_threshold=float(ideal_threshold) if ideal_threshold else DEFAULT_IDEAL_THRESHOLD,
            avoid_margin=float(avoid_margin) if avoid_margin else DEFAULT_AVOID_MARGIN,
            recompute_batch_size=int(batch_size) if batch_size else DEFAULT_RECOMPUTE_BATCH_SIZE,
            max_preview_sessions=int(max_sessions) if max_sessions else DEFAULT_MAX_PREVIEW_SESSIONS,
            log_level=str(log_level or "INFO"),
            environment=env_name,
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Reject thresholds outside the normalised distance range."""

        if not 0.0 <= self.ideal_threshold <= 1.0:
            raise ValueError(f"ideal_threshold must be within [0, 1], got {self.ideal_threshold}")
        if not 0.0 <= self.avoid_margin <= 1.0:
            raise ValueError(f"avoid_margin must be within [0, 1], got {self.avoid_margin}")
        if self.recompute_batch_size < 1:
            raise ValueError("recompute_batch_size must be at least 1")
        if self.max_preview_sessions < 1:
            raise ValueError("max_preview_sessions must be at least 1")

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
