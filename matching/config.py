"""
Matching Settings

Loads settings from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .models.config import DEFAULT_CONFIG, MatchingConfig

# Single .env at the project root
_ROOT_ENV = Path(__file__).resolve().parent.parent / ".env"
if _ROOT_ENV.exists():
    load_dotenv(_ROOT_ENV)


@dataclass
class Settings:
    """Runtime settings for scripts and providers."""

    # Paths
    data_dir: Path = Path(__file__).parent.parent / "data"
    students_json_path: Optional[Path] = None
    postings_json_path: Optional[Path] = None
    events_json_path: Optional[Path] = None
    # JSON file with MatchingConfig overrides (see MatchingConfig.from_dict)
    matching_config_path: Optional[Path] = None

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        base_dir = Path(__file__).parent.parent

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        data_dir = _path_env("DATA_DIR", base_dir / "data")
        return cls(
            data_dir=data_dir,
            students_json_path=_path_env("STUDENTS_JSON_PATH", data_dir / "students.json"),
            postings_json_path=_path_env("POSTINGS_JSON_PATH", data_dir / "postings.json"),
            events_json_path=_path_env("EVENTS_JSON_PATH", data_dir / "events.json"),
            matching_config_path=_path_env("MATCHING_CONFIG_PATH"),
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the settings.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.students_json_path is None or not self.students_json_path.exists():
            errors.append(f"Students JSON not found: {self.students_json_path}")

        if self.postings_json_path is None or not self.postings_json_path.exists():
            errors.append(f"Postings JSON not found: {self.postings_json_path}")

        if self.matching_config_path is not None and not self.matching_config_path.exists():
            errors.append(f"Matching config not found: {self.matching_config_path}")

        # Events file is optional

        return len(errors) == 0, errors

    def load_matching_config(self) -> MatchingConfig:
        """MatchingConfig from matching_config_path, or defaults when unset."""
        if self.matching_config_path is None:
            return DEFAULT_CONFIG
        with open(self.matching_config_path) as f:
            return MatchingConfig.from_dict(json.load(f))


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global _settings
    _settings = None
    return get_settings()
