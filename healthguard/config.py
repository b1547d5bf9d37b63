from __future__ import annotations

import os
from pathlib import Path
from typing import List


def _flag(value: str | None) -> bool:
    return (value or "").strip() in {"1", "true", "True", "yes"}


class Settings:
    """Centralized configuration for the HealthGuard trends backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        # ---- Sample/profile collaborators ----
        self.data_root: Path = Path(
            os.environ.get("HEALTHGUARD_DATA_ROOT") or data_root_default
        ).expanduser()
        self.samples_file: Path = Path(
            os.environ.get("HEALTHGUARD_SAMPLES_FILE") or (self.data_root / "vitals.json")
        ).expanduser()
        self.profile_file: Path = Path(
            os.environ.get("HEALTHGUARD_PROFILE_FILE") or (self.data_root / "profile.json")
        ).expanduser()
        # When set, samples and profile are fetched from the REST wrapper instead of local files.
        self.remote_url: str | None = os.environ.get("HEALTHGUARD_REMOTE_URL") or None
        self.remote_token: str | None = os.environ.get("HEALTHGUARD_REMOTE_TOKEN") or None
        self.remote_timeout: float = float(os.environ.get("HEALTHGUARD_REMOTE_TIMEOUT") or "10")

        # ---- Trend engine ----
        # IANA zone name for the viewer's calendar; empty means the host's local zone.
        self.timezone: str | None = os.environ.get("HEALTHGUARD_TZ") or None
        self.exclude_zero_values: bool = _flag(os.environ.get("HEALTHGUARD_EXCLUDE_ZERO_VALUES"))
        self.recent_days: int = int(os.environ.get("HEALTHGUARD_RECENT_DAYS") or "7")

        # ---- Service ----
        self.log_level: str = (os.environ.get("HEALTHGUARD_LOG_LEVEL") or "INFO").upper()
        self.host: str = os.environ.get("HEALTHGUARD_HOST") or "127.0.0.1"
        self.port: int = int(os.environ.get("HEALTHGUARD_PORT") or "8000")

        cors = os.environ.get("HEALTHGUARD_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
