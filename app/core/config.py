# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os
from pathlib import Path

_DEFAULT_BOOTSTRAP_PATH = Path(__file__).resolve().parent.parent / "data" / "bootstrap.json"


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "schedule-service")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8005"))

    BOOTSTRAP_DATA_PATH: str = os.getenv(
        "BOOTSTRAP_DATA_PATH", str(_DEFAULT_BOOTSTRAP_PATH)
    )
    SEED_BOOTSTRAP_DATA: bool = (
        os.getenv("SEED_BOOTSTRAP_DATA", "true").lower() == "true"
    )

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
