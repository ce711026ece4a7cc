"""Application configuration helpers."""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """Centralized configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=str(BASE_DIR / ".env"), env_file_encoding="utf-8")

    app_name: str = "Admin Console"
    environment: str = "dev"
    log_level: str = "INFO"

    # Table pages
    page_size: int = 5

    # Toasts
    notification_lifetime_ms: int = 3000

    # Order money
    tax_rate: Decimal = Decimal("0.10")
    shipping_fee: Decimal = Decimal("10.00")

    # Seed dataset (JSON), loaded into memory at startup
    seed_file: Optional[Path] = None

    # API behavior
    allow_origins: List[str] = ["http://localhost:5173", "http://localhost:3000", "*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
