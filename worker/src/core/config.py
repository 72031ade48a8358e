"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Raised when mandatory configuration is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    google_api_key: str
    search_keyword: str = "restaurant"
    page_delay_seconds: float = 2.0
    request_timeout: Optional[float] = None


def _get_float_env(name: str, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    google_api_key = os.getenv("GOOGLE_API_KEY", "")
    search_keyword = os.getenv("PLACES_SEARCH_KEYWORD", "").strip() or "restaurant"
    page_delay_seconds = _get_float_env("PLACES_PAGE_DELAY_SECONDS", 2.0)
    request_timeout = _get_float_env("PLACES_REQUEST_TIMEOUT", None)

    if not google_api_key:
        logger.warning("GOOGLE_API_KEY is not configured; Google Maps requests will fail.")

    return Settings(
        google_api_key=google_api_key,
        search_keyword=search_keyword,
        page_delay_seconds=page_delay_seconds,
        request_timeout=request_timeout,
    )
