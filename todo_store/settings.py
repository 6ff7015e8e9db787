from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class AppSettings:
    host: str
    port: int
    log_level: str
    api_title: str


@lru_cache
def get_settings() -> AppSettings:
    host = os.getenv("TODO_HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    log_level = os.getenv("TODO_LOG_LEVEL", "INFO").upper()
    api_title = os.getenv("TODO_API_TITLE", "Todo API")

    return AppSettings(
        host=host,
        port=port,
        log_level=log_level,
        api_title=api_title,
    )
