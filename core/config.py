from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv


load_dotenv()


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, str(default))
    try:
        return float(raw)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Keep all config centralized here.
    """

    app_env: str = field(default_factory=lambda: os.getenv("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    # Empty string turns per-turn metrics off
    metrics_path: str = field(default_factory=lambda: os.getenv("METRICS_PATH", "results/metrics.jsonl"))
    base_url: str = field(default_factory=lambda: os.getenv("CHAT_BASE_URL", "http://127.0.0.1:8000"))
    timeout_s: float = field(default_factory=lambda: _float_env("CHAT_TIMEOUT_S", 60.0))

    @property
    def is_dev(self) -> bool:
        return self.app_env.lower() in {"dev", "development", "local"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
