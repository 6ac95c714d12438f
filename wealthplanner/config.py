from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Settings:
    env: str
    log_level: str
    host: str
    port: int
    cors_origins: Tuple[str, ...]

    @property
    def debug(self) -> bool:
        return self.env == "dev"


def _env_or_default(key: str, default: str) -> str:
    # treat empty env vars as "not set"
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def load_settings() -> Settings:
    """
    Loads settings from .env/environment variables.
    """
    load_dotenv()  # loads .env into env vars

    raw_origins = _env_or_default("CORS_ORIGINS", ",".join(DEFAULT_CORS_ORIGINS))
    cors_origins = tuple(origin.strip() for origin in raw_origins.split(",") if origin.strip())

    return Settings(
        env=_env_or_default("APP_ENV", "dev"),
        log_level=_env_or_default("LOG_LEVEL", "INFO"),
        host=_env_or_default("HOST", "0.0.0.0"),
        port=int(_env_or_default("PORT", "4000")),
        cors_origins=cors_origins,
    )
