from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    stripe_secret_key: str
    stripe_api_version: str
    log_level: str


def get_settings() -> Settings:
    return Settings(
        stripe_secret_key=_env("STRIPE_SECRET_KEY", ""),
        stripe_api_version=_env("STRIPE_API_VERSION", ""),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
