from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _csv(name: str, default: str) -> tuple[str, ...]:
    value = _env(name, default) or ""
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    backend_url: str
    request_timeout_seconds: float
    session_file: str
    revalidation_interval_seconds: float
    log_level: str
    cors_allow_origins: tuple[str, ...]


def get_settings() -> Settings:
    return Settings(
        backend_url=_env("GUESTNAMA_BACKEND_URL", ""),
        request_timeout_seconds=float(_env("GUESTNAMA_REQUEST_TIMEOUT_SECONDS", "15")),
        session_file=_env("GUESTNAMA_SESSION_FILE", ".guestnama/session.json"),
        revalidation_interval_seconds=float(_env("GUESTNAMA_REVALIDATION_INTERVAL_SECONDS", "300")),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        cors_allow_origins=_csv("CORS_ALLOW_ORIGINS", "*"),
    )
