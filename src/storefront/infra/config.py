from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3333


@dataclass(frozen=True, slots=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    cors_allow_origins: tuple[str, ...] = ("*",)


def load_settings() -> Settings:
    """
    Read settings from the environment.

    Raises:
        RuntimeError: If PORT is set but is not an integer
    """
    raw_port = os.getenv("PORT")
    if raw_port:
        try:
            port = int(raw_port)
        except ValueError:
            raise RuntimeError(f"PORT environment variable must be an integer, got {raw_port!r}")
    else:
        port = DEFAULT_PORT

    origins = tuple(
        origin.strip()
        for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
        if origin.strip()
    )

    return Settings(
        host=os.getenv("HOST") or DEFAULT_HOST,
        port=port,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_allow_origins=origins or ("*",),
    )
