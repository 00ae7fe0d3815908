"""
Runtime settings for the intake API.

Values are read from environment variables. A ``.env`` file in the project
root is loaded first if present; variables already set in the environment
take precedence over it.

Environment variables (all optional):
- HOST, PORT: bind address for the bundled server (default 0.0.0.0:3000)
- LOG_LEVEL: root log level name (default INFO)
- LOG_FILE: also write logs to this file
- SPA_DIST_DIR: directory holding the built frontend (index.html + assets)
- CORS_ORIGINS: comma-separated allowed origins (default *)
- SERVICE_NAME: name reported by the health endpoint
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / ".env"


@dataclass(frozen=True, slots=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    log_file: Optional[str] = None
    spa_dist_dir: Optional[Path] = None
    cors_origins: Tuple[str, ...] = ("*",)
    service_name: str = "consultancy-intake-api"


def _split_origins(raw: str) -> Tuple[str, ...]:
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or ("*",)


def load_settings() -> Settings:
    """Build Settings from the environment (after loading ``.env``)."""

    load_dotenv(dotenv_path=env_path)

    port_raw = os.getenv("PORT", "3000")
    try:
        port = int(port_raw)
    except ValueError:
        raise RuntimeError(f"PORT must be an integer, got {port_raw!r}") from None

    spa_dir = os.getenv("SPA_DIST_DIR")

    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=os.getenv("LOG_FILE") or None,
        spa_dist_dir=Path(spa_dir) if spa_dir else None,
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
        service_name=os.getenv("SERVICE_NAME", "consultancy-intake-api"),
    )
