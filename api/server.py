#!/usr/bin/env python3
"""
Run the Consultancy Intake API with uvicorn.

Usage:
    consultancy-intake
    consultancy-intake --port 8080 --log-level debug
    consultancy-intake --reload

Defaults come from the environment (see api.config); flags override them.
uvicorn handles SIGINT/SIGTERM and shuts down gracefully.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import uvicorn

from api.config import load_settings

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Run the Consultancy Intake API")
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port (default: {settings.port})")
    parser.add_argument(
        "--log-level",
        default=settings.log_level.lower(),
        choices=["critical", "error", "warning", "info", "debug"],
        help="uvicorn log level",
    )
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")
    args = parser.parse_args(argv)

    logger.info("Starting server on http://%s:%s (API under /api)", args.host, args.port)
    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level,
        reload=args.reload,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
