#!/usr/bin/env python3
"""
Serve the users API with uvicorn.

Usage:
  python scripts/run_server.py [--host 0.0.0.0] [--port 8080] [--reload]

Defaults come from HOST/PORT/LOG_LEVEL (see api.core.config).
"""
from __future__ import annotations

import argparse
import sys

import uvicorn

from api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Run the users CRUD API")
    ap.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    ap.add_argument("--port", type=int, default=settings.port, help=f"Port (default: {settings.port})")
    ap.add_argument("--reload", action="store_true", help="Reload on code changes (dev only)")
    args = ap.parse_args()

    if not 0 < args.port < 65536:
        raise SystemExit(f"Invalid port: {args.port}")

    uvicorn.run(
        "api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:  # pragma: no cover - CLI use
        sys.exit(0)
