#!/usr/bin/env python
"""
Run the Saarthi API server.

Defaults come from SAARTHI_HOST, SAARTHI_PORT, SAARTHI_RELOAD and
SAARTHI_LOG_LEVEL; flags override them for one run.

Usage:
    python run_api.py
    python run_api.py --reload --port 8000
"""

import argparse
import uvicorn

from shared.config import Settings, get_settings


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run Saarthi API server")
    parser.add_argument("--host", default=settings.host, help=f"Host to bind to (default {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port (default {settings.port})")
    parser.add_argument(
        "--reload",
        action=argparse.BooleanOptionalAction,
        default=settings.reload,
        help="Auto-reload on code changes",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level.lower(),
        choices=["critical", "error", "warning", "info", "debug"],
    )
    return parser


def main(argv=None):
    args = build_parser(get_settings()).parse_args(argv)
    uvicorn.run(
        "api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
