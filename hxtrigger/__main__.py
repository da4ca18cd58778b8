"""Run the HX-Trigger sample under uvicorn.

Usage:
  python -m hxtrigger --host 0.0.0.0 --port 8000

Defaults come from HXTRIGGER_HOST, HXTRIGGER_PORT and LOG_LEVEL.
"""
from __future__ import annotations

import argparse
import logging

import uvicorn

from hxtrigger.config import VALID_LOG_LEVELS, Settings, configure_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    settings = Settings.from_environment()

    p = argparse.ArgumentParser(prog="hxtrigger")
    p.add_argument("--host", default=settings.host)
    p.add_argument("--port", type=int, default=settings.port)
    p.add_argument("--log-level", type=str.upper, choices=sorted(VALID_LOG_LEVELS), default=settings.log_level)
    args = p.parse_args(argv)

    configure_logging(args.log_level)
    logger.info(f"Starting HX-Trigger sample on {args.host}:{args.port}")
    uvicorn.run(
        "hxtrigger.api.main:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
