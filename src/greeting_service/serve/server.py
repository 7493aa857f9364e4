"""Launch the greeting service under uvicorn."""
from __future__ import annotations
import argparse
import logging
import os

import uvicorn

from greeting_service.common.config import load_config
from greeting_service.common.logging_setup import setup_logging

LOGGER = logging.getLogger("greeting.serve.server")

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")

def main() -> None:
    ap = argparse.ArgumentParser(description="Run the greeting HTTP service")
    ap.add_argument("--config", default=None, help="YAML config path")
    ap.add_argument("--host", default=None)
    ap.add_argument("--port", type=int, default=None)
    ap.add_argument("--log-level", default=None, type=str.lower, choices=LOG_LEVELS)
    args = ap.parse_args()

    cfg = load_config(args.config)
    host = args.host if args.host is not None else cfg.host
    port = args.port if args.port is not None else cfg.port
    log_level = (args.log_level or cfg.log_level).lower()
    if log_level not in LOG_LEVELS:
        ap.error(f"unsupported log level in config: {cfg.log_level}")

    # The app reloads config on startup; CLI choices reach it through the environment.
    if args.config:
        os.environ["GREETING_CONFIG"] = args.config
    os.environ["GREETING_HOST"] = host
    os.environ["GREETING_PORT"] = str(port)
    os.environ["GREETING_LOG_LEVEL"] = log_level

    setup_logging(log_level)
    LOGGER.info("Serving %s on %s:%s", cfg.service_name, host, port)
    uvicorn.run(
        "greeting_service.serve.fastapi_app:app",
        host=host,
        port=port,
        log_level=log_level,
    )

if __name__ == "__main__":
    main()
