"""Service configuration: defaults, optional YAML file, environment overrides."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

LOGGER = logging.getLogger("greeting.common.config")

DEFAULT_CONFIG_PATH = "configs/service.yaml"

_ENV_KEYS = {
    "service_name": "GREETING_SERVICE_NAME",
    "host": "GREETING_HOST",
    "port": "GREETING_PORT",
    "log_level": "GREETING_LOG_LEVEL",
}


@dataclass(frozen=True)
class ServiceConfig:
    """Runtime settings for the HTTP service."""
    service_name: str = "greeting-service"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"


def load_cfg(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data


def _coerce(cfg: ServiceConfig, values: dict[str, Any]) -> ServiceConfig:
    known = {f.name for f in fields(ServiceConfig)}
    updates: dict[str, Any] = {}
    for key, value in values.items():
        if key not in known:
            LOGGER.warning("Ignoring unknown config key: %s", key)
            continue
        updates[key] = int(value) if key == "port" else str(value)
    return replace(cfg, **updates)


def load_config(path: str | None = None) -> ServiceConfig:
    """
    Resolve the service configuration.

    Args:
        path: YAML config path. When omitted, GREETING_CONFIG or the default
            path is used, and a missing default file is not an error.

    Returns:
        Config with file values applied first, then environment overrides.
    """
    explicit = path is not None or "GREETING_CONFIG" in os.environ
    cfg_path = path or os.getenv("GREETING_CONFIG", DEFAULT_CONFIG_PATH)

    cfg = ServiceConfig()
    if Path(cfg_path).exists():
        cfg = _coerce(cfg, load_cfg(cfg_path))
    elif explicit:
        raise FileNotFoundError(f"Config file not found at {cfg_path}")

    env = {key: os.environ[var] for key, var in _ENV_KEYS.items() if var in os.environ}
    return _coerce(cfg, env)
