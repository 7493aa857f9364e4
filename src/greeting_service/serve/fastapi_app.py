"""FastAPI app for the greeting pipeline.

Endpoints:
- GET /health
- POST /api/greetings/complex  GreetingRequest JSON
- GET /api/greetings/simple/{name}
"""
from __future__ import annotations
import logging

from fastapi import FastAPI

from greeting_service.common.config import ServiceConfig, load_config
from greeting_service.common.logging_setup import setup_logging
from greeting_service.common.schema import GreetingRequest, GreetingResponse
from greeting_service.core.pipeline import VERSION, GreetingPipeline

LOGGER = logging.getLogger("greeting.serve.app")

CONFIG = ServiceConfig()
PIPELINE = GreetingPipeline()

app = FastAPI(title="greeting-service", version=VERSION)

@app.on_event("startup")
def _load_config_on_startup() -> None:
    """Load service config on startup and fall back to defaults if unreadable."""
    global CONFIG
    try:
        CONFIG = load_config()
    except (OSError, ValueError) as e:
        LOGGER.warning("Failed to load service config, using defaults: %s", e)
        CONFIG = ServiceConfig()
    setup_logging(CONFIG.log_level)
    LOGGER.info("Starting %s v%s", CONFIG.service_name, VERSION)

@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "service": CONFIG.service_name, "version": VERSION}

@app.post("/api/greetings/complex", response_model=GreetingResponse)
def complex_greeting(body: GreetingRequest) -> GreetingResponse:
    if body.configuration is None:
        LOGGER.debug("Request without configuration; using defaults")
    return PIPELINE.process(body)

@app.get("/api/greetings/simple/{name}", response_model=GreetingResponse)
def simple_greeting(name: str) -> GreetingResponse:
    return PIPELINE.simple(name)
