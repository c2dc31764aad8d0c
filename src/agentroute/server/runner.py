"""Uvicorn launcher for the HTTP API."""

from __future__ import annotations

import logging

from agentroute.config import Settings, load_settings

logger = logging.getLogger(__name__)


def run_server(settings: Settings | None = None, host: str = "127.0.0.1") -> None:
    """Start the HTTP API server with uvicorn."""
    import uvicorn

    if settings is None:
        settings = load_settings()

    logger.info(f"Starting agentroute API on {host}:{settings.server.port}")
    uvicorn.run(
        "agentroute.server.app:create_app",
        factory=True,
        host=host,
        port=settings.server.port,
    )
