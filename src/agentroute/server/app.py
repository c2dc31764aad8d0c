"""Starlette app factory with lifespan for settings and registry loading."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from starlette.applications import Starlette

from agentroute.server.routes_routing import routes as routing_routes
from agentroute.server.routes_system import routes as system_routes


def create_app(project_root: Path | None = None) -> Starlette:
    """Create the HTTP API app for ``project_root`` (defaults to the detected root)."""

    @asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncGenerator[None, None]:
        from agentroute.config import get_project_root, get_settings_path, load_settings
        from agentroute.model.service import create_model_resolver_service
        from agentroute.registry.loader import AgentRegistry

        root = project_root or get_project_root()
        app.state.settings = load_settings(get_settings_path(root))
        app.state.registry = AgentRegistry.load_merged(root)
        app.state.model_service = create_model_resolver_service(root)
        yield

    return Starlette(routes=system_routes + routing_routes, lifespan=lifespan)
