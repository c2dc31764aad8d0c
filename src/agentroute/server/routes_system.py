"""System routes: health, version, agents."""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from agentroute import __version__ as VERSION


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


async def version(request: Request) -> JSONResponse:
    return JSONResponse({"version": VERSION})


async def list_agents(request: Request) -> JSONResponse:
    """GET /api/agents — list agent profiles, optionally filtered by ?mode=."""
    registry = request.app.state.registry
    mode = request.query_params.get("mode")
    agents = registry.filter_by_mode(mode.upper()) if mode else registry.all_agents()
    return JSONResponse(
        {
            "agents": [a.model_dump(exclude_none=True) for a in agents],
            "count": len(agents),
        }
    )


routes = [
    Route("/health", health),
    Route("/api/version", version),
    Route("/api/agents", list_agents),
]
