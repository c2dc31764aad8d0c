"""Routing routes: resolve the agent for a prompt and the model for an agent."""

from __future__ import annotations

import json

from pydantic import ValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from agentroute.routing import RouteAgentRequest, RouteModelRequest, route_agent, route_model


async def resolve_agent(request: Request) -> JSONResponse:
    """POST /api/route/agent — resolve the primary agent for a prompt."""
    try:
        body = await request.json()
        req = RouteAgentRequest.model_validate(body)
    except ValidationError:
        return JSONResponse({"error": "Invalid request: 'prompt' is required"}, status_code=400)
    except ValueError:
        return JSONResponse({"error": "Request body must be UTF-8 JSON"}, status_code=400)

    response = route_agent(req, request.app.state.settings)
    return JSONResponse(response.model_dump(mode="json"))


async def resolve_model(request: Request) -> JSONResponse:
    """POST /api/route/model — resolve the model for an agent and/or mode."""
    try:
        raw = await request.body()
        body = json.loads(raw) if raw.strip() else {}
        req = RouteModelRequest.model_validate(body)
    except ValidationError as e:
        return JSONResponse(
            {"error": f"Invalid request: {e.error_count()} validation errors"}, status_code=400
        )
    except ValueError:
        return JSONResponse({"error": "Request body must be UTF-8 JSON"}, status_code=400)

    resolved = await route_model(req, request.app.state.model_service)
    return JSONResponse(resolved.model_dump(mode="json", exclude_none=True))


routes = [
    Route("/api/route/agent", resolve_agent, methods=["POST"]),
    Route("/api/route/model", resolve_model, methods=["POST"]),
]
