"""MCP stdio server exposing mode parsing, agent routing and model resolution."""

from __future__ import annotations

import json

import anyio
import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from agentroute import __version__
from agentroute.config import get_project_root, get_settings_path, load_settings
from agentroute.keywords import parse_mode
from agentroute.model.service import ModelResolverService, create_model_resolver_service
from agentroute.routing import RouteAgentRequest, RouteModelRequest, route_agent, route_model

PARSE_MODE_SCHEMA = {
    "type": "object",
    "properties": {
        "prompt": {"type": "string", "description": "User prompt, optionally led by PLAN/ACT/EVAL"},
    },
    "required": ["prompt"],
}

RESOLVE_AGENT_SCHEMA = {
    "type": "object",
    "properties": {
        "prompt": {"type": "string", "description": "User prompt"},
        "file_paths": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Files in the working context",
        },
        "recommended_agent": {
            "type": "string",
            "description": "Agent recommended by the previous PLAN step",
        },
        "mode": {
            "type": "string",
            "enum": ["PLAN", "ACT", "EVAL"],
            "description": "Workflow mode. Omit to parse it from the prompt.",
        },
        "project_type": {"type": "string", "description": "e.g. infrastructure"},
    },
    "required": ["prompt"],
}

RESOLVE_MODEL_SCHEMA = {
    "type": "object",
    "properties": {
        "agent": {"type": "string", "description": "Agent profile name"},
        "mode_agent": {"type": "string", "description": "plan-mode, act-mode or eval-mode"},
        "mode": {"type": "string", "enum": ["PLAN", "ACT", "EVAL"]},
    },
}


def create_mcp_server(model_service: ModelResolverService | None = None) -> Server:
    """Create and configure the MCP server with 3 tool handlers."""
    server = Server("agentroute", __version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name="parse_mode",
                description=(
                    "Split the leading PLAN/ACT/EVAL keyword (or a localized form) off a prompt."
                ),
                inputSchema=PARSE_MODE_SCHEMA,
            ),
            types.Tool(
                name="resolve_agent",
                description=(
                    "Pick the primary agent for a prompt. "
                    "Returns agent, confidence, source and reason."
                ),
                inputSchema=RESOLVE_AGENT_SCHEMA,
            ),
            types.Tool(
                name="resolve_model",
                description="Resolve the model for an agent: agent > mode > global > system.",
                inputSchema=RESOLVE_MODEL_SCHEMA,
            ),
        ]

    @server.call_tool()
    async def call_tool(
        name: str,
        arguments: dict | None,
    ) -> list[types.TextContent]:
        args = arguments or {}
        try:
            if name == "parse_mode":
                result = parse_mode(str(args.get("prompt", ""))).model_dump()
            elif name == "resolve_agent":
                req = RouteAgentRequest.model_validate(args)
                settings = load_settings(get_settings_path(get_project_root()))
                result = route_agent(req, settings).model_dump(mode="json")
            elif name == "resolve_model":
                req_model = RouteModelRequest.model_validate(args)
                service = model_service or create_model_resolver_service()
                resolved = await route_model(req_model, service)
                result = resolved.model_dump(mode="json", exclude_none=True)
            else:
                return [types.TextContent(type="text", text=f"Unknown tool: {name}")]
        except ValidationError as e:
            return [types.TextContent(type="text", text=f"Invalid arguments for {name}: {e}")]

        text = json.dumps(result, indent=2, ensure_ascii=False)
        return [types.TextContent(type="text", text=text)]

    return server


async def run_mcp_server() -> None:
    """Run the MCP server with stdio transport."""
    server = create_mcp_server()
    async with stdio_server() as (read_stream, write_stream):
        init_options = server.create_initialization_options(
            notification_options=NotificationOptions(),
        )
        await server.run(read_stream, write_stream, init_options)


def main() -> None:
    anyio.run(run_mcp_server)
