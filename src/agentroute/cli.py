"""CLI entry point for agentroute."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import cast

import anyio

from agentroute import __version__
from agentroute.agents import MODES
from agentroute.config import get_project_root, get_settings_path, load_settings
from agentroute.mcp_server.server import main as mcp_main
from agentroute.model.service import create_model_resolver_service
from agentroute.registry.loader import AgentRegistry
from agentroute.routing import RouteAgentRequest, RouteModelRequest, route_agent, route_model
from agentroute.server.runner import run_server


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _cmd_route(args: argparse.Namespace) -> None:
    prompt = cast(str, args.prompt)
    mode = cast(str | None, args.mode)
    if not prompt.strip():
        print("Error: prompt must not be empty", file=sys.stderr)
        sys.exit(1)

    req = RouteAgentRequest(
        prompt=prompt,
        file_paths=cast(list[str], args.files),
        recommended_agent=cast(str | None, args.recommended),
        mode=mode,
        project_type=cast(str | None, args.project_type),
    )
    settings = load_settings(get_settings_path(get_project_root()))
    _print_json(route_agent(req, settings).model_dump(mode="json"))


def _cmd_model(args: argparse.Namespace) -> None:
    req = RouteModelRequest(
        agent=cast(str | None, args.agent),
        mode_agent=cast(str | None, args.mode_agent),
        mode=cast(str | None, args.mode),
    )
    service = create_model_resolver_service()

    async def _resolve():
        return await route_model(req, service)

    resolved = anyio.run(_resolve)
    _print_json(resolved.model_dump(mode="json", exclude_none=True))
    if resolved.warning:
        print(f"Warning: {resolved.warning}", file=sys.stderr)


def _cmd_agents(args: argparse.Namespace) -> None:
    registry = AgentRegistry.load_merged(get_project_root())
    mode = cast(str | None, args.mode)
    agents = registry.filter_by_mode(mode) if mode else registry.all_agents()
    _print_json([a.model_dump(exclude_none=True) for a in agents])


def _cmd_serve(_args: argparse.Namespace) -> None:
    run_server()


def _cmd_mcp(_args: argparse.Namespace) -> None:
    mcp_main()


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="agentroute",
        description="Route prompts to primary agents and resolve their models",
    )
    _ = parser.add_argument(
        "-V", "--version", action="version", version=f"agentroute {__version__}"
    )
    _ = parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # route subcommand
    route_p = subparsers.add_parser("route", help="Resolve the primary agent for a prompt")
    _ = route_p.add_argument("prompt", help="Prompt text, optionally led by PLAN/ACT/EVAL")
    _ = route_p.add_argument(
        "--file",
        action="append",
        default=[],
        dest="files",
        metavar="PATH",
        help="File in the working context (repeatable)",
    )
    _ = route_p.add_argument(
        "--recommended", default=None, metavar="AGENT", help="Agent recommended by PLAN"
    )
    _ = route_p.add_argument(
        "--mode",
        type=str.upper,
        choices=MODES,
        default=None,
        help="Workflow mode (default: parsed from the prompt)",
    )
    _ = route_p.add_argument(
        "--project-type", default=None, dest="project_type", help="e.g. infrastructure"
    )

    # model subcommand
    model_p = subparsers.add_parser("model", help="Resolve the model for an agent")
    _ = model_p.add_argument("--agent", default=None, metavar="NAME", help="Agent profile name")
    _ = model_p.add_argument(
        "--mode-agent",
        default=None,
        dest="mode_agent",
        metavar="NAME",
        help="Mode agent (plan-mode, act-mode, eval-mode)",
    )
    _ = model_p.add_argument(
        "--mode",
        type=str.upper,
        choices=MODES,
        default=None,
        help="Mode shorthand for --mode-agent (PLAN, ACT, EVAL)",
    )

    # agents subcommand
    agents_p = subparsers.add_parser("agents", help="List agent profiles")
    _ = agents_p.add_argument(
        "--mode", type=str.upper, choices=MODES, default=None, help="Only agents of this mode"
    )

    _ = subparsers.add_parser("serve", help="Start the HTTP API server")
    _ = subparsers.add_parser("mcp", help="Start the MCP stdio server")

    args = parser.parse_args()
    if cast(bool, args.verbose):
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    dispatch = {
        "route": _cmd_route,
        "model": _cmd_model,
        "agents": _cmd_agents,
        "serve": _cmd_serve,
        "mcp": _cmd_mcp,
    }
    command = cast(str | None, args.command)
    handler = dispatch.get(command) if command is not None else None
    if handler:
        handler(args)
    else:
        parser.print_help()
        sys.exit(1)
