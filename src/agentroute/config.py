"""Project settings: dataclasses, .agentroute.json loading and env overrides."""

from __future__ import annotations

import asyncio
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".agentroute.json"
DEFAULT_PORT = 41800


class SettingsLoadError(Exception):
    """Raised when the project settings file cannot be read or parsed."""


@dataclass
class RoutingConfig:
    primary_agent: str | None = None
    exclude_agents: list[str] = field(default_factory=list)


@dataclass
class AIConfig:
    default_model: str | None = None
    additional_model_prefixes: list[str] = field(default_factory=list)


@dataclass
class ServerConfig:
    port: int = DEFAULT_PORT


@dataclass
class Settings:
    routing: RoutingConfig = field(default_factory=RoutingConfig)
    ai: AIConfig = field(default_factory=AIConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


def get_project_root() -> Path:
    """AGENTROUTE_PROJECT_ROOT when it names a directory, else the working directory."""
    env_root = os.environ.get("AGENTROUTE_PROJECT_ROOT")
    if env_root:
        p = Path(env_root)
        if p.is_dir():
            return p
        logger.warning(f"AGENTROUTE_PROJECT_ROOT is not a directory: {env_root}, using cwd")
    return Path.cwd()


def get_settings_path(project_root: Path | None = None) -> Path:
    return (project_root or get_project_root()) / CONFIG_FILENAME


def parse_settings(data: dict[str, object]) -> Settings:
    """Build Settings from a decoded config dict, ignoring mistyped values."""
    settings = Settings()
    routing = data.get("routing", {})
    if isinstance(routing, dict):
        _apply_routing(settings.routing, routing)
    ai = data.get("ai", {})
    if isinstance(ai, dict):
        _apply_ai(settings.ai, ai)
    server = data.get("server", {})
    if isinstance(server, dict):
        _apply_server(settings.server, server)
    return settings


def _apply_routing(cfg: RoutingConfig, data: dict[str, object]) -> None:
    if "primary_agent" in data and isinstance(data["primary_agent"], str):
        cfg.primary_agent = data["primary_agent"] or None
    if "exclude_agents" in data and isinstance(data["exclude_agents"], list):
        cfg.exclude_agents = [a for a in data["exclude_agents"] if isinstance(a, str)]


def _apply_ai(cfg: AIConfig, data: dict[str, object]) -> None:
    if "default_model" in data and isinstance(data["default_model"], str):
        cfg.default_model = data["default_model"] or None
    if "additional_model_prefixes" in data and isinstance(
        data["additional_model_prefixes"], list
    ):
        cfg.additional_model_prefixes = [
            p for p in data["additional_model_prefixes"] if isinstance(p, str) and p
        ]


def _apply_server(cfg: ServerConfig, data: dict[str, object]) -> None:
    if "port" in data and isinstance(data["port"], int) and not isinstance(data["port"], bool):
        cfg.port = data["port"]


def _apply_env(settings: Settings) -> Settings:
    if primary := os.environ.get("AGENTROUTE_PRIMARY_AGENT"):
        settings.routing.primary_agent = primary
    if model := os.environ.get("AGENTROUTE_DEFAULT_MODEL"):
        settings.ai.default_model = model
    if port := os.environ.get("AGENTROUTE_PORT"):
        try:
            settings.server.port = int(port)
        except ValueError:
            logger.warning(f"Ignoring non-integer AGENTROUTE_PORT: {port}")
    return settings


def read_settings(path: Path) -> Settings:
    """Strict loader: a missing file yields defaults, a broken one raises."""
    if not path.exists():
        return _apply_env(Settings())
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text) if text.strip() else {}
    except (json.JSONDecodeError, OSError) as e:
        raise SettingsLoadError(f"Failed to load settings from {path}: {e}") from e
    if not isinstance(data, dict):
        raise SettingsLoadError(f"Settings root in {path} must be a JSON object")
    return _apply_env(parse_settings(data))


def load_settings(path: Path | None = None) -> Settings:
    """Lenient loader: falls back to defaults (plus env overrides) on any error."""
    if path is None:
        path = get_settings_path()
    try:
        return read_settings(path)
    except SettingsLoadError as e:
        logger.warning(str(e))
        return _apply_env(Settings())


class ProjectSettingsStore:
    """Async access to the project settings file for the model resolver service."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path if path is not None else get_settings_path()

    @property
    def path(self) -> Path:
        return self._path

    async def get_settings(self) -> Settings | None:
        return await asyncio.to_thread(read_settings, self._path)
