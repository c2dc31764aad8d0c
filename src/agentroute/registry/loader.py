"""AgentRegistry: load and query bundled and project-local agent profiles."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path

from pydantic import ValidationError

from agentroute.registry.models import AgentProfile

logger = logging.getLogger(__name__)

PROJECT_AGENTS_DIR = Path(".agentroute") / "agents"


class InvalidAgentProfileError(ValueError):
    """Raised when an agent profile file does not match the AgentProfile schema."""


def parse_agent_profile(path: Path) -> AgentProfile:
    """Parse one ``<name>.json`` profile. The file stem is the default name."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidAgentProfileError(f"Invalid agent profile {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise InvalidAgentProfileError(f"Invalid agent profile {path.name}: not an object")
    data.setdefault("name", path.stem)
    try:
        return AgentProfile.model_validate(data)
    except ValidationError as e:
        raise InvalidAgentProfileError(f"Invalid agent profile {path.name}: {e}") from e


def discover_project_agents(project_root: Path) -> list[AgentProfile]:
    """Profiles under ``.agentroute/agents/``; unreadable files are skipped."""
    agents_dir = project_root / PROJECT_AGENTS_DIR
    if not agents_dir.is_dir():
        return []

    profiles: list[AgentProfile] = []
    for json_file in sorted(agents_dir.glob("*.json")):
        try:
            profiles.append(parse_agent_profile(json_file))
        except (InvalidAgentProfileError, OSError) as e:
            logger.warning(f"Skipping agent profile {json_file}: {e}")
    return profiles


class AgentRegistry:
    """Agent profiles keyed by name, bundled first then project overrides."""

    def __init__(self, agents: list[AgentProfile]) -> None:
        self._agents = list(agents)
        self._by_name: dict[str, AgentProfile] = {a.name: a for a in self._agents}

    @classmethod
    def load(cls) -> AgentRegistry:
        """Load from bundled package data."""
        pkg = resources.files("agentroute.registry")
        data = json.loads(pkg.joinpath("agent-profiles.json").read_text(encoding="utf-8"))
        return cls._from_dict(data)

    @classmethod
    def load_merged(cls, project_root: Path | None = None) -> AgentRegistry:
        """Bundled registry with project profiles replacing or extending it."""
        bundled = cls.load()
        if project_root is None:
            return bundled

        project_agents = discover_project_agents(project_root)
        if not project_agents:
            return bundled

        merged = list(bundled._agents)
        index = {a.name: i for i, a in enumerate(merged)}
        for profile in project_agents:
            if profile.name in index:
                merged[index[profile.name]] = profile
            else:
                index[profile.name] = len(merged)
                merged.append(profile)
        return cls(merged)

    @classmethod
    def from_json(cls, path: Path) -> AgentRegistry:
        """Load from explicit file path (for testing)."""
        return cls._from_dict(json.loads(path.read_text(encoding="utf-8")))

    @classmethod
    def _from_dict(cls, data: dict) -> AgentRegistry:
        return cls([AgentProfile.model_validate(a) for a in data["agents"]])

    def get(self, name: str) -> AgentProfile | None:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return [a.name for a in self._agents]

    def all_agents(self) -> list[AgentProfile]:
        return list(self._agents)

    def filter_by_mode(self, mode: str) -> list[AgentProfile]:
        return [a for a in self._agents if a.mode == mode]
