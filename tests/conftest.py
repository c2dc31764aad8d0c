"""Shared fixtures for agentroute tests."""

import json
from pathlib import Path

import pytest

_ENV_VARS = (
    "AGENTROUTE_PRIMARY_AGENT",
    "AGENTROUTE_DEFAULT_MODEL",
    "AGENTROUTE_PORT",
    "AGENTROUTE_PROJECT_ROOT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer shell overrides out of every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def _write_json(path: Path, data: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty project directory selected through AGENTROUTE_PROJECT_ROOT."""
    monkeypatch.setenv("AGENTROUTE_PROJECT_ROOT", str(tmp_path))
    return tmp_path


@pytest.fixture
def configured_project(project_root: Path) -> Path:
    """Project with a settings file and one project-local agent override."""
    _write_json(
        project_root / ".agentroute.json",
        {
            "routing": {"primary_agent": "backend-developer", "exclude_agents": []},
            "ai": {
                "default_model": "claude-sonnet-4-20250514",
                "additional_model_prefixes": ["gpt-4"],
            },
            "server": {"port": 41900},
        },
    )
    _write_json(
        project_root / ".agentroute" / "agents" / "backend-developer.json",
        {
            "display_name": "Backend Developer (project)",
            "mode": "ACT",
            "model": {"preferred": "claude-opus-4-20250514", "reason": "Large codebase"},
        },
    )
    return project_root


@pytest.fixture
def write_json():
    return _write_json
