"""Tests for config.py: settings loading with env var overrides."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from agentroute.config import (
    CONFIG_FILENAME,
    DEFAULT_PORT,
    ProjectSettingsStore,
    Settings,
    SettingsLoadError,
    get_project_root,
    get_settings_path,
    load_settings,
    parse_settings,
    read_settings,
)


class TestDefaults:
    def test_settings_defaults(self):
        settings = Settings()
        assert settings.routing.primary_agent is None
        assert settings.routing.exclude_agents == []
        assert settings.ai.default_model is None
        assert settings.ai.additional_model_prefixes == []
        assert settings.server.port == DEFAULT_PORT

    def test_is_dataclass(self):
        import dataclasses

        assert dataclasses.is_dataclass(Settings)


class TestParseSettings:
    def test_full_document(self):
        settings = parse_settings(
            {
                "routing": {
                    "primary_agent": "backend-developer",
                    "exclude_agents": ["mobile-developer"],
                },
                "ai": {
                    "default_model": "claude-opus-4-20250514",
                    "additional_model_prefixes": ["gpt-4"],
                },
                "server": {"port": 9000},
            }
        )
        assert settings.routing.primary_agent == "backend-developer"
        assert settings.routing.exclude_agents == ["mobile-developer"]
        assert settings.ai.default_model == "claude-opus-4-20250514"
        assert settings.ai.additional_model_prefixes == ["gpt-4"]
        assert settings.server.port == 9000

    def test_mistyped_values_ignored(self):
        settings = parse_settings(
            {
                "routing": {"primary_agent": 42, "exclude_agents": "mobile-developer"},
                "ai": "nope",
                "server": {"port": True},
            }
        )
        assert settings.routing.primary_agent is None
        assert settings.routing.exclude_agents == []
        assert settings.ai.default_model is None
        assert settings.server.port == DEFAULT_PORT

    def test_empty_strings_mean_unset(self):
        settings = parse_settings({"routing": {"primary_agent": ""}, "ai": {"default_model": ""}})
        assert settings.routing.primary_agent is None
        assert settings.ai.default_model is None


class TestReadSettings:
    def test_missing_file_returns_defaults(self, tmp_path: Path):
        settings = read_settings(tmp_path / "missing.json")
        assert settings == Settings()

    def test_empty_file_returns_defaults(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text("", encoding="utf-8")
        assert read_settings(path) == Settings()

    def test_invalid_json_raises(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text("{broken", encoding="utf-8")
        with pytest.raises(SettingsLoadError):
            read_settings(path)

    def test_non_object_root_raises(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(SettingsLoadError):
            read_settings(path)


class TestLoadSettings:
    def test_invalid_json_falls_back(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text("{broken", encoding="utf-8")
        assert load_settings(path) == Settings()

    def test_reads_file(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text(json.dumps({"server": {"port": 5000}}), encoding="utf-8")
        assert load_settings(path).server.port == 5000

    def test_default_path_uses_project_root(self, configured_project: Path):
        assert load_settings().routing.primary_agent == "backend-developer"


class TestEnvOverrides:
    def test_primary_agent_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("AGENTROUTE_PRIMARY_AGENT", "data-engineer")
        path = tmp_path / CONFIG_FILENAME
        path.write_text(json.dumps({"routing": {"primary_agent": "backend-developer"}}))
        assert read_settings(path).routing.primary_agent == "data-engineer"

    def test_default_model_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("AGENTROUTE_DEFAULT_MODEL", "claude-opus-4-20250514")
        assert read_settings(tmp_path / "missing.json").ai.default_model == "claude-opus-4-20250514"

    def test_port_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("AGENTROUTE_PORT", "8123")
        assert read_settings(tmp_path / "missing.json").server.port == 8123

    def test_invalid_port_ignored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("AGENTROUTE_PORT", "abc")
        assert read_settings(tmp_path / "missing.json").server.port == DEFAULT_PORT

    def test_env_applies_after_load_failure(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("AGENTROUTE_PORT", "8123")
        path = tmp_path / CONFIG_FILENAME
        path.write_text("{broken", encoding="utf-8")
        assert load_settings(path).server.port == 8123


class TestProjectRoot:
    def test_env_root(self, project_root: Path):
        assert get_project_root() == project_root
        assert get_settings_path() == project_root / CONFIG_FILENAME

    def test_missing_env_dir_falls_back_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("AGENTROUTE_PROJECT_ROOT", str(tmp_path / "nope"))
        monkeypatch.chdir(tmp_path)
        assert get_project_root() == Path.cwd()


class TestProjectSettingsStore:
    @pytest.mark.asyncio
    async def test_get_settings(self, configured_project: Path):
        store = ProjectSettingsStore()
        assert store.path == configured_project / CONFIG_FILENAME
        settings = await store.get_settings()
        assert settings is not None
        assert settings.server.port == 41900

    @pytest.mark.asyncio
    async def test_get_settings_raises_on_broken_file(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text("{broken", encoding="utf-8")
        with pytest.raises(SettingsLoadError):
            await ProjectSettingsStore(path).get_settings()
