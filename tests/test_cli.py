"""Tests for CLI entry point."""

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from agentroute.cli import main


def _run(argv: list[str], capsys: pytest.CaptureFixture[str]) -> dict | list:
    with patch("sys.argv", ["agentroute", *argv]):
        main()
    return json.loads(capsys.readouterr().out)


class TestRouteSubcommand:
    def test_route_with_keyword(self, project_root: Path, capsys: pytest.CaptureFixture[str]):
        data = _run(["route", "ACT React Native 컴포넌트 만들어줘"], capsys)
        assert data["mode"] == "ACT"
        assert data["result"]["agent"] == "mobile-developer"
        assert data["result"]["confidence"] == 0.95

    def test_route_with_files(self, project_root: Path, capsys: pytest.CaptureFixture[str]):
        data = _run(
            ["route", "코드 수정해줘", "--mode", "act", "--file", "db/schema.sql", "--file", "a.ts"],
            capsys,
        )
        assert data["result"]["agent"] == "data-engineer"
        assert data["result"]["source"] == "context"

    def test_route_with_recommendation(
        self, project_root: Path, capsys: pytest.CaptureFixture[str]
    ):
        data = _run(
            ["route", "계속 진행해줘", "--mode", "ACT", "--recommended", "backend-developer"],
            capsys,
        )
        assert data["result"]["source"] == "carryover"

    def test_route_uses_project_settings(
        self, configured_project: Path, capsys: pytest.CaptureFixture[str]
    ):
        data = _run(["route", "ACT 코드 수정해줘"], capsys)
        assert data["result"]["agent"] == "backend-developer"
        assert data["result"]["source"] == "project-default"

    def test_route_empty_prompt_exits(self, project_root: Path, capsys: pytest.CaptureFixture[str]):
        with patch("sys.argv", ["agentroute", "route", "   "]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 1
        assert "error" in capsys.readouterr().err.lower()

    def test_route_invalid_mode(self, project_root: Path):
        with patch("sys.argv", ["agentroute", "route", "x", "--mode", "deploy"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code != 0


class TestModelSubcommand:
    def test_model_for_mode_agent(self, project_root: Path, capsys: pytest.CaptureFixture[str]):
        data = _run(["model", "--mode-agent", "plan-mode"], capsys)
        assert data == {"model": "claude-opus-4-20250514", "source": "mode"}

    def test_model_for_mode_shorthand(
        self, project_root: Path, capsys: pytest.CaptureFixture[str]
    ):
        data = _run(["model", "--mode", "eval"], capsys)
        assert data == {"model": "claude-opus-4-20250514", "source": "mode"}

    def test_mode_agent_wins_over_mode(
        self, project_root: Path, capsys: pytest.CaptureFixture[str]
    ):
        data = _run(["model", "--mode", "act", "--mode-agent", "plan-mode"], capsys)
        assert data == {"model": "claude-opus-4-20250514", "source": "mode"}

    def test_model_system_default(self, project_root: Path, capsys: pytest.CaptureFixture[str]):
        data = _run(["model"], capsys)
        assert data["source"] == "system"

    def test_model_unknown_prints_warning(
        self, project_root: Path, capsys: pytest.CaptureFixture[str]
    ):
        (project_root / ".agentroute.json").write_text(
            json.dumps({"ai": {"default_model": "gpt-4o"}}), encoding="utf-8"
        )
        with patch("sys.argv", ["agentroute", "model"]):
            main()
        captured = capsys.readouterr()
        assert json.loads(captured.out)["model"] == "gpt-4o"
        assert "Unknown model ID" in captured.err


class TestAgentsSubcommand:
    def test_lists_all(self, project_root: Path, capsys: pytest.CaptureFixture[str]):
        data = _run(["agents"], capsys)
        assert any(a["name"] == "code-reviewer" for a in data)

    def test_filter_by_mode(self, project_root: Path, capsys: pytest.CaptureFixture[str]):
        data = _run(["agents", "--mode", "eval"], capsys)
        assert [a["name"] for a in data] == ["code-reviewer"]


class TestServeSubcommands:
    def test_serve_dispatches(self):
        with patch("sys.argv", ["agentroute", "serve"]):
            with patch("agentroute.cli.run_server") as mock_run:
                main()
        mock_run.assert_called_once()

    def test_mcp_dispatches(self):
        with patch("sys.argv", ["agentroute", "mcp"]):
            with patch("agentroute.cli.mcp_main") as mock_mcp:
                main()
        mock_mcp.assert_called_once()


class TestTopLevel:
    def test_version(self, capsys: pytest.CaptureFixture[str]):
        with patch("sys.argv", ["agentroute", "--version"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 0
        assert "agentroute" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]):
        with patch("sys.argv", ["agentroute"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 1
        assert "usage" in capsys.readouterr().out.lower()

    def test_verbose_enables_debug_logging(self, project_root: Path):
        with patch("sys.argv", ["agentroute", "--verbose", "agents"]):
            with patch("agentroute.cli.logging.basicConfig") as mock_config:
                main()
        mock_config.assert_called_once()
        assert mock_config.call_args.kwargs["level"] == logging.DEBUG
