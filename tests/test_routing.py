"""Tests for the request models shared by the CLI, HTTP and MCP surfaces."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from agentroute.config import RoutingConfig, Settings
from agentroute.routing import RouteAgentRequest, RouteModelRequest, route_agent


@pytest.mark.unit
def test_route_agent_parses_keyword():
    response = route_agent(RouteAgentRequest(prompt="ACT terraform 모듈 작성해줘"))
    assert response.mode == "ACT"
    assert response.prompt == "terraform 모듈 작성해줘"
    assert response.result.agent == "platform-engineer"


@pytest.mark.unit
def test_route_agent_explicit_mode_keeps_prompt():
    response = route_agent(RouteAgentRequest(prompt="eslint 설정 변경해줘", mode="act"))
    assert response.mode == "ACT"
    assert response.prompt == "eslint 설정 변경해줘"
    assert response.warnings == []


@pytest.mark.unit
def test_route_agent_applies_settings():
    settings = Settings(routing=RoutingConfig(exclude_agents=["platform-engineer"]))
    response = route_agent(RouteAgentRequest(prompt="ACT terraform 모듈 작성해줘"), settings)
    assert response.result.agent == "frontend-developer"


@pytest.mark.unit
def test_route_agent_request_requires_prompt():
    with pytest.raises(ValidationError):
        RouteAgentRequest.model_validate({})


@pytest.mark.unit
@pytest.mark.parametrize(
    ("request_data", "expected"),
    [
        ({}, None),
        ({"mode": "plan"}, "plan-mode"),
        ({"mode": "act", "mode_agent": "custom-mode"}, "custom-mode"),
        ({"mode": "deploy"}, None),
    ],
)
def test_resolved_mode_agent(request_data: dict, expected: str | None):
    assert RouteModelRequest.model_validate(request_data).resolved_mode_agent() == expected
