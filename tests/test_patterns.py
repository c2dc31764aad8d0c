"""Tests for the compiled routing tables."""

from __future__ import annotations

import re

import pytest

from agentroute.agents import ACT_PRIMARY_AGENTS
from agentroute.patterns import (
    CONTEXT_PATTERNS,
    EXPLICIT_PATTERNS,
    INTENT_CATEGORIES,
    META_DISCUSSION_PATTERNS,
)


def _category(name: str):
    return next(c for c in INTENT_CATEGORIES if c.name == name)


@pytest.mark.unit
def test_category_order():
    assert [c.name for c in INTENT_CATEGORIES] == [
        "agent",
        "tooling",
        "platform",
        "data",
        "ai-ml",
        "backend",
        "mobile",
    ]


@pytest.mark.unit
def test_every_category_routes_to_an_act_agent():
    for category in INTENT_CATEGORIES:
        assert category.agent in ACT_PRIMARY_AGENTS
        assert category.patterns


@pytest.mark.unit
def test_every_context_pattern_routes_to_an_act_agent():
    for entry in CONTEXT_PATTERNS:
        assert entry.agent in ACT_PRIMARY_AGENTS


@pytest.mark.unit
def test_confidences_in_range():
    for category in INTENT_CATEGORIES:
        for entry in category.patterns:
            assert 0.0 <= entry.confidence <= 1.0, entry.description
    for entry in CONTEXT_PATTERNS:
        assert 0.0 <= entry.confidence <= 1.0


@pytest.mark.unit
def test_patterns_are_precompiled():
    for category in INTENT_CATEGORIES:
        for entry in category.patterns:
            assert isinstance(entry.pattern, re.Pattern)
    assert all(isinstance(p, re.Pattern) for p in EXPLICIT_PATTERNS)
    assert all(isinstance(p, re.Pattern) for p in META_DISCUSSION_PATTERNS)


@pytest.mark.unit
def test_intent_patterns_ignore_case():
    tooling = _category("tooling")
    entry = tooling.first_match("ESLINT rules")
    assert entry is not None
    assert entry.description == "ESLint config"


@pytest.mark.unit
def test_first_match_returns_first_entry_in_table_order():
    tooling = _category("tooling")
    # "eslint" and "설정 변경" both match; eslint comes first
    entry = tooling.first_match("eslint 설정 변경해줘")
    assert entry is not None
    assert entry.description == "ESLint config"
    assert entry.confidence == 0.95


@pytest.mark.unit
def test_first_match_none():
    mobile = _category("mobile")
    assert mobile.first_match("버튼 색상 바꿔줘") is None


@pytest.mark.unit
def test_explicit_pattern_stops_at_korean_particle():
    match = EXPLICIT_PATTERNS[0].search("backend-developer로 작업해")
    assert match is not None
    assert match.group(1) == "backend-developer"


@pytest.mark.unit
def test_mobile_context_before_generic_js():
    agents = [e.agent for e in CONTEXT_PATTERNS if e.pattern.search("metro.config.js")]
    assert agents[0] == "mobile-developer"
