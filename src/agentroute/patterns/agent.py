"""Agent architect patterns: MCP servers, agent frameworks, LLM workflows."""

from __future__ import annotations

from agentroute.patterns.models import IntentPattern, intent

AGENT_INTENT_PATTERNS: tuple[IntentPattern, ...] = (
    intent(r"MCP\s*(서버|server|tool|도구)", 0.95, "MCP Server"),
    intent(r"model\s*context\s*protocol", 0.95, "Model Context Protocol"),
    intent(r"에이전트\s*(설계|개발|구현|아키텍처)", 0.95, "Korean: Agent Development"),
    intent(r"agent\s*(design|develop|architect|framework)", 0.95, "Agent Development"),
    intent(r"claude\s*(code|에이전트|agent|sdk)", 0.95, "Claude Agent"),
    intent(r"agent.?를?\s*만[들드]", 0.9, "Korean: Creating Agent (with English)"),
    intent(r"에이전트\s*만[들드]", 0.9, "Korean: Creating Agent (native)"),
    intent(r"\.json\s*(에이전트|agent)|agent.*\.json", 0.9, "Agent JSON Definition"),
    intent(r"specialist.*agent|agent.*specialist", 0.9, "Specialist Agent"),
    intent(r"primary.*agent|agent.*resolver|agent.*select", 0.9, "Agent Resolution"),
    intent(r"워크플로우\s*(자동화|설계|구현)", 0.9, "Korean: Workflow Automation"),
    intent(r"workflow\s*(automat|design|orchestrat)", 0.9, "Workflow Automation"),
    intent(r"LLM\s*(체인|chain|오케스트레이션|orchestrat)", 0.9, "LLM Orchestration"),
    intent(r"AI\s*에이전트\s*(설계|개발)|AI\s*agent\s*(design|develop)", 0.9, "AI Agent Design"),
    intent(r"자동화\s*(파이프라인|pipeline|시스템)", 0.85, "Automation Pipeline"),
    intent(r"tool\s*(use|calling|호출)|function\s*calling", 0.85, "Tool Calling"),
    intent(r"멀티\s*에이전트|multi.?agent", 0.85, "Multi-Agent"),
)
