"""Catalogue of primary agents per workflow mode."""

from __future__ import annotations

from dataclasses import dataclass

PLAN_PRIMARY_AGENTS: tuple[str, ...] = ("solution-architect", "technical-planner")

ACT_PRIMARY_AGENTS: tuple[str, ...] = (
    "tooling-engineer",
    "platform-engineer",
    "data-engineer",
    "ai-ml-engineer",
    "backend-developer",
    "mobile-developer",
    "frontend-developer",
    "devops-engineer",
    "agent-architect",
)

EVAL_PRIMARY_AGENT = "code-reviewer"

# Kept separate from ACT_PRIMARY_AGENTS so reordering the list never moves the fallback.
DEFAULT_ACT_AGENT = "frontend-developer"

ALL_PRIMARY_AGENTS: tuple[str, ...] = (
    *PLAN_PRIMARY_AGENTS,
    *ACT_PRIMARY_AGENTS,
    EVAL_PRIMARY_AGENT,
)

MODES: tuple[str, ...] = ("PLAN", "ACT", "EVAL")

MODE_AGENTS: dict[str, str] = {
    "PLAN": "plan-mode",
    "ACT": "act-mode",
    "EVAL": "eval-mode",
}


@dataclass(frozen=True)
class AgentDisplayInfo:
    name: str
    description: str


ACT_AGENT_DISPLAY_INFO: dict[str, AgentDisplayInfo] = {
    "tooling-engineer": AgentDisplayInfo(
        "Tooling Engineer", "Config, build tools, bundlers (webpack, vite, eslint)"
    ),
    "platform-engineer": AgentDisplayInfo(
        "Platform Engineer", "Terraform, Kubernetes, GitOps, cloud infrastructure"
    ),
    "data-engineer": AgentDisplayInfo(
        "Data Engineer", "Database, schema design, migrations, analytics"
    ),
    "ai-ml-engineer": AgentDisplayInfo(
        "AI/ML Engineer", "ML frameworks, LLM integration, embeddings, RAG"
    ),
    "backend-developer": AgentDisplayInfo(
        "Backend Developer", "Node.js, NestJS, Express, API development"
    ),
    "mobile-developer": AgentDisplayInfo("Mobile Developer", "React Native, Flutter, iOS, Android"),
    "frontend-developer": AgentDisplayInfo(
        "Frontend Developer", "React, Vue, Angular, Web UI development"
    ),
    "devops-engineer": AgentDisplayInfo(
        "DevOps Engineer", "CI/CD, Docker, Kubernetes, infrastructure"
    ),
    "agent-architect": AgentDisplayInfo(
        "Agent Architect", "AI agent systems, MCP servers, LLM integration"
    ),
}
