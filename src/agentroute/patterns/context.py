"""File path patterns.

Mobile project files come first so that a React Native project's
``metro.config.js`` is not claimed by the generic ``.js`` entry.
"""

from __future__ import annotations

from agentroute.patterns.models import ContextPattern, context

CONTEXT_PATTERNS: tuple[ContextPattern, ...] = (
    # mobile
    context(r"react-native\.config\.js$", "mobile-developer", 0.95),
    context(r"metro\.config\.js$", "mobile-developer", 0.95),
    context(r"app\.json$", "mobile-developer", 0.85),
    context(r"pubspec\.yaml$", "mobile-developer", 0.95),
    context(r"\.dart$", "mobile-developer", 0.9),
    context(r"Podfile$", "mobile-developer", 0.9),
    context(r"\.swift$", "mobile-developer", 0.9),
    context(r"build\.gradle(\.kts)?$", "mobile-developer", 0.85),
    context(r"AndroidManifest\.xml$", "mobile-developer", 0.9),
    context(r"\.kt$", "mobile-developer", 0.85),
    # data
    context(r"\.sql$", "data-engineer", 0.9),
    context(r"schema\.prisma$", "data-engineer", 0.95),
    context(r"migrations?/", "data-engineer", 0.9),
    context(r"\.entity\.ts$", "data-engineer", 0.85),
    # infrastructure as code
    context(r"\.tf$", "platform-engineer", 0.95),
    context(r"\.tfvars$", "platform-engineer", 0.95),
    context(r"terragrunt\.hcl$", "platform-engineer", 0.95),
    context(r"Chart\.yaml$", "platform-engineer", 0.95),
    context(r"values\.yaml$", "platform-engineer", 0.75),
    context(r"helm.*templates/|charts/.*templates/", "platform-engineer", 0.9),
    context(r"kustomization\.ya?ml$", "platform-engineer", 0.95),
    context(r"Pulumi\.ya?ml$", "platform-engineer", 0.95),
    context(r"argocd/|argo-cd/", "platform-engineer", 0.9),
    context(r"flux-system/", "platform-engineer", 0.9),
    # containers
    context(r"Dockerfile|docker-compose", "devops-engineer", 0.9),
    # backend
    context(r"\.go$", "backend-developer", 0.85),
    context(r"\.py$", "backend-developer", 0.85),
    context(r"\.java$", "backend-developer", 0.85),
    context(r"\.rs$", "backend-developer", 0.85),
    # frontend
    context(r"\.tsx?$", "frontend-developer", 0.7),
    context(r"\.jsx?$", "frontend-developer", 0.7),
    context(r"agents?.*\.json$", "agent-architect", 0.8),
)
