"""Backend developer patterns: server frameworks, API styles, server concepts."""

from __future__ import annotations

from agentroute.patterns.models import IntentPattern, intent

BACKEND_INTENT_PATTERNS: tuple[IntentPattern, ...] = (
    intent(r"nestjs|nest\.js", 0.95, "NestJS"),
    intent(r"express\.js|express\s+서버|express\s+server", 0.95, "Express"),
    intent(r"fastify|koa\.js|hapi", 0.95, "Node.js Framework"),
    intent(r"django|flask|fastapi", 0.95, "Python Framework"),
    intent(r"spring\s*boot|spring\s*framework", 0.95, "Spring Boot"),
    intent(r"gin|echo|fiber", 0.9, "Go Framework"),
    intent(r"rails|ruby\s+on\s+rails", 0.95, "Ruby on Rails"),
    intent(r"REST\s*API|RESTful", 0.9, "REST API"),
    intent(r"GraphQL\s*(API|서버|server|스키마|schema)", 0.9, "GraphQL"),
    intent(r"gRPC|protobuf", 0.9, "gRPC"),
    intent(r"API\s*(설계|개발|구현|design|develop|implement)", 0.9, "API Development"),
    intent(r"서버\s*(개발|구현|로직)|server.?side\s*(logic|develop)", 0.85, "Server Development"),
    intent(
        r"백엔드\s*(개발|구현|로직)|backend\s*(develop|logic|implement)",
        0.85,
        "Backend Development",
    ),
    intent(r"미들웨어|middleware", 0.85, "Middleware"),
    intent(r"인증\s*서버|auth.*server|OAuth\s*서버", 0.85, "Auth Server"),
    intent(r"웹소켓|websocket|socket\.io", 0.85, "WebSocket"),
    intent(r"마이크로서비스|microservice", 0.85, "Microservice"),
)
