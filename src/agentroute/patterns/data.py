"""Data engineer patterns: databases, schemas, migrations, query tuning."""

from __future__ import annotations

from agentroute.patterns.models import IntentPattern, intent

DATA_INTENT_PATTERNS: tuple[IntentPattern, ...] = (
    intent(r"schema\.prisma", 0.95, "Prisma schema"),
    intent(r"migration", 0.9, "Database migration"),
    intent(r"\.sql$", 0.9, "SQL file"),
    intent(r"database|데이터베이스|DB\s*(설계|스키마|마이그레이션)", 0.9, "Database design"),
    intent(r"스키마|schema\s*design", 0.9, "Schema design"),
    intent(r"ERD|entity.?relationship", 0.9, "ERD design"),
    intent(r"쿼리\s*최적화|query\s*optim", 0.85, "Query optimization"),
    intent(r"인덱스|index(ing)?", 0.85, "Indexing"),
    intent(r"정규화|normaliz", 0.85, "Normalization"),
)
