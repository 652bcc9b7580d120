"""
Schémas Pydantic pour l'assistant SQL (traduction et exécution de requêtes libres).
"""

from datetime import datetime
from typing import Any, Dict, List

from pydantic import BaseModel, field_validator


class TranslateRequest(BaseModel):
    question: str

    @field_validator("question")
    @classmethod
    def question_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("La question ne peut pas être vide.")
        return v.strip()


class TranslateResponse(BaseModel):
    question: str
    sql: str


class ExecuteRequest(BaseModel):
    sql: str

    @field_validator("sql")
    @classmethod
    def sql_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("La requête SQL ne peut pas être vide.")
        return v


class QueryResult(BaseModel):
    """Résultat d'une requête libre, avec métadonnées d'exécution."""
    query: str
    results: List[Dict[str, Any]]
    row_count: int
    timestamp: datetime
    execution_time_ms: float


class InsightsResponse(BaseModel):
    analysis: str
