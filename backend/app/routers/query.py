"""
Router de l'assistant SQL.
Traduction question → SQL (POST /api/v1/query/translate)
Exécution d'une requête libre (POST /api/v1/query/execute)
Analyse du registre par Gemini (POST /api/v1/query/insights)
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_bootstrapper, get_student_gateway
from app.exceptions import QueryExecutionError, QueryRejectedError, StudentFetchError, TranslationError
from app.schemas.query import (
    ExecuteRequest,
    InsightsResponse,
    QueryResult,
    TranslateRequest,
    TranslateResponse,
)
from app.services import gemini_service, query_service
from app.services.bootstrap import SchemaBootstrapper
from app.services.student_service import StudentGateway

router = APIRouter(prefix="/api/v1/query", tags=["Assistant SQL"])


@router.post("/translate", response_model=TranslateResponse, summary="Traduire une question en SQL")
def translate(data: TranslateRequest):
    """Le SQL retourné n'est pas exécuté ni vérifié : il faut l'envoyer à /execute."""
    try:
        sql = gemini_service.translate_question(data.question)
    except TranslationError as e:
        status_code = 503 if e.missing_credentials else 502
        raise HTTPException(status_code=status_code, detail=f"{e} {e.hint}")
    return TranslateResponse(question=data.question, sql=sql)


@router.post("/execute", response_model=QueryResult, summary="Exécuter une requête SQL libre")
def execute(
    data: ExecuteRequest,
    db: Session = Depends(get_db),
    bootstrapper: SchemaBootstrapper = Depends(get_bootstrapper),
):
    """Les requêtes contenant drop, alter ou truncate sont refusées (403)."""
    started = time.perf_counter()
    try:
        rows = query_service.execute_query(db, data.sql, bootstrapper)
    except QueryRejectedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except QueryExecutionError as e:
        raise HTTPException(status_code=400, detail={"message": str(e), "detail": e.detail})
    elapsed_ms = (time.perf_counter() - started) * 1000

    return QueryResult(
        query=data.sql,
        results=rows,
        row_count=len(rows),
        timestamp=datetime.now(timezone.utc),
        execution_time_ms=round(elapsed_ms, 2),
    )


@router.post("/insights", response_model=InsightsResponse, summary="Analyse du registre par Gemini")
def insights(db: Session = Depends(get_db), gateway: StudentGateway = Depends(get_student_gateway)):
    try:
        students = gateway.fetch_all(db)
    except StudentFetchError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return InsightsResponse(analysis=gemini_service.analyze_students(students))
