"""
Point d'entrée principal de l'API de la console du registre des élèves.
Démarrage : uvicorn app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

import app.models  # noqa: F401 — enregistre les modèles dans Base.metadata
from app.routers import query, students
from app.services.bootstrap import SchemaBootstrapper
from app.services.student_service import StudentGateway

logger = logging.getLogger(__name__)


app = FastAPI(
    title="Student Roster API",
    description="Console d'administration du registre des élèves et assistant SQL Gemini",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# Un seul bootstrapper par processus : son état « prêt » est partagé par toutes les requêtes
app.state.bootstrapper = SchemaBootstrapper()
app.state.student_gateway = StudentGateway(app.state.bootstrapper)

# CORS — autorise tous les ports localhost en développement (à restreindre en production).
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


app.include_router(students.router)
app.include_router(query.router)


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Base injoignable ou initialisation impossible : l'interface propose de réessayer."""
    logger.error("Erreur base de données : %s", exc)
    return JSONResponse(
        status_code=503,
        content={"detail": "Connexion à la base de données impossible. Réessayez."},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
    passe bien par CORSMiddleware (qui injecte les headers CORS).
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "Student Roster API", "version": "0.1.0"}
