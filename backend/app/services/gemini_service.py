"""
Client Gemini (API REST generativelanguage) :
- traduction d'une question en langage naturel vers une requête SQL ;
- analyse rapide du registre pour le tableau de bord.
"""

import json
import logging
from typing import List

import httpx

from app.config import settings
from app.exceptions import TranslationError
from app.schemas.student import StudentResponse

logger = logging.getLogger(__name__)

ANALYSIS_SAMPLE_SIZE = 20
ANALYSIS_FALLBACK = "Impossible de générer une analyse pour le moment."

SCHEMA_DESCRIPTION = """The table name is 'students'.
The schema is:
- id (integer)
- first_name (varchar)
- last_name (varchar)
- email (varchar)
- major (varchar)
- gpa (float)
- status (varchar: 'Active', 'Probation', 'Graduated', 'Dropped')
- enrollment_date (date)"""


def build_sql_prompt(question: str) -> str:
    return (
        "You are a PostgreSQL expert. Convert the following natural language question "
        "into a standard SQL query.\n"
        f"{SCHEMA_DESCRIPTION}\n\n"
        f'Question: "{question}"\n\n'
        "Return ONLY the raw SQL string. Do not use Markdown formatting (no ```sql)."
    )


def strip_code_fences(text: str) -> str:
    """Retire les balises ```sql et ``` que le modèle ajoute parfois malgré la consigne."""
    return text.replace("```sql", "").replace("```", "").strip()


def _generate_content(prompt: str) -> str:
    """Un appel generateContent, une seule question, pas d'historique."""
    if not settings.GEMINI_API_KEY:
        raise TranslationError("Clé API Gemini introuvable.", missing_credentials=True)

    url = f"{settings.GEMINI_BASE_URL}/models/{settings.GEMINI_MODEL}:generateContent"
    response = httpx.post(
        url,
        headers={"x-goog-api-key": settings.GEMINI_API_KEY},
        json={"contents": [{"parts": [{"text": prompt}]}]},
        timeout=settings.GEMINI_TIMEOUT_SECONDS,
    )
    response.raise_for_status()

    payload = response.json()
    if not isinstance(payload, dict):
        raise TranslationError("Réponse Gemini inattendue.")
    candidates = payload.get("candidates") or []
    if not candidates:
        raise TranslationError("Réponse Gemini vide.")

    # Réponse bloquée (finishReason SAFETY…) : candidat sans contenu
    parts = (candidates[0].get("content") or {}).get("parts") or []
    text = "".join(part.get("text", "") for part in parts)
    if not text.strip():
        raise TranslationError("Réponse Gemini vide.")
    return text


def translate_question(question: str) -> str:
    """
    Retourne le SQL proposé par le modèle, sans balises Markdown.
    Le texte n'est ni validé ni filtré : il doit passer par execute_query.
    """
    try:
        raw = _generate_content(build_sql_prompt(question))
    except TranslationError as exc:
        logger.error("Erreur lors de la génération SQL : %s", exc)
        raise
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("Erreur lors de la génération SQL : %s", exc)
        raise TranslationError("Impossible de générer le SQL à partir de la question.") from exc

    sql = strip_code_fences(raw)
    if not sql:
        logger.error("Erreur lors de la génération SQL : réponse sans requête")
        raise TranslationError("Impossible de générer le SQL à partir de la question.")
    logger.info("SQL généré pour « %s » : %s", question, sql)
    return sql


def analyze_students(students: List[StudentResponse]) -> str:
    """
    Demande trois tendances clés (moyennes, filières, statuts à risque) en liste Markdown.
    En cas d'échec, retourne un message par défaut plutôt qu'une erreur.
    """
    sample = [s.model_dump() for s in students[:ANALYSIS_SAMPLE_SIZE]]
    prompt = (
        "Analyze the following student data and provide 3 key insights or trends "
        "in a concise markdown list format.\n"
        "Focus on GPA trends, Major distribution, or Status risks.\n\n"
        f"Data: {json.dumps(sample)}"
    )
    try:
        return _generate_content(prompt)
    except (TranslationError, httpx.HTTPError, ValueError) as exc:
        logger.error("Erreur lors de l'analyse des élèves : %s", exc)
        return ANALYSIS_FALLBACK
