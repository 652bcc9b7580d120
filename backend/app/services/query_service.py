"""
Exécution de requêtes SQL libres (saisies à la main ou générées par Gemini).

Le filtre `is_safe` est une simple liste de mots interdits, volontairement
grossière : il bloque aussi un texte anodin contenant « truncate » et laisse
passer un DELETE sans WHERE ou plusieurs instructions enchaînées.
Ce n'est pas une frontière de sécurité.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import QueryExecutionError, QueryRejectedError
from app.services.bootstrap import SchemaBootstrapper
from app.services.normalizer import normalize_result_value

logger = logging.getLogger(__name__)

FORBIDDEN_TOKENS = ("drop", "alter", "truncate")


def is_safe(sql: str) -> bool:
    """Retourne False si le texte contient un mot interdit (recherche de sous-chaîne, sans casse)."""
    lowered = sql.lower()
    return not any(token in lowered for token in FORBIDDEN_TOKENS)


def execute_query(db: Session, sql: str, bootstrapper: SchemaBootstrapper) -> List[Dict[str, Any]]:
    """
    Exécute le texte tel quel, sans paramètres, et retourne les lignes sous forme
    de dictionnaires. Les valeurs date sont converties en texte ISO.
    Lève QueryRejectedError avant toute exécution si le filtre refuse la requête.
    """
    if not is_safe(sql):
        logger.warning("Requête libre refusée : %s", sql)
        raise QueryRejectedError()

    bootstrapper.ensure_ready(db)
    try:
        # no_parameters : le driver ne doit pas interpréter les % d'un LIKE
        result = db.connection().exec_driver_sql(sql, execution_options={"no_parameters": True})
        rows = result.mappings().all() if result.returns_rows else []
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        detail = str(getattr(exc, "orig", None) or exc)
        logger.error("Erreur d'exécution de la requête libre : %s", detail)
        raise QueryExecutionError(detail) from exc

    return [{key: normalize_result_value(value) for key, value in row.items()} for row in rows]
