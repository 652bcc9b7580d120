"""
Erreurs métier du registre. Les routers les traduisent en HTTPException.
"""

from typing import Optional


class RosterError(Exception):
    """Base de toutes les erreurs métier."""


class StudentNotFoundError(RosterError):
    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(f"Élève {student_id} introuvable.")


class StudentFetchError(RosterError):
    """Échec de lecture de la liste des élèves (cause d'origine chaînée)."""

    def __init__(self, message: str = "Impossible de récupérer les élèves."):
        super().__init__(message)


class StudentWriteError(RosterError):
    """Échec d'une écriture (valeur hors limites, texte trop long…) ; `detail` conserve le message du driver."""

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        super().__init__("Échec de l'enregistrement de l'élève.")


class QueryRejectedError(RosterError):
    """Requête libre bloquée par la liste de mots interdits."""

    def __init__(self, message: str = "Les opérations DDL et destructrices sont interdites dans cette console."):
        super().__init__(message)


class QueryExecutionError(RosterError):
    """Échec d'exécution d'une requête libre ; `detail` conserve le message du driver."""

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        super().__init__("Échec de l'exécution de la requête.")


class TranslationError(RosterError):
    """Échec de la traduction langage naturel → SQL."""

    hint = "Vérifiez la clé API Gemini (GEMINI_API_KEY)."

    def __init__(self, message: str, missing_credentials: bool = False):
        self.missing_credentials = missing_credentials
        super().__init__(message)
