"""
Initialisation paresseuse de la table students.

Au premier appel : création de la table si absente, puis insertion du jeu
de données initial si (et seulement si) la table est vide. L'état « prêt »
appartient à l'instance, créée une seule fois au démarrage de l'API.
"""

import logging

from sqlalchemy import func, insert, select
from sqlalchemy.orm import Session

from app.constants import SEED_STUDENTS
from app.models.student import Student
from app.services.normalizer import to_storage_date

logger = logging.getLogger(__name__)


class SchemaBootstrapper:
    """Garantit que la table existe et qu'elle est peuplée avant toute opération."""

    def __init__(self) -> None:
        self.ready = False

    def ensure_ready(self, db: Session) -> None:
        """
        Idempotent. Une erreur de création, de comptage ou d'insertion est
        propagée telle quelle et laisse `ready` à False : l'appel suivant
        rejoue toute la séquence.
        """
        if self.ready:
            return

        table = Student.__table__
        try:
            table.create(bind=db.connection(), checkfirst=True)

            count = db.execute(select(func.count()).select_from(table)).scalar() or 0
            if count == 0:
                logger.info("Table students vide — insertion de %d élèves initiaux.", len(SEED_STUDENTS))
                db.execute(insert(table), [_seed_params(s) for s in SEED_STUDENTS])

            db.commit()
        except Exception as exc:
            db.rollback()
            logger.error("Échec de l'initialisation de la base : %s", exc)
            raise

        self.ready = True


def _seed_params(seed: dict) -> dict:
    params = dict(seed)
    params["enrollment_date"] = to_storage_date(params["enrollment_date"])
    return params
