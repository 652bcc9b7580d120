"""
Accès aux élèves : lecture complète, création, mise à jour partielle et suppression.
Chaque opération passe d'abord par le SchemaBootstrapper, puis construit une
requête paramétrée sur la table students.
"""

import logging
from typing import Any, List, NoReturn, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import StudentFetchError, StudentNotFoundError, StudentWriteError
from app.models.student import Student
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.services.bootstrap import SchemaBootstrapper
from app.services.normalizer import normalize_student_row, to_storage_date

logger = logging.getLogger(__name__)

students_table = Student.__table__

# Ordre fixe des colonnes de l'INSERT (l'id est attribué par la base)
INSERT_COLUMNS = ("first_name", "last_name", "email", "major", "gpa", "status", "enrollment_date")


class StudentGateway:
    def __init__(self, bootstrapper: SchemaBootstrapper) -> None:
        self.bootstrapper = bootstrapper

    def fetch_all(self, db: Session) -> List[StudentResponse]:
        """Retourne tous les élèves triés par id croissant."""
        self.bootstrapper.ensure_ready(db)
        try:
            rows = db.execute(
                select(students_table).order_by(students_table.c.id.asc())
            ).mappings().all()
        except SQLAlchemyError as exc:
            logger.error("Erreur lors de la lecture des élèves : %s", exc)
            raise StudentFetchError() from exc
        return [_to_response(row) for row in rows]

    def insert(self, db: Session, data: StudentCreate) -> StudentResponse:
        """Crée un élève et retourne la ligne insérée, id compris."""
        self.bootstrapper.ensure_ready(db)
        fields = data.model_dump()
        values = _storage_values({column: fields[column] for column in INSERT_COLUMNS})

        try:
            row = db.execute(
                insert(students_table).values(**values).returning(*students_table.c)
            ).mappings().one()
            db.commit()
        except SQLAlchemyError as exc:
            _raise_write_error(db, exc, "création")

        logger.info("Élève %s créé (%s %s).", row["id"], row["first_name"], row["last_name"])
        return _to_response(row)

    def update_by_id(self, db: Session, student_id: int, data: StudentUpdate) -> StudentResponse:
        """
        Met à jour uniquement les champs fournis, dans l'ordre du patch.
        Un patch vide n'émet aucun UPDATE : la ligne courante est relue.
        Lève StudentNotFoundError si aucun élève ne porte cet id.
        """
        self.bootstrapper.ensure_ready(db)
        fields = data.model_dump(exclude_unset=True)
        fields.pop("id", None)

        if not fields:
            row = _get_row(db, student_id)
            if row is None:
                raise StudentNotFoundError(student_id)
            return _to_response(row)

        values = _storage_values(fields)
        try:
            row = db.execute(
                update(students_table)
                .where(students_table.c.id == student_id)
                .ordered_values(*[(students_table.c[key], value) for key, value in values.items()])
                .returning(*students_table.c)
            ).mappings().first()
            if row is not None:
                db.commit()
        except SQLAlchemyError as exc:
            _raise_write_error(db, exc, "mise à jour")

        if row is None:
            db.rollback()
            raise StudentNotFoundError(student_id)
        return _to_response(row)

    def delete_by_id(self, db: Session, raw_id: Any) -> Optional[int]:
        """
        Supprime un élève et retourne l'id confirmé par la base.
        Retourne None si l'id est invalide (rien n'est envoyé à la base)
        ou s'il n'existe pas : ce n'est pas une erreur.
        """
        self.bootstrapper.ensure_ready(db)
        student_id = coerce_student_id(raw_id)
        if student_id is None:
            logger.warning("Suppression ignorée : identifiant invalide %r.", raw_id)
            return None

        try:
            deleted_id = db.execute(
                delete(students_table)
                .where(students_table.c.id == student_id)
                .returning(students_table.c.id)
            ).scalar()
            db.commit()
        except SQLAlchemyError as exc:
            _raise_write_error(db, exc, "suppression")

        if deleted_id is None:
            logger.info("Suppression : aucun élève avec l'id %s.", student_id)
        return deleted_id


def coerce_student_id(raw_id: Any) -> Optional[int]:
    """Convertit un identifiant en entier strictement positif, ou None."""
    if raw_id is None or isinstance(raw_id, bool):
        return None
    if isinstance(raw_id, float):
        if not raw_id.is_integer():
            return None
        raw_id = int(raw_id)
    try:
        student_id = int(str(raw_id).strip())
    except ValueError:
        return None
    return student_id if student_id > 0 else None


def filter_students(students: List[StudentResponse], term: Optional[str]) -> List[StudentResponse]:
    """Recherche insensible à la casse sur le prénom, le nom et l'email."""
    if not term or not term.strip():
        return students
    needle = term.strip().lower()
    return [
        s for s in students
        if any(needle in (value or "").lower() for value in (s.first_name, s.last_name, s.email))
    ]


def _get_row(db: Session, student_id: int):
    return db.execute(
        select(students_table).where(students_table.c.id == student_id)
    ).mappings().first()


def _raise_write_error(db: Session, exc: SQLAlchemyError, operation: str) -> NoReturn:
    db.rollback()
    detail = str(getattr(exc, "orig", None) or exc)
    logger.error("Erreur lors de la %s d'un élève : %s", operation, detail)
    raise StudentWriteError(detail) from exc


def _storage_values(fields: dict) -> dict:
    values = dict(fields)
    if "enrollment_date" in values:
        values["enrollment_date"] = to_storage_date(values["enrollment_date"])
    return values


def _to_response(row) -> StudentResponse:
    return StudentResponse(**normalize_student_row(row))
