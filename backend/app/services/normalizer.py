"""
Conversion entre la représentation des valeurs renvoyée par le driver SQL
et celle exposée par l'API.

Selon le driver, `gpa` (NUMERIC) arrive en Decimal, float ou texte, et
`enrollment_date` (DATE) en objet date ou en texte : les deux formes sont acceptées.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Mapping, Union


def _to_float(value: Union[Decimal, float, int, str]) -> float:
    if isinstance(value, str):
        return float(value.strip())
    return float(value)


def _to_iso_date(value: Union[date, str]) -> str:
    # datetime hérite de date : on ne garde que la partie calendaire
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


def normalize_student_row(row: Mapping[str, Any]) -> dict:
    """
    Convertit une ligne brute de la table students en dictionnaire canonique :
    id en int, gpa en float, enrollment_date en texte YYYY-MM-DD.
    Les autres colonnes (et les valeurs NULL) sont recopiées telles quelles.
    """
    record = dict(row)
    if record.get("id") is not None:
        record["id"] = int(record["id"])
    if record.get("gpa") is not None:
        record["gpa"] = _to_float(record["gpa"])
    if record.get("enrollment_date") is not None:
        record["enrollment_date"] = _to_iso_date(record["enrollment_date"])
    return record


def normalize_result_value(value: Any) -> Any:
    """Valeur d'une requête libre : les dates deviennent du texte ISO, le reste est inchangé."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


def to_storage_date(value: Union[date, str, None]) -> Union[date, None]:
    """Sens inverse : texte YYYY-MM-DD → date, avant liaison d'un paramètre DATE."""
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    return value
