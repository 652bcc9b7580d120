"""
Schémas Pydantic pour les élèves.
"""

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, field_validator

StudentStatus = Literal["Active", "Probation", "Graduated", "Dropped"]


class StudentCreate(BaseModel):
    """Schéma de création d'un élève (POST /students). L'id est attribué par la base."""
    first_name: str
    last_name: str
    email: str
    major: str
    gpa: float
    status: StudentStatus
    enrollment_date: date

    @field_validator("first_name", "last_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v.strip()


class StudentUpdate(BaseModel):
    """
    Patch d'un élève (PATCH /students/{id}).
    Seuls les champs explicitement fournis sont modifiés ; un éventuel `id`
    dans le corps est ignoré.
    """
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    major: Optional[str] = None
    gpa: Optional[float] = None
    status: Optional[StudentStatus] = None
    enrollment_date: Optional[date] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v.strip() if v else v


class StudentResponse(BaseModel):
    """Élève tel que renvoyé à l'interface : gpa en float, date au format YYYY-MM-DD."""
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    major: Optional[str] = None
    gpa: Optional[float] = None
    status: Optional[str] = None
    enrollment_date: Optional[str] = None


class StudentDeleteResult(BaseModel):
    """Résultat d'une suppression : `deleted` vaut False si l'id n'existait pas ou était invalide."""
    id: Optional[int]
    deleted: bool


class CountEntry(BaseModel):
    name: str
    value: int


class DashboardStats(BaseModel):
    """Indicateurs du tableau de bord."""
    total: int
    active: int
    probation: int
    average_gpa: float
    top_majors: List[CountEntry]
    status_distribution: List[CountEntry]
