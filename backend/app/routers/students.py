"""
Router pour les élèves.
Listage et recherche (GET /api/v1/students)
Indicateurs du tableau de bord (GET /api/v1/students/stats)
Création (POST), mise à jour partielle (PATCH / PUT), suppression (DELETE)
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_student_gateway
from app.exceptions import StudentFetchError, StudentNotFoundError, StudentWriteError
from app.schemas.student import (
    DashboardStats,
    StudentCreate,
    StudentDeleteResult,
    StudentResponse,
    StudentUpdate,
)
from app.services.dashboard_service import compute_dashboard_stats
from app.services.student_service import StudentGateway, filter_students

router = APIRouter(prefix="/api/v1/students", tags=["Élèves"])


@router.get("", response_model=List[StudentResponse], summary="Lister les élèves")
def list_students(
    search: Optional[str] = None,
    db: Session = Depends(get_db),
    gateway: StudentGateway = Depends(get_student_gateway),
):
    """Retourne les élèves triés par id, filtrés sur prénom, nom ou email si `search` est fourni."""
    try:
        students = gateway.fetch_all(db)
    except StudentFetchError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return filter_students(students, search)


@router.get("/stats", response_model=DashboardStats, summary="Indicateurs du tableau de bord")
def get_stats(db: Session = Depends(get_db), gateway: StudentGateway = Depends(get_student_gateway)):
    try:
        students = gateway.fetch_all(db)
    except StudentFetchError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return compute_dashboard_stats(students)


@router.post("", response_model=StudentResponse, status_code=201, summary="Créer un élève")
def create_student(
    data: StudentCreate,
    db: Session = Depends(get_db),
    gateway: StudentGateway = Depends(get_student_gateway),
):
    try:
        return gateway.insert(db, data)
    except StudentWriteError as e:
        raise HTTPException(status_code=400, detail={"message": str(e), "detail": e.detail})


@router.patch("/{student_id}", response_model=StudentResponse, summary="Modifier un élève")
@router.put("/{student_id}", response_model=StudentResponse, include_in_schema=False)
def update_student(
    student_id: int,
    data: StudentUpdate,
    db: Session = Depends(get_db),
    gateway: StudentGateway = Depends(get_student_gateway),
):
    """Met à jour les champs fournis d'un élève. Les champs absents ne sont pas modifiés."""
    try:
        return gateway.update_by_id(db, student_id, data)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StudentWriteError as e:
        raise HTTPException(status_code=400, detail={"message": str(e), "detail": e.detail})


@router.delete("/{student_id}", response_model=StudentDeleteResult, summary="Supprimer un élève")
def delete_student(
    student_id: str,
    db: Session = Depends(get_db),
    gateway: StudentGateway = Depends(get_student_gateway),
):
    """
    Supprime définitivement un élève.
    Un id inexistant ou invalide n'est pas une erreur : `deleted` vaut alors False.
    """
    try:
        deleted_id = gateway.delete_by_id(db, student_id)
    except StudentWriteError as e:
        raise HTTPException(status_code=400, detail={"message": str(e), "detail": e.detail})
    return StudentDeleteResult(id=deleted_id, deleted=deleted_id is not None)
