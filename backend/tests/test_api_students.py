"""
Tests d'intégration API pour les élèves.
GET    /api/v1/students          — liste et recherche
GET    /api/v1/students/stats    — indicateurs
POST   /api/v1/students          — création
PATCH  /api/v1/students/{id}     — mise à jour partielle
DELETE /api/v1/students/{id}     — suppression
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import DataError, OperationalError

from app.database import get_db
from app.dependencies import get_student_gateway
from app.exceptions import StudentFetchError, StudentNotFoundError, StudentWriteError
from app.main import app
from app.schemas.student import StudentResponse
from app.services.bootstrap import SchemaBootstrapper
from app.services.student_service import StudentGateway


# --- Helpers ---

def make_student(**kwargs) -> StudentResponse:
    data = {
        "id": 1,
        "first_name": "Alice",
        "last_name": "Johnson",
        "email": "alice.j@university.edu",
        "major": "Computer Science",
        "gpa": 3.8,
        "status": "Active",
        "enrollment_date": "2023-09-01",
    }
    data.update(kwargs)
    return StudentResponse(**data)


NEW_STUDENT = {
    "first_name": "Test",
    "last_name": "User",
    "email": "t@u.edu",
    "major": "Physics",
    "gpa": 3.5,
    "status": "Active",
    "enrollment_date": "2024-01-01",
}


@pytest.fixture
def gateway_mock(client):
    gateway = MagicMock(spec=StudentGateway)
    app.dependency_overrides[get_student_gateway] = lambda: gateway
    return gateway


# ============================================================
# GET /api/v1/students
# ============================================================

class TestListStudents:
    def test_liste(self, client, gateway_mock):
        gateway_mock.fetch_all.return_value = [make_student(id=1), make_student(id=2, first_name="Bob")]

        resp = client.get("/api/v1/students")

        assert resp.status_code == 200
        data = resp.json()
        assert [s["id"] for s in data] == [1, 2]
        assert data[0]["gpa"] == 3.8
        assert data[0]["enrollment_date"] == "2023-09-01"

    def test_recherche(self, client, gateway_mock):
        gateway_mock.fetch_all.return_value = [
            make_student(id=1),
            make_student(id=2, first_name="Bob", last_name="Smith", email="bob.smith@university.edu"),
        ]

        resp = client.get("/api/v1/students", params={"search": "smi"})

        assert resp.status_code == 200
        assert [s["id"] for s in resp.json()] == [2]

    def test_erreur_lecture(self, client, gateway_mock):
        gateway_mock.fetch_all.side_effect = StudentFetchError()
        resp = client.get("/api/v1/students")
        assert resp.status_code == 503

    def test_base_injoignable(self, client, gateway_mock):
        """Échec d'initialisation → 503 via le handler global."""
        gateway_mock.fetch_all.side_effect = OperationalError("CREATE TABLE", {}, Exception("down"))
        resp = client.get("/api/v1/students")
        assert resp.status_code == 503


def test_stats(client, gateway_mock):
    gateway_mock.fetch_all.return_value = [
        make_student(id=1, gpa=3.0),
        make_student(id=2, gpa=2.0, status="Probation", major="Mathematics"),
    ]

    resp = client.get("/api/v1/students/stats")

    assert resp.status_code == 200
    data = resp.json()
    assert data["total"] == 2
    assert data["active"] == 1
    assert data["probation"] == 1
    assert data["average_gpa"] == 2.5


# ============================================================
# POST /api/v1/students
# ============================================================

def test_create_student_succes(client, gateway_mock):
    gateway_mock.insert.return_value = make_student(id=13, **NEW_STUDENT)

    resp = client.post("/api/v1/students", json=NEW_STUDENT)

    assert resp.status_code == 201
    assert resp.json()["id"] == 13
    data = gateway_mock.insert.call_args[0][1]
    assert data.first_name == "Test"
    assert str(data.enrollment_date) == "2024-01-01"


def test_create_student_statut_invalide(client, gateway_mock):
    resp = client.post("/api/v1/students", json={**NEW_STUDENT, "status": "Suspended"})
    assert resp.status_code == 422
    gateway_mock.insert.assert_not_called()


def test_create_student_prenom_vide(client, gateway_mock):
    resp = client.post("/api/v1/students", json={**NEW_STUDENT, "first_name": "   "})
    assert resp.status_code == 422


def test_create_student_date_invalide(client, gateway_mock):
    resp = client.post("/api/v1/students", json={**NEW_STUDENT, "enrollment_date": "01/01/2024"})
    assert resp.status_code == 422


def test_create_student_erreur_ecriture(client):
    """Débordement NUMERIC côté base → 400 avec le message du driver, pas 503."""
    gateway = StudentGateway(SchemaBootstrapper())
    gateway.bootstrapper.ready = True
    failing_db = MagicMock()
    failing_db.execute.side_effect = DataError("INSERT INTO students", {}, Exception("numeric field overflow"))
    app.dependency_overrides[get_db] = lambda: failing_db
    app.dependency_overrides[get_student_gateway] = lambda: gateway

    resp = client.post("/api/v1/students", json={**NEW_STUDENT, "gpa": 12.5})

    assert resp.status_code == 400
    assert resp.json()["detail"]["detail"] == "numeric field overflow"
    failing_db.rollback.assert_called_once()


def test_update_student_erreur_ecriture(client, gateway_mock):
    gateway_mock.update_by_id.side_effect = StudentWriteError("value too long")

    resp = client.patch("/api/v1/students/1", json={"first_name": "x" * 150})

    assert resp.status_code == 400
    assert resp.json()["detail"]["detail"] == "value too long"


# ============================================================
# PATCH / PUT /api/v1/students/{id}
# ============================================================

def test_update_student_statut_seul(client, gateway_mock):
    gateway_mock.update_by_id.return_value = make_student(status="Graduated")

    resp = client.patch("/api/v1/students/1", json={"status": "Graduated"})

    assert resp.status_code == 200
    assert resp.json()["status"] == "Graduated"
    _, student_id, patch_data = gateway_mock.update_by_id.call_args[0]
    assert student_id == 1
    assert patch_data.model_dump(exclude_unset=True) == {"status": "Graduated"}


def test_update_student_put(client, gateway_mock):
    gateway_mock.update_by_id.return_value = make_student(gpa=3.9)
    resp = client.put("/api/v1/students/1", json={"gpa": 3.9})
    assert resp.status_code == 200
    assert resp.json()["gpa"] == 3.9


def test_update_student_introuvable(client, gateway_mock):
    gateway_mock.update_by_id.side_effect = StudentNotFoundError(999)

    resp = client.patch("/api/v1/students/999", json={"status": "Dropped"})

    assert resp.status_code == 404


# ============================================================
# DELETE /api/v1/students/{id}
# ============================================================

def test_delete_student_succes(client, gateway_mock):
    gateway_mock.delete_by_id.return_value = 5

    resp = client.delete("/api/v1/students/5")

    assert resp.status_code == 200
    assert resp.json() == {"id": 5, "deleted": True}


def test_delete_student_inexistant(client, gateway_mock):
    gateway_mock.delete_by_id.return_value = None

    resp = client.delete("/api/v1/students/999")

    assert resp.status_code == 200
    assert resp.json() == {"id": None, "deleted": False}


def test_delete_student_id_invalide_transmis_tel_quel(client, gateway_mock):
    gateway_mock.delete_by_id.return_value = None

    resp = client.delete("/api/v1/students/abc")

    assert resp.status_code == 200
    assert gateway_mock.delete_by_id.call_args[0][1] == "abc"


# ============================================================
# Scénario complet sur base SQLite
# ============================================================

def test_scenario_complet(db):
    gateway = StudentGateway(SchemaBootstrapper())
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_student_gateway] = lambda: gateway

    with TestClient(app) as c:
        created = c.post("/api/v1/students", json=NEW_STUDENT)
        assert created.status_code == 201
        student = created.json()
        assert isinstance(student["id"], int)
        assert student["gpa"] == 3.5

        listing = c.get("/api/v1/students").json()
        assert listing[-1] == student

        updated = c.patch(f"/api/v1/students/{student['id']}", json={"gpa": 3.9}).json()
        assert updated["gpa"] == 3.9
        assert {k: v for k, v in updated.items() if k != "gpa"} == {
            k: v for k, v in student.items() if k != "gpa"
        }

        deleted = c.delete(f"/api/v1/students/{student['id']}").json()
        assert deleted == {"id": student["id"], "deleted": True}

        final = c.get("/api/v1/students").json()
        assert student["id"] not in [s["id"] for s in final]
        assert len(final) == 12

    app.dependency_overrides.clear()
