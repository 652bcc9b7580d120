"""
Configuration partagée pour tous les tests.
- `client` : override de get_db par un MagicMock, aucune connexion à PostgreSQL.
- `db` / `gateway` : session SQLite en mémoire pour les tests qui ont besoin
  d'une vraie base (création de table, RETURNING, tri par id).
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from unittest.mock import MagicMock

from app.database import get_db
from app.main import app
from app.services.bootstrap import SchemaBootstrapper
from app.services.student_service import StudentGateway


@pytest.fixture
def client():
    """Client HTTP de test avec la BDD mockée."""
    mock_db = MagicMock()
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def engine():
    """Base SQLite en mémoire, partagée entre threads (TestClient)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False)()
    yield session
    session.close()


@pytest.fixture
def bootstrapper():
    return SchemaBootstrapper()


@pytest.fixture
def gateway(bootstrapper):
    return StudentGateway(bootstrapper)
