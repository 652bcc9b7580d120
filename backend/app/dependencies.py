"""
Dépendances FastAPI vers les services partagés, créés une fois dans app.main
et rangés dans app.state.
"""

from fastapi import Request

from app.services.bootstrap import SchemaBootstrapper
from app.services.student_service import StudentGateway


def get_bootstrapper(request: Request) -> SchemaBootstrapper:
    return request.app.state.bootstrapper


def get_student_gateway(request: Request) -> StudentGateway:
    return request.app.state.student_gateway
