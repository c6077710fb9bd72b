import pytest
from fastapi.testclient import TestClient

from student_records_api.app.core.config import Settings
from student_records_api.app.main import create_app
from student_records_api.app.services.student_service import StudentService


@pytest.fixture
def service():
    return StudentService()


@pytest.fixture
def app(service):
    return create_app(Settings(), student_service=service)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
