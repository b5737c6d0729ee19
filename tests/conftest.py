import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient

from main import app
from quizhub.core.database import Base, SessionLocal, engine
from quizhub.core.security import create_access_token
from quizhub.models.subject_db.subject_crud import create_subject
from quizhub.models.user_db.user_db import UserRole
from quizhub.models.user_db.user_db_crud import create_user
from quizhub.schemas.users.user_base import UserCreate


@pytest.fixture(autouse=True)
def database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def auth_headers(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': str(user.id)})}"}


@pytest.fixture
def make_user(db):
    def _make_user(username: str, role: UserRole = UserRole.STUDENT):
        return create_user(db, UserCreate(username=username, name=username.title(), password="secret123"), role=role)

    return _make_user


@pytest.fixture
def admin(make_user):
    return make_user("admin", UserRole.ADMIN)


@pytest.fixture
def teacher(make_user):
    return make_user("teacher", UserRole.TEACHER)


@pytest.fixture
def student(make_user):
    return make_user("student")


@pytest.fixture
def subject(db):
    return create_subject(db, "Geography")


def quiz_payload(subject_id, **overrides) -> dict:
    payload = {
        "title": "Capitals",
        "description": "European capitals",
        "subject_id": str(subject_id),
        "is_published": True,
        "questions": [
            {
                "text": "Capital of France?",
                "type": "SINGLE_CHOICE",
                "options": ["Berlin", "Paris", "Rome"],
                "correct_answer": "Paris",
                "points": 2,
            },
            {
                "text": "Which are in Scandinavia?",
                "type": "MULTIPLE_CHOICE",
                "options": ["Norway", "Spain", "Sweden", "Italy"],
                "correct_answers": ["Norway", "Sweden"],
                "points": 4,
            },
            {
                "text": "Match country and capital",
                "type": "MATCHING",
                "matching_pairs": {"Italy": "Rome", "Spain": "Madrid"},
                "points": 2,
            },
            {
                "text": "Vienna is the capital of Austria",
                "type": "TRUE_FALSE",
                "options": ["True", "False"],
                "correct_answer": "True",
                "points": 2,
            },
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def published_quiz(client, teacher, subject):
    response = client.post("/quizzes/", json=quiz_payload(subject.id), headers=auth_headers(teacher))
    assert response.status_code == 201, response.text
    return response.json()
