"""
Pytest fixtures for JobPortal tests.
"""

import os
import random

# IMPORTANT: Set environment variables BEFORE any imports from jobportal
# so the cached Settings never point at real files, MongoDB or an AI API.
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["AI_API_KEY"] = ""
os.environ["JWT_SECRET_KEY"] = "test-secret-key-1234"

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from jobportal.core.config import Settings
from jobportal.db.storage import MemoryStorage
from jobportal.services.ai_client import AssistantClient, get_assistant_client
from jobportal.services.document_service import JobPortalDB, get_database


@pytest.fixture
def settings():
    """Small dataset so every test seeds quickly."""
    return Settings(
        _env_file=None,
        storage_backend="memory",
        seed_target_jobs=60,
        seed_min_jobs=50,
        ai_api_key="",
    )


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def db(storage, settings):
    return JobPortalDB(storage, settings, rng=random.Random(42))


@pytest.fixture
def ai():
    """Assistant double with canned replies."""
    fake = MagicMock(spec=AssistantClient)
    fake.generate_job_description.return_value = "Role: build things."
    fake.get_resume_feedback.return_value = "1. Quantify impact."
    fake.chat_with_assistant.return_value = "Happy to help!"
    return fake


@pytest.fixture
def client(db, ai):
    """FastAPI test client wired to the in-memory store and fake assistant."""
    from jobportal.main import app

    app.dependency_overrides[get_database] = lambda: db
    app.dependency_overrides[get_assistant_client] = lambda: ai
    yield TestClient(app)
    app.dependency_overrides.clear()


def login(client, email, name="Test User", role="CANDIDATE"):
    """Sign in and return (auth headers, user)."""
    response = client.post("/api/auth/login", json={"email": email, "name": name, "role": role})
    assert response.status_code == 200, response.text
    body = response.json()
    return {"Authorization": f"Bearer {body['access_token']}"}, body["user"]


@pytest.fixture
def login_as(client):
    """login() bound to the test client."""
    def _login(email, name="Test User", role="CANDIDATE"):
        return login(client, email, name=name, role=role)
    return _login


@pytest.fixture
def candidate(client):
    return login(client, "asha@mail.com", name="Asha Rao", role="CANDIDATE")


@pytest.fixture
def recruiter(client):
    headers, user = login(client, "hr@google.com", name="Ravi Kumar", role="RECRUITER")
    response = client.put(
        "/api/recruiter/company-profile",
        json={"name": "Google", "industry": "Internet", "location": "Bangalore, India"},
        headers=headers,
    )
    assert response.status_code == 200, response.text
    return headers, user
