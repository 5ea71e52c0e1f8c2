"""
Global test fixtures for Team Board.

This module provides shared fixtures for all tests including:
- Import paths for the backend and frontend sources
- Sample credential documents
- A credential store on a temporary data file
- FastAPI test clients wired to that store
"""

import json
import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Add backend and frontend to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "backend"))
sys.path.insert(0, str(ROOT / "frontend"))


# =============================================================================
# Credential Fixtures
# =============================================================================

@pytest.fixture
def admin_document() -> dict:
    """The stock admin account, still on its default password."""
    return {
        "username": "admin",
        "password": "Hallo123",
        "role": "admin",
        "isDefaultPassword": True,
    }


@pytest.fixture
def credential_documents(admin_document) -> list[dict]:
    """A small collection as stored on disk."""
    return [
        admin_document,
        {
            "username": "alice",
            "password": "wonderland",
            "role": "user",
            "isDefaultPassword": False,
            "memberId": "m-alice",
        },
        {
            "username": "carol",
            "password": "Hallo123",
            "role": "admin",
            "isDefaultPassword": True,
            "memberId": "m-carol",
        },
    ]


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def data_file(tmp_path) -> Path:
    """Location of the credential document; does not exist yet."""
    return tmp_path / "data" / "users.json"


@pytest.fixture
def seeded_data_file(data_file, credential_documents) -> Path:
    """Credential document pre-filled with ``credential_documents``."""
    data_file.parent.mkdir(parents=True, exist_ok=True)
    data_file.write_text(json.dumps(credential_documents), encoding="utf-8")
    return data_file


@pytest.fixture
def json_store(data_file):
    """A JsonCredentialStore on the temporary data file."""
    from userstore.database.json_store import JsonCredentialStore
    return JsonCredentialStore(data_file)


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(json_store):
    """
    FastAPI app with the store dependency pointed at the temporary file.
    """
    from userstore.database.connections import get_store
    from userstore.main import app

    app.dependency_overrides[get_store] = lambda: json_store
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.
    """
    with TestClient(app) as c:
        yield c
