import asyncio

import pytest
from fastapi.testclient import TestClient

from synapse_docs.core.config import Settings
from synapse_docs.domains.documentation.services import DocumentationService
from synapse_docs.main import create_app

ADMIN_EMAIL = "admin@synapse.dev"
ADMIN_PASSWORD = "ChangeMe123"


@pytest.fixture
def settings():
    return Settings(
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        jwt_secret="test-secret",
        port=0,
    )


@pytest.fixture
def service(settings):
    """Initialized documentation service without a running server"""
    docs = DocumentationService(settings)
    asyncio.run(docs.initialize())
    return docs


@pytest.fixture
def client(service):
    with TestClient(create_app(service)) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client):
    r = client.post("/_admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert r.status_code == 200
    return {"Authorization": f"Bearer {r.json()['access_token']}"}
