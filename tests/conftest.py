import os
import tempfile

# Configure a throwaway database before the app modules read the environment
_db_dir = tempfile.mkdtemp(prefix="hr_backend_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["NODE_ENV"] = "test"

import uuid

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture(scope="session")
def client():
    # Entering the client runs the lifespan, which creates the tables
    with TestClient(app) as c:
        yield c


@pytest.fixture
def company(client):
    r = client.post("/api/companies", json={
        "name": f"Acme {uuid.uuid4().hex[:6]}",
        "email": "hr@acme-corp.com",
        "phone": "+1555000000",
        "address": "1 Main St",
        "industry": "Manufacturing",
    })
    assert r.status_code == 201, r.text
    return r.json()


@pytest.fixture
def employee(client, company):
    r = client.post("/api/employees", json={
        "name": "Jane Roe",
        "email": "jane@acme-corp.com",
        "phone": "+1555000001",
        "position": "Engineer",
        "department": "R&D",
        "company_id": company["id"],
    })
    assert r.status_code == 201, r.text
    return r.json()
