"""
Pytest configuration and fixtures
"""
import asyncio
import os
import tempfile
from datetime import date
from decimal import Decimal

# Settings are read at import time, so the environment must be set first
os.environ["DATABASE_TYPE"] = "sqlite"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["DEFAULT_ADMIN_USERNAME"] = "admin"
os.environ["DEFAULT_ADMIN_PASSWORD"] = "admin-password"
os.environ["SEED_DEFAULT_SETTINGS"] = "false"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="sdh-uploads-")

import pytest

from sdh_inventory.application.dto.asset_dto import AssetCreateDTO
from sdh_inventory.application.use_cases.asset_use_cases import AssetUseCases
from sdh_inventory.infrastructure.repositories.asset_repository_impl import AssetRepositoryImpl
from sdh_inventory.infrastructure.repositories.settings_repository_impl import SettingsRepositoryImpl

ADMIN_CREDENTIALS = {"username": "admin", "password": "admin-password"}


def run(coro):
    """Run a use case coroutine to completion"""
    return asyncio.run(coro)


@pytest.fixture
def asset_repository():
    return AssetRepositoryImpl()


@pytest.fixture
def settings_repository():
    return SettingsRepositoryImpl()


@pytest.fixture
def asset_use_cases(asset_repository):
    return AssetUseCases(asset_repository)


@pytest.fixture
def make_asset_data():
    """Factory for valid asset payloads"""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        data = {
            "name": f"Hadice B75 #{counter['n']}",
            "inventory_number": f"SDH-H-{counter['n']:03d}",
            "category": "Hadice a armatury",
            "location": "Sklad",
            "condition": "Dobrý",
            "manager": "Jan Novák",
            "purchase_date": date(2018, 3, 10),
            "price": Decimal("1800"),
        }
        data.update(overrides)
        return AssetCreateDTO(**data)

    return _make


@pytest.fixture(scope="session")
def client():
    """Test client with the application lifespan running"""
    from fastapi.testclient import TestClient
    from sdh_inventory.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def _clean_database(request):
    """Empty the tables after every API test; the default admin is kept"""
    yield
    if "client" not in request.fixturenames:
        return

    from sdh_inventory.infrastructure.database.base import SessionLocal
    from sdh_inventory.infrastructure.database.models import AssetModel, SettingsEntryModel, UserModel

    db = SessionLocal()
    try:
        db.query(AssetModel).delete()
        db.query(SettingsEntryModel).delete()
        db.query(UserModel).filter(UserModel.username != ADMIN_CREDENTIALS["username"]).delete()
        db.commit()
    finally:
        db.close()


def login(client, username, password):
    response = client.post("/api/v1/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def admin_headers(client):
    return login(client, **ADMIN_CREDENTIALS)


@pytest.fixture
def reader_headers(client, admin_headers):
    response = client.post(
        "/api/v1/users/",
        json={"username": "reader", "password": "reader-password", "role": "READER"},
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return login(client, "reader", "reader-password")
