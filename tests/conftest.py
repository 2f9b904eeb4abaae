from __future__ import annotations

from datetime import date

import pytest

from hr_admin.container import build_local_container
from hr_admin.storage.local_storage import LocalStorage


@pytest.fixture
def fixed_today() -> date:
    return date(2025, 6, 1)


@pytest.fixture
def storage() -> LocalStorage:
    return LocalStorage()


@pytest.fixture
def container(storage):
    return build_local_container(storage)


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from hr_admin.main import create_app

    return create_app({"STORAGE_BACKEND": "memory", "STORAGE_FILE": None, "TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()
