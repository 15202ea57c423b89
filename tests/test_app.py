from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, inspect

from app.common import db_connect
from app.common.config import AppConfig, RepositoryFactory
from app.main import app


@pytest.fixture
def sqlite_file_engine(tmp_path: Path) -> Generator:
    """Point the application's engine and session factory at a throwaway SQLite file."""
    engine = create_engine(f"sqlite:///{tmp_path / 'users.db'}", connect_args={"check_same_thread": False})
    original_engine = db_connect._engine
    db_connect.SessionLocal.remove()
    db_connect.SessionLocal.configure(bind=engine)
    with patch.object(db_connect, "_engine", engine):
        yield engine
    db_connect.SessionLocal.remove()
    db_connect.SessionLocal.configure(bind=original_engine)
    engine.dispose()


def _exercise_user_lifecycle(client: TestClient) -> None:
    assert client.post("/api/v1/users", json={"id": 1, "username": "testuser"}).status_code == 201
    assert client.get("/api/v1/users/1").json() == {"id": 1, "username": "testuser"}
    assert client.get("/api/v1/users/2").status_code == 404
    assert client.get("/api/v1/users/0").status_code == 400
    assert client.post("/api/v1/users", json={"id": 3, "username": ""}).status_code == 400
    assert client.get("/api/v1/users").json() == [{"id": 1, "username": "testuser"}]
    assert client.delete("/api/v1/users/1").json() == {"deleted": True}
    assert client.delete("/api/v1/users/99").json() == {"deleted": False}


def test_user_lifecycle_against_memory_backend():
    RepositoryFactory._in_memory_user_repository = None
    with patch.object(AppConfig, "USER_REPOSITORY", "memory"), TestClient(app) as client:
        _exercise_user_lifecycle(client)
    RepositoryFactory._in_memory_user_repository = None


def test_user_lifecycle_against_sql_backend(sqlite_file_engine):
    assert not inspect(sqlite_file_engine).has_table("users")

    with patch.object(AppConfig, "USER_REPOSITORY", "sql"), TestClient(app) as client:
        # startup created the schema
        assert inspect(sqlite_file_engine).has_table("users")
        _exercise_user_lifecycle(client)
