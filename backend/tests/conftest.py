import os
import shutil
import tempfile

# the /uploads mount reads UPLOAD_DIR when fleet.main is imported
UPLOAD_DIR = tempfile.mkdtemp(prefix="fleet-uploads-")
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ["UPLOAD_DIR"] = UPLOAD_DIR

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from fleet.db.base import Base
from fleet.models.user import User  # noqa: F401
from fleet.models.vehicle import Vehicle  # noqa: F401
from fleet.api.deps import db
from fleet.main import app


@pytest.fixture()
def engine():
    eng = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture()
def session(session_factory):
    s = session_factory()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture()
def client(session_factory):
    def _db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[db] = _db
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def auth_headers(client):
    client.post("/api/register", json={"username": "dispatcher", "password": "s3cret"})
    r = client.post("/api/login", json={"username": "dispatcher", "password": "s3cret"})
    return {"Authorization": f"Bearer {r.json()['token']}"}


@pytest.fixture(scope="session", autouse=True)
def upload_dir():
    yield UPLOAD_DIR
    shutil.rmtree(UPLOAD_DIR, ignore_errors=True)
