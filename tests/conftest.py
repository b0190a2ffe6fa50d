import os

# keep the app's default engine off the working tree; tests bind their own
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from lawdesk.db import models  # noqa: E402,F401
from lawdesk.db.database import Base  # noqa: E402
from lawdesk.db.enums import UserRole  # noqa: E402
from lawdesk.deps.auth import get_db  # noqa: E402
from lawdesk.main import app  # noqa: E402
from lawdesk.services.session_service import create_user  # noqa: E402

ADMIN_EMAIL = "admin@lawdesk.test"
LAWYER_EMAIL = "ana@lawdesk.test"
PASSWORD = "segredo123"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # no context manager: the startup hook would touch the real database
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin(db):
    return create_user(db, ADMIN_EMAIL, PASSWORD, role=UserRole.admin, first_name="Carla", last_name="Mendes")


@pytest.fixture
def lawyer(db):
    return create_user(db, LAWYER_EMAIL, PASSWORD, role=UserRole.lawyer, first_name="Ana")


def login(client, email, password=PASSWORD):
    resp = client.post("/api/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return client


@pytest.fixture
def auth_client(client, admin):
    """TestClient carrying the admin's session cookie."""
    return login(client, ADMIN_EMAIL)


@pytest.fixture
def lawyer_client(client, lawyer):
    return login(client, LAWYER_EMAIL)


@pytest.fixture
def make_client(auth_client):
    def _make(**overrides):
        payload = {"name": "Maria Souza", "type": "individual"}
        payload.update(overrides)
        resp = auth_client.post("/api/clients", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make
