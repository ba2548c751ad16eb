import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ALGORITHM"] = "HS256"
os.environ["AUTH_PROVIDER"] = "jwt"
os.environ["NOTIFICATION_SERVICE_URL"] = ""
os.environ["BOOKING_CONFLICT_GUARD"] = "true"

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from groundbooking.core.database import Base
from groundbooking.dependencies import get_db
from groundbooking.main import app


def make_token(uid: str = "user-1", email: str = "player@example.com", role: str | None = None) -> str:
    claims = {"sub": uid, "email": email}
    if role is not None:
        claims["role"] = role
    return jwt.encode(claims, "test-secret", algorithm="HS256")


def auth_headers(**kwargs) -> dict:
    return {"Authorization": f"Bearer {make_token(**kwargs)}"}


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def user_headers() -> dict:
    return auth_headers()


@pytest.fixture()
def admin_headers() -> dict:
    return auth_headers(uid="admin-1", email="admin@example.com", role="admin")


@pytest.fixture()
def make_headers():
    return auth_headers
