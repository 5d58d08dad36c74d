"""
Shared fixtures: in-memory database, seeded catalog and authenticated clients.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from tripledger.core.config import settings
from tripledger.db.init_db import seed_database
from tripledger.db.session import build_engine, get_db, init_db
from tripledger.main import app
from tripledger.models import Category, PaymentType


@pytest.fixture()
def engine():
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture()
def session_factory(engine):
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = factory()
    try:
        seed_database(session)
    finally:
        session.close()
    return factory


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def upload_dir(tmp_path, monkeypatch):
    target = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(target))
    return target


@pytest.fixture()
def client(session_factory, upload_dir):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _login(client, username, password):
    response = client.post("/api/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture()
def admin_headers(client):
    return _login(client, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)


@pytest.fixture()
def guest_headers(client):
    response = client.post("/api/auth/guest-login")
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture()
def catalog(db):
    """Seeded category and payment type ids keyed by name."""
    return {
        "categories": {c.name: c.id for c in db.query(Category).all()},
        "payment_types": {p.name: p.id for p in db.query(PaymentType).all()},
    }


@pytest.fixture()
def trip_payload():
    return {
        "main_destination": "Florianópolis",
        "main_reason": "Conference",
        "start_date": "2024-03-01",
        "end_date": "2024-03-05",
        "initial_cash": "500.00",
    }


@pytest.fixture()
def create_trip(client, admin_headers, trip_payload):
    def _create(**overrides):
        payload = dict(trip_payload, **overrides)
        response = client.post("/api/trips", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture()
def create_expense(client, admin_headers, catalog):
    def _create(trip_id, amount, payment_type="Dinheiro", category="Alimentação",
                headers=None, files=None, **extra):
        data = {
            "trip_id": trip_id,
            "category_id": catalog["categories"][category],
            "payment_type_id": catalog["payment_types"][payment_type],
            "amount": str(amount),
            "date": "2024-03-02",
            "description": "Lunch",
        }
        data.update(extra)
        return client.post(
            "/api/expenses", data=data, files=files, headers=headers or admin_headers
        )
    return _create
