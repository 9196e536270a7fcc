"""Shared fixtures: a fresh in-memory database per test and a TestClient bound to it."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from biztime.core.config import Settings
from biztime.core.db import Base, create_db_engine, get_db
from biztime.main import create_app
from biztime.schemas.company_schema import CompanyCreate
from biztime.services.company_service import create_company
from biztime.models.invoice_model import Invoice


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
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


def _client_for(settings: Settings, session_factory, **kwargs) -> TestClient:
    app = create_app(settings)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app, **kwargs)


@pytest.fixture
def client(session_factory):
    return _client_for(Settings(LEGACY_VALIDATION_STATUS=False), session_factory)


@pytest.fixture
def legacy_client(session_factory):
    return _client_for(Settings(LEGACY_VALIDATION_STATUS=True), session_factory)


@pytest.fixture
def test_company(db):
    create_company(db, CompanyCreate(code="test", name="TestCompany", description="test description"))
    return {"code": "test", "name": "TestCompany", "description": "test description"}


@pytest.fixture
def test_invoice(db, test_company):
    invoice = Invoice(comp_code=test_company["code"], amt=10)
    db.add(invoice)
    db.commit()
    db.refresh(invoice)
    return {
        "id": invoice.id,
        "comp_code": invoice.comp_code,
        "amt": invoice.amt,
        "paid": invoice.paid,
        "add_date": invoice.add_date.isoformat(),
        "paid_date": None,
    }
