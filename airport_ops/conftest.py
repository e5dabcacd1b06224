# airport_ops/conftest.py

from datetime import date, time

import pytest
from fastapi.testclient import TestClient

from airport_ops.database import make_engine, make_session_factory, init_db
from airport_ops.main import create_app
from airport_ops.schemas.flight import FlightCreate
from airport_ops.schemas.gate import GateCreate
from airport_ops.schemas.employee import EmployeeCreate
from airport_ops.schemas.passenger import PassengerCreate
from airport_ops.storage.memory import MemStorage
from airport_ops.storage.sql import DatabaseStorage

TODAY = date(2025, 5, 17)


def fixed_today():
    return TODAY


def make_flight(number="AA1234", **overrides):
    values = dict(
        flight_number=number,
        airline="American Airlines",
        origin="New York (JFK)",
        destination="Los Angeles (LAX)",
        departure_date=TODAY,
        departure_time=time(10, 30),
        status="scheduled",
    )
    values.update(overrides)
    return FlightCreate(**values)


def make_gate(number="A1", **overrides):
    values = dict(gate_number=number, terminal="A", status="available")
    values.update(overrides)
    return GateCreate(**values)


def make_employee(email="john.doe@airport.com", **overrides):
    values = dict(first_name="John", last_name="Doe", email=email, role="pilot")
    values.update(overrides)
    return EmployeeCreate(**values)


def make_passenger(**overrides):
    values = dict(first_name="Alice", last_name="Johnson", email="alice@example.com")
    values.update(overrides)
    return PassengerCreate(**values)


def sqlite_storage():
    engine = make_engine("sqlite://")
    init_db(engine)
    return DatabaseStorage(make_session_factory(engine), today=fixed_today)


@pytest.fixture(params=["memory", "sqlite"])
def storage(request):
    if request.param == "memory":
        return MemStorage(today=fixed_today)
    return sqlite_storage()


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret")
    app = create_app(storage=MemStorage(today=fixed_today))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_client(client):
    resp = client.post("/api/register", json={"username": "admin", "password": "supersecret"})
    assert resp.status_code == 201
    return client
