"""
Shared fixtures: an in-memory SQLite database with the schema and reference
data loaded, plus a small committed dataset (two cities, one airplane with
seats, one user).
"""

from datetime import datetime, timedelta
from decimal import Decimal
from types import SimpleNamespace

import pytest

from airflow_reservations.database.config import DatabaseConfig, reset_database_config
from airflow_reservations.models import (
    AirplaneModel,
    CityModel,
    FlightModel,
    FlightStatusCode,
    SeatClass,
    SeatModel,
    UserModel,
)
from airflow_reservations.repositories import (
    AirplaneRepository,
    CityRepository,
    SeatRepository,
    UserRepository,
)
from airflow_reservations.utils.config import reset_config

CONFIG_VARIABLES = (
    "DATABASE_URL",
    "DB_TYPE",
    "DB_HOST",
    "DB_PORT",
    "DB_NAME",
    "DB_USER",
    "DB_PASSWORD",
    "SQL_ECHO",
    "LOG_LEVEL",
)

DEPARTURE = datetime(2025, 3, 14, 8, 30)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run every test without inherited connection settings or a stray .env."""
    for name in CONFIG_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_database_config()
    reset_config()


@pytest.fixture
def database():
    """In-memory SQLite database with tables and status lookups."""
    db = DatabaseConfig(database_url="sqlite://")
    db.create_tables()
    db.load_reference_data()
    yield db
    db.close()


@pytest.fixture
def session(database):
    """Session for repository tests; everything is rolled back afterwards."""
    session = database.get_session()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def route(database):
    """Bogotá and Medellín, an airplane with seats 1A-1C, a second airplane and a user."""
    with database.get_session_context() as session:
        cities = CityRepository(session)
        bogota = cities.create(CityModel(name="Bogotá", country="Colombia", code="BOG"))
        medellin = cities.create(CityModel(name="Medellín", country="Colombia", code="MDE"))

        airplanes = AirplaneRepository(session)
        airplane = airplanes.create(AirplaneModel(
            airline="Avianca", model="A320", code="HK-5001", capacity=180, year=2015,
        ))
        other_airplane = airplanes.create(AirplaneModel(
            airline="LATAM", model="A319", code="CC-BCF", capacity=144, year=2012,
        ))

        seats = SeatRepository(session)
        seat_map = {
            number: seats.create(SeatModel(
                airplane_id=airplane.id,
                seat_number=number,
                seat_class=SeatClass.ECONOMY,
                is_window=number.endswith("A"),
            ))
            for number in ("1A", "1B", "1C")
        }
        foreign_seat = seats.create(SeatModel(
            airplane_id=other_airplane.id, seat_number="1A", seat_class=SeatClass.BUSINESS,
        ))

        user = UserRepository(session).create(UserModel(
            name="Ana", last_name="Restrepo", email="ana@example.com", password="not-a-real-hash",
        ))

    return SimpleNamespace(
        bogota=bogota,
        medellin=medellin,
        airplane=airplane,
        other_airplane=other_airplane,
        seats=seat_map,
        foreign_seat=foreign_seat,
        user=user,
    )


@pytest.fixture
def make_flight(route):
    """Build (not store) a Bogotá to Medellín flight on the route's airplane."""

    def _make(code="AV202", departure=DEPARTURE, duration=timedelta(hours=1), **overrides):
        values = dict(
            airplane_id=route.airplane.id,
            status_id=int(FlightStatusCode.SCHEDULED),
            origin_city_id=route.bogota.id,
            destination_city_id=route.medellin.id,
            code=code,
            departure_time=departure,
            arrival_time=departure + duration if departure is not None else None,
            price_base=Decimal("350000.00"),
        )
        values.update(overrides)
        return FlightModel(**values)

    return _make
