"""
Tests for the generic repository contract and the per-entity lookups.
"""

from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import IntegrityError

from airflow_reservations.exceptions import DecodingError, NotFoundError
from airflow_reservations.models import (
    AirplaneModel,
    CityModel,
    FlightDetailsModel,
    FlightModel,
    FlightStatusCode,
    FlightStatusModel,
    ReservationDetailsModel,
    ReservationStatusModel,
    ReservationModel,
    ReservationStatusCode,
    SeatClass,
    SeatModel,
    UserModel,
)
from airflow_reservations.repositories import (
    AirplaneRepository,
    CityRepository,
    FlightRepository,
    FlightStatusRepository,
    ReservationRepository,
    ReservationStatusRepository,
    SeatRepository,
    UserRepository,
)


class TestRepositoryContract:
    """Behaviour shared by every repository, exercised through cities."""

    def test_get_all_empty(self, session):
        assert CityRepository(session).get_all() == []

    def test_create_assigns_id(self, session):
        cities = CityRepository(session)
        cali = cities.create(CityModel(name="Cali", country="Colombia", code="CLO"))
        quito = cities.create(CityModel(name="Quito", country="Ecuador", code="UIO"))

        assert cali.id is not None
        assert quito.id != cali.id
        assert cities.get_by_id(cali.id) == cali

    def test_get_all_in_storage_order(self, session):
        cities = CityRepository(session)
        for code in ("CLO", "UIO", "LIM"):
            cities.create(CityModel(name=code, country="-", code=code))

        assert [city.code for city in cities.get_all()] == ["CLO", "UIO", "LIM"]

    def test_get_by_id_missing(self, session):
        with pytest.raises(NotFoundError) as exc_info:
            CityRepository(session).get_by_id(404)

        assert exc_info.value.entity == "city"
        assert exc_info.value.identifier == 404

    def test_find_by_id_missing(self, session):
        assert CityRepository(session).find_by_id(404) is None

    def test_update(self, session):
        cities = CityRepository(session)
        cali = cities.create(CityModel(name="Cali", country="Colombia", code="CLO"))

        assert cities.update(cali.id, cali.model_copy(update={"name": "Santiago de Cali"})) is True
        assert cities.get_by_id(cali.id).name == "Santiago de Cali"

    def test_update_missing_returns_false(self, session):
        assert CityRepository(session).update(404, CityModel(name="x", country="y", code="z")) is False

    def test_delete(self, session):
        cities = CityRepository(session)
        cali = cities.create(CityModel(name="Cali", country="Colombia", code="CLO"))

        assert cities.delete(cali.id) is True
        assert cities.find_by_id(cali.id) is None
        assert cities.delete(cali.id) is False

    def test_delete_referenced_row_fails(self, session, route, make_flight):
        FlightRepository(session).create(make_flight())

        with pytest.raises(IntegrityError):
            CityRepository(session).delete(route.bogota.id)


class TestCityRepository:

    def test_get_by_name(self, session, route):
        cities = CityRepository(session)

        assert cities.get_by_name("Medellín") == route.medellin
        assert cities.get_by_name("medellín") is None


class TestAirplaneRepository:

    def test_round_trip(self, session, route):
        airplane = AirplaneRepository(session).get_by_id(route.airplane.id)

        assert airplane.model == "A320"
        assert airplane.capacity == 180
        assert airplane.year == 2015

    def test_get_by_code(self, session, route):
        airplanes = AirplaneRepository(session)

        assert airplanes.get_by_code("CC-BCF").id == route.other_airplane.id
        assert airplanes.get_by_code("XX-000") is None

    def test_year_is_optional(self, session):
        airplane = AirplaneRepository(session).create(AirplaneModel(
            airline="Satena", model="ATR 42", code="HK-4000", capacity=48,
        ))
        assert AirplaneRepository(session).get_by_id(airplane.id).year is None


class TestStatusRepositories:

    def test_flight_statuses(self, session):
        statuses = FlightStatusRepository(session).get_all()

        assert [status.id for status in statuses] == [int(code) for code in FlightStatusCode]
        assert isinstance(statuses[0], FlightStatusModel)

    def test_reservation_status_by_id(self, session):
        confirmed = ReservationStatusRepository(session).get_by_id(ReservationStatusCode.CONFIRMED)
        assert confirmed.name == "CONFIRMED"

    def test_create_keeps_given_id(self, session):
        repository = ReservationStatusRepository(session)
        repository.create(ReservationStatusModel(id=42, name="WAITLIST", description="Waiting list"))

        assert repository.get_by_id(42).name == "WAITLIST"


class TestUserRepository:

    def test_get_by_email(self, session, route):
        user = UserRepository(session).get_by_email("ana@example.com")

        assert user.id == route.user.id
        assert user.is_super_user is False

    def test_get_by_email_missing(self, session):
        assert UserRepository(session).get_by_email("nobody@example.com") is None

    def test_duplicate_email(self, session, route):
        with pytest.raises(IntegrityError):
            UserRepository(session).create(UserModel(
                name="Ana", last_name="Otra", email="ana@example.com", password="x",
            ))


class TestFlightRepository:

    def test_lookups_by_city(self, session, route, make_flight):
        flights = FlightRepository(session)
        created = flights.create(make_flight())

        assert flights.get_by_origin_city(route.bogota.id) == [created]
        assert flights.get_by_origin_city(route.medellin.id) == []
        assert flights.get_by_destination_city(route.medellin.id) == [created]

    def test_get_by_code(self, session, make_flight):
        flights = FlightRepository(session)
        flights.create(make_flight(code="AV202"))

        assert [flight.code for flight in flights.get_by_code("AV202")] == ["AV202"]
        assert flights.get_by_code("AV999") == []

    def test_price_round_trip(self, session, make_flight):
        flights = FlightRepository(session)
        created = flights.create(make_flight())

        assert flights.get_by_id(created.id).price_base == Decimal("350000.00")

    def test_details_include_status(self, session, make_flight):
        flights = FlightRepository(session)
        created = flights.create(make_flight())

        details = flights.get_details_by_id(created.id)
        assert isinstance(details, FlightDetailsModel)
        assert details.status_name == "SCHEDULED"
        assert details.to_flight() == created
        assert [flight.id for flight in flights.get_all_details()] == [created.id]

    def test_details_missing(self, session):
        with pytest.raises(NotFoundError):
            FlightRepository(session).get_details_by_id(404)

    def test_update_status(self, session, make_flight):
        flights = FlightRepository(session)
        created = flights.create(make_flight())

        delayed = created.model_copy(update={"status_id": int(FlightStatusCode.DELAYED)})
        assert flights.update(created.id, delayed) is True
        assert flights.get_details_by_id(created.id).status_name == "DELAYED"


class TestReservationRepository:

    @pytest.fixture
    def flight(self, session, make_flight):
        return FlightRepository(session).create(make_flight())

    def test_reads_are_joined(self, session, route, flight):
        reservations = ReservationRepository(session)
        created = reservations.create(ReservationModel(
            user_id=route.user.id,
            flight_id=flight.id,
            status_id=int(ReservationStatusCode.PENDING),
            reserved_at=datetime(2025, 3, 1, 12, 0),
        ))

        stored = reservations.get_by_id(created.id)
        assert isinstance(stored, ReservationDetailsModel)
        assert stored.status_name == "PENDING"
        assert stored.status_description == "Reservation is pending confirmation"
        assert stored.to_reservation() == created

    def test_lookups(self, session, route, flight):
        reservations = ReservationRepository(session)
        created = reservations.create(ReservationModel(
            user_id=route.user.id, flight_id=flight.id, status_id=int(ReservationStatusCode.CONFIRMED),
        ))

        assert [r.id for r in reservations.get_by_user_id(route.user.id)] == [created.id]
        assert [r.id for r in reservations.get_by_flight_id(flight.id)] == [created.id]
        assert reservations.get_by_user_id(404) == []


class TestSeatRepository:

    def test_round_trip(self, session, route):
        seat = SeatRepository(session).get_by_id(route.seats["1A"].id)

        assert seat.seat_class is SeatClass.ECONOMY
        assert seat.is_window is True
        assert seat.is_available

    def test_get_by_airplane(self, session, route):
        seats = SeatRepository(session).get_by_airplane_id(route.airplane.id)
        assert [seat.seat_number for seat in seats] == ["1A", "1B", "1C"]

    def test_seat_leaves_availability_once_reserved(self, session, route, make_flight):
        flight = FlightRepository(session).create(make_flight())
        reservation = ReservationRepository(session).create(ReservationModel(
            user_id=route.user.id, flight_id=flight.id, status_id=int(ReservationStatusCode.CONFIRMED),
        ))
        seats = SeatRepository(session)
        seat_1a = route.seats["1A"]

        assert seat_1a.id in [seat.id for seat in seats.get_available_seats_by_airplane_id(route.airplane.id)]

        assert seats.update(seat_1a.id, seat_1a.model_copy(update={"reservation_id": reservation.id}))

        available = seats.get_available_seats_by_airplane_id(route.airplane.id)
        assert [seat.seat_number for seat in available] == ["1B", "1C"]
        assert [seat.id for seat in seats.get_by_reservation_id(reservation.id)] == [seat_1a.id]

    def test_assign_and_release(self, session, route, make_flight):
        flight = FlightRepository(session).create(make_flight())
        reservation = ReservationRepository(session).create(ReservationModel(
            user_id=route.user.id, flight_id=flight.id, status_id=int(ReservationStatusCode.CONFIRMED),
        ))
        seats = SeatRepository(session)
        seat_id = route.seats["1B"].id

        assert seats.assign_reservation(seat_id, reservation.id) is True
        assert seats.assign_reservation(seat_id, reservation.id) is False
        assert seats.get_by_id(seat_id).reservation_id == reservation.id

        assert seats.release_by_reservation_id(reservation.id) == 1
        assert seats.get_by_id(seat_id).is_available

    def test_assign_rejects_seat_of_other_airplane(self, session, route, make_flight):
        flight = FlightRepository(session).create(make_flight())
        reservation = ReservationRepository(session).create(ReservationModel(
            user_id=route.user.id, flight_id=flight.id, status_id=int(ReservationStatusCode.CONFIRMED),
        ))
        seats = SeatRepository(session)

        assert seats.assign_reservation(route.foreign_seat.id, reservation.id) is False
        assert seats.get_by_id(route.foreign_seat.id).is_available
        assert seats.get_by_reservation_id(reservation.id) == []

    def test_assign_to_missing_reservation(self, session, route):
        assert SeatRepository(session).assign_reservation(route.seats["1A"].id, 404) is False

    def test_create_with_class(self, session, route):
        seats = SeatRepository(session)
        created = seats.create(SeatModel(
            airplane_id=route.airplane.id, seat_number="2A", seat_class=SeatClass.FIRST, is_window=True,
        ))
        assert seats.get_by_id(created.id).seat_class is SeatClass.FIRST

    def test_unknown_seat_class_fails_decoding(self, session):
        stored = SimpleNamespace(
            id=1, airplane_id=1, reservation_id=None, seat_number="1A", seat_class="premium", is_window=None,
        )
        with pytest.raises(DecodingError):
            SeatRepository(session)._to_record((stored,))


def _new_city(session, route):
    return CityModel(name="Cartagena", country="Colombia", code="CTG")


def _new_airplane(session, route):
    return AirplaneModel(airline="Wingo", model="B737-800", code="HK-5216", capacity=186, year=2019)


def _new_flight_status(session, route):
    return FlightStatusModel(id=40, name="DIVERTED", description="Flight diverted to another airport")


def _new_reservation_status(session, route):
    return ReservationStatusModel(id=41, name="WAITLIST", description="Waiting for a free seat")


def _new_user(session, route):
    return UserModel(
        name="Camila",
        last_name="Ospina",
        email="camila@example.com",
        password="$2b$12$abcdefghijklmnopqrstuv",
        is_super_user=True,
        created_at=datetime(2024, 11, 2, 16, 20, 5, 123456),
    )


def _new_flight(session, route):
    return FlightModel(
        airplane_id=route.airplane.id,
        status_id=int(FlightStatusCode.BOARDING),
        origin_city_id=route.medellin.id,
        destination_city_id=route.bogota.id,
        code="AV9301",
        departure_time=datetime(2025, 5, 2, 6, 0),
        arrival_time=datetime(2025, 5, 2, 7, 5),
        price_base=Decimal("289900.50"),
    )


def _new_reservation(session, route):
    flight = FlightRepository(session).create(_new_flight(session, route))
    return ReservationModel(
        user_id=route.user.id,
        flight_id=flight.id,
        status_id=int(ReservationStatusCode.PENDING),
        reserved_at=datetime(2025, 4, 20, 18, 45, 12, 345678),
    )


def _new_seat(session, route):
    return SeatModel(
        airplane_id=route.other_airplane.id, seat_number="3F", seat_class=SeatClass.BUSINESS, is_window=True,
    )


ENTITY_CASES = [
    pytest.param(
        CityRepository, _new_city,
        {"name": "Barranquilla", "code": "BAQ"},
        id="city",
    ),
    pytest.param(
        AirplaneRepository, _new_airplane,
        {"model": "B737 MAX 8", "capacity": 178, "year": None},
        id="airplane",
    ),
    pytest.param(
        FlightStatusRepository, _new_flight_status,
        {"name": "RETURNED", "description": None},
        id="flight-status",
    ),
    pytest.param(
        ReservationStatusRepository, _new_reservation_status,
        {"name": "ON_HOLD", "description": "Held for payment"},
        id="reservation-status",
    ),
    pytest.param(
        UserRepository, _new_user,
        {"last_name": "Ospina Ruiz", "email": "camila.ospina@example.com", "is_super_user": False},
        id="user",
    ),
    pytest.param(
        FlightRepository, _new_flight,
        {"status_id": int(FlightStatusCode.DELAYED), "arrival_time": datetime(2025, 5, 2, 8, 40),
         "price_base": Decimal("310000.00")},
        id="flight",
    ),
    pytest.param(
        ReservationRepository, _new_reservation,
        {"status_id": int(ReservationStatusCode.CONFIRMED), "reserved_at": datetime(2025, 4, 21, 9, 0)},
        id="reservation",
    ),
    pytest.param(
        SeatRepository, _new_seat,
        {"seat_number": "3E", "seat_class": SeatClass.FIRST, "is_window": None},
        id="seat",
    ),
]


def _stored_shape(record):
    # reservation reads carry the joined status fields
    if isinstance(record, ReservationDetailsModel):
        return record.to_reservation()
    return record


@pytest.mark.parametrize("repository_class,build,changes", ENTITY_CASES)
class TestEveryRepository:
    """Create, update and delete keep every mapped column for every entity."""

    def test_create_then_get_by_id(self, session, route, repository_class, build, changes):
        repository = repository_class(session)
        record = build(session, route)

        created = repository.create(record)

        assert created.id is not None
        assert created == record.model_copy(update={"id": created.id})
        assert _stored_shape(repository.get_by_id(created.id)) == created

    def test_update_then_get_by_id(self, session, route, repository_class, build, changes):
        repository = repository_class(session)
        created = repository.create(build(session, route))
        changed = created.model_copy(update=changes)

        assert repository.update(created.id, changed) is True
        assert _stored_shape(repository.get_by_id(created.id)) == changed

    def test_delete_then_not_found(self, session, route, repository_class, build, changes):
        repository = repository_class(session)
        created = repository.create(build(session, route))

        assert repository.delete(created.id) is True

        assert repository.find_by_id(created.id) is None
        with pytest.raises(NotFoundError):
            repository.get_by_id(created.id)
        assert created.id not in [record.id for record in repository.get_all()]
