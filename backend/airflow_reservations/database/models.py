"""
SQLAlchemy database models for the reservation data layer.

Column names follow the persisted layout of the airflow schema (``id_PK``,
``airplane_FK``, ``isSuperUser`` ...); Python attribute names are snake_case.

This module defines the tables:
- User: registered users with hashed credentials
- Airplane: airplanes and their capacity; owns its seats
- City: cities served by flights, identified by airport code
- FlightStatus / ReservationStatus: fixed-vocabulary lookup tables
- Flight: scheduled flights between two cities on one airplane
- Reservation: a user's reservation on a flight
- Seat: seats of an airplane, optionally linked to a reservation
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
)
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import declarative_base

# Create the declarative base for all models
Base = declarative_base()

SEAT_CLASSES = ("ECONOMY", "BUSINESS", "FIRST")

# YEAR on MySQL/MariaDB, plain integer elsewhere
YearType = Integer().with_variant(mysql.YEAR(), "mysql", "mariadb")


class User(Base):
    """User account. Email is unique across all users."""
    __tablename__ = 'users'

    id = Column('id_PK', Integer, primary_key=True, autoincrement=True)
    name = Column(String(40), nullable=False)
    last_name = Column(String(40), nullable=False)
    email = Column(String(200), unique=True, nullable=False)
    password = Column(String(100), nullable=False)  # bcrypt hash, 60 chars
    is_super_user = Column('isSuperUser', Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"


class Airplane(Base):
    """Airplane operated by an airline."""
    __tablename__ = 'airplanes'
    __table_args__ = (
        CheckConstraint('capacity > 0', name='ck_airplane_capacity_positive'),
    )

    id = Column('id_PK', Integer, primary_key=True, autoincrement=True)
    airline = Column(String(20), nullable=False)
    model = Column(String(50), nullable=False)
    code = Column(String(10), nullable=False, index=True)
    capacity = Column(Integer, nullable=False)
    year = Column(YearType, nullable=True)

    def __repr__(self):
        return f"<Airplane(id={self.id}, code='{self.code}', model='{self.model}')>"


class City(Base):
    """City referenced by flights as origin or destination."""
    __tablename__ = 'cities'

    id = Column('id_PK', Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    country = Column(String(100), nullable=False)
    code = Column(String(10), nullable=False)

    def __repr__(self):
        return f"<City(id={self.id}, code='{self.code}', name='{self.name}')>"


class FlightStatus(Base):
    """Flight status lookup. Identifiers come from the reference dataset."""
    __tablename__ = 'flight_status'

    id = Column('id_PK', Integer, primary_key=True, autoincrement=False)
    name = Column(String(15), nullable=False)
    description = Column(String(100), nullable=True)

    def __repr__(self):
        return f"<FlightStatus(id={self.id}, name='{self.name}')>"


class ReservationStatus(Base):
    """Reservation status lookup. Identifiers come from the reference dataset."""
    __tablename__ = 'reservations_status'

    id = Column('id_PK', Integer, primary_key=True, autoincrement=False)
    name = Column(String(15), nullable=False)
    description = Column(String(100), nullable=True)

    def __repr__(self):
        return f"<ReservationStatus(id={self.id}, name='{self.name}')>"


class Flight(Base):
    """
    Scheduled flight.

    Flight codes are not unique at the schema level; registration checks them
    in the flight service. Departure must precede arrival on every write.
    """
    __tablename__ = 'flights'
    __table_args__ = (
        CheckConstraint('departure_time < arrival_time', name='ck_flight_departure_before_arrival'),
    )

    id = Column('id_PK', Integer, primary_key=True, autoincrement=True)
    airplane_id = Column('airplane_FK', Integer, ForeignKey('airplanes.id_PK'), nullable=False, index=True)
    status_id = Column('status_FK', Integer, ForeignKey('flight_status.id_PK'), nullable=False)
    origin_city_id = Column('origin_city_FK', Integer, ForeignKey('cities.id_PK'), nullable=False, index=True)
    destination_city_id = Column('destination_city_FK', Integer, ForeignKey('cities.id_PK'), nullable=False, index=True)
    code = Column(String(10), nullable=False, index=True)
    departure_time = Column(DateTime, nullable=False)
    arrival_time = Column(DateTime, nullable=False)
    price_base = Column(Numeric(10, 2), nullable=False)

    def __repr__(self):
        return f"<Flight(id={self.id}, code='{self.code}', from={self.origin_city_id}, to={self.destination_city_id})>"


class Reservation(Base):
    """Reservation of a flight by a user."""
    __tablename__ = 'reservations'

    id = Column('id_PK', Integer, primary_key=True, autoincrement=True)
    user_id = Column('user_FK', Integer, ForeignKey('users.id_PK'), nullable=False, index=True)
    status_id = Column('status_FK', Integer, ForeignKey('reservations_status.id_PK'), nullable=False)
    flight_id = Column('flight_FK', Integer, ForeignKey('flights.id_PK'), nullable=False, index=True)
    reserved_at = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Reservation(id={self.id}, user_id={self.user_id}, flight_id={self.flight_id})>"


class Seat(Base):
    """
    Seat of an airplane.

    ``reservation_id`` is nullable: NULL marks a free seat. The seat's
    lifetime follows its airplane, not its reservation.
    """
    __tablename__ = 'seats'
    __table_args__ = (
        UniqueConstraint('airplane_FK', 'seat_number', name='uq_seat_airplane_number'),
        CheckConstraint(
            'seat_class IN (' + ', '.join(f"'{name}'" for name in SEAT_CLASSES) + ')',
            name='ck_seat_class',
        ),
    )

    id = Column('id_PK', Integer, primary_key=True, autoincrement=True)
    airplane_id = Column('airplane_FK', Integer, ForeignKey('airplanes.id_PK'), nullable=False)
    reservation_id = Column('reservation_FK', Integer, ForeignKey('reservations.id_PK'), nullable=True, index=True)
    seat_number = Column(String(10), nullable=False)
    seat_class = Column(String(10), nullable=False)
    is_window = Column(Boolean, nullable=True)

    def __repr__(self):
        return f"<Seat(id={self.id}, airplane_id={self.airplane_id}, seat='{self.seat_number}')>"


# Availability lookups filter on airplane and a NULL reservation
Index('idx_seat_airplane_reservation', Seat.airplane_id, Seat.reservation_id)


def create_all_tables(engine):
    """
    Create all database tables using the provided SQLAlchemy engine.

    Args:
        engine: SQLAlchemy engine instance
    """
    Base.metadata.create_all(bind=engine)


def drop_all_tables(engine):
    """
    Drop all database tables using the provided SQLAlchemy engine.

    Args:
        engine: SQLAlchemy engine instance
    """
    Base.metadata.drop_all(bind=engine)


__all__ = [
    'Base',
    'SEAT_CLASSES',
    'User',
    'Airplane',
    'City',
    'FlightStatus',
    'ReservationStatus',
    'Flight',
    'Reservation',
    'Seat',
    'create_all_tables',
    'drop_all_tables',
]
