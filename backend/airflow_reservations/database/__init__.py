"""
Database package for the reservation data layer.

This package provides the SQLAlchemy schema, the status reference dataset and
database configuration with transactional session scopes.
"""

from .models import (
    Base,
    User,
    Airplane,
    City,
    FlightStatus,
    ReservationStatus,
    Flight,
    Reservation,
    Seat,
    create_all_tables,
    drop_all_tables
)

from .reference_data import (
    REFERENCE_DATA_VERSION,
    FLIGHT_STATUSES,
    RESERVATION_STATUSES,
    load_reference_data,
)

from .config import (
    DatabaseConfig,
    get_database_config,
    initialize_database,
    reset_database_config,
    get_db_session_context
)

__all__ = [
    # Models
    'Base',
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

    # Reference data
    'REFERENCE_DATA_VERSION',
    'FLIGHT_STATUSES',
    'RESERVATION_STATUSES',
    'load_reference_data',

    # Configuration
    'DatabaseConfig',
    'get_database_config',
    'initialize_database',
    'reset_database_config',
    'get_db_session_context',
]
