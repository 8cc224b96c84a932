"""
Database configuration and connection management for the reservation data layer.

This module provides RDBMS-agnostic database configuration with support for:
- SQLite (default, also used by the test suite)
- MySQL/MariaDB (production deployments)
- PostgreSQL

Connection settings come from the environment (see ``utils.config``). Every
unit of work gets its own session from the engine pool, and
``get_session_context`` commits on success and rolls back on any failure.
"""

import logging
from typing import Optional, Dict, Any
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from sqlalchemy.exc import SQLAlchemyError
from contextlib import contextmanager

from ..utils.config import get_config
from .models import create_all_tables
from .reference_data import load_reference_data

logger = logging.getLogger(__name__)


class DatabaseConfig:
    """
    Database configuration manager supporting multiple RDBMS backends.

    The engine is created lazily on first use. Server backends use the
    default SQLAlchemy queue pool; in-memory SQLite uses a single shared
    connection so every session sees the same database.
    """

    def __init__(self, database_url: Optional[str] = None, echo: Optional[bool] = None):
        """
        Initialize database configuration.

        Args:
            database_url: Optional database URL override
            echo: Enable SQL statement logging; defaults to SQL_ECHO
        """
        settings = get_config()
        self.database_url = database_url or settings.build_database_url()
        self.echo = settings.sql_echo if echo is None else echo
        self.engine: Optional[Engine] = None
        self.SessionLocal: Optional[sessionmaker] = None
        self._is_initialized = False

        self.db_type = self._detect_database_type()
        self.engine_kwargs = self._get_engine_kwargs()

        logger.info(f"Database configuration initialized for {self.db_type}")

    def _detect_database_type(self) -> str:
        """Detect database type from URL."""
        if self.database_url.startswith('sqlite'):
            return 'sqlite'
        elif self.database_url.startswith(('mysql', 'mariadb')):
            return 'mysql'
        elif self.database_url.startswith('postgresql'):
            return 'postgresql'
        else:
            return 'unknown'

    def _is_memory_database(self) -> bool:
        return self.db_type == 'sqlite' and (
            ':memory:' in self.database_url or self.database_url.rstrip('/') in ('sqlite:', 'sqlite+pysqlite:')
        )

    def _get_engine_kwargs(self) -> Dict[str, Any]:
        """
        Get database-specific engine configuration.

        Returns:
            Dictionary of engine configuration parameters
        """
        kwargs: Dict[str, Any] = {
            'echo': self.echo,
            'pool_pre_ping': True,  # Verify connections before use
        }

        if self.db_type == 'sqlite':
            kwargs['connect_args'] = {'check_same_thread': False}
            if self._is_memory_database():
                kwargs['poolclass'] = StaticPool

        return kwargs

    def initialize(self) -> None:
        """
        Initialize database engine and session factory.

        Raises:
            SQLAlchemyError: If database connection fails
        """
        if self._is_initialized:
            return

        try:
            self.engine = create_engine(self.database_url, **self.engine_kwargs)
            self._setup_event_listeners()

            # Test connection
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))

            self.SessionLocal = sessionmaker(
                autoflush=False,
                bind=self.engine,
                expire_on_commit=False  # Keep objects accessible after commit
            )

            self._is_initialized = True
            logger.info(f"Database engine initialized successfully ({self.db_type})")

        except SQLAlchemyError as e:
            logger.error(f"Failed to initialize database: {e}")
            if self.engine is not None:
                self.engine.dispose()
                self.engine = None
            raise

    def _setup_event_listeners(self) -> None:
        """Set up SQLAlchemy event listeners for connection management."""

        @event.listens_for(self.engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            """Enforce foreign keys on SQLite connections."""
            if self.db_type == 'sqlite':
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

    def create_tables(self) -> None:
        """
        Create all database tables if they don't exist.

        Raises:
            SQLAlchemyError: If table creation fails
        """
        if not self._is_initialized:
            self.initialize()

        try:
            create_all_tables(self.engine)
            logger.info("Database tables created successfully")
        except SQLAlchemyError as e:
            logger.error(f"Failed to create tables: {e}")
            raise

    def load_reference_data(self) -> Dict[str, int]:
        """Load the status lookup dataset in its own transaction."""
        with self.get_session_context() as session:
            return load_reference_data(session)

    def get_session(self) -> Session:
        """
        Get a new database session from the pool.

        The caller owns the session and must commit and close it.

        Returns:
            SQLAlchemy session instance
        """
        if not self._is_initialized:
            self.initialize()

        return self.SessionLocal()

    @contextmanager
    def get_session_context(self):
        """
        Get a database session wrapped in a transaction.

        Usage:
            with db_config.get_session_context() as session:
                CityRepository(session).create(city)

        Yields:
            SQLAlchemy session; committed when the block exits normally,
            rolled back when it raises
        """
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"Database session error: {e}")
            raise
        finally:
            session.close()

    def test_connection(self) -> bool:
        """
        Test database connectivity.

        Returns:
            True if connection successful, False otherwise
        """
        try:
            if not self._is_initialized:
                self.initialize()

            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database connection test failed: {e}")
            return False

    def get_connection_info(self) -> Dict[str, Any]:
        """
        Get database connection information for monitoring.

        Returns:
            Dictionary with connection details; the password is masked
        """
        info = {
            'database_type': self.db_type,
            'database_url': make_url(self.database_url).render_as_string(hide_password=True),
            'is_initialized': self._is_initialized,
            'echo_enabled': self.echo,
        }

        if self.engine and hasattr(self.engine.pool, 'size'):
            info.update({
                'pool_size': self.engine.pool.size(),
                'checked_in': self.engine.pool.checkedin(),
                'checked_out': self.engine.pool.checkedout(),
            })

        return info

    def close(self) -> None:
        """Close database connections and clean up resources."""
        if self.engine:
            self.engine.dispose()
            logger.info("Database connections closed")
        self.engine = None
        self.SessionLocal = None
        self._is_initialized = False


# Global database configuration instance
_db_config: Optional[DatabaseConfig] = None


def get_database_config(database_url: Optional[str] = None, echo: Optional[bool] = None) -> DatabaseConfig:
    """
    Get or create the global database configuration instance.

    Args:
        database_url: Optional database URL override
        echo: Enable SQL statement logging

    Returns:
        DatabaseConfig instance
    """
    global _db_config

    if _db_config is None:
        _db_config = DatabaseConfig(database_url=database_url, echo=echo)

    return _db_config


def initialize_database(
    database_url: Optional[str] = None,
    echo: Optional[bool] = None,
    create_tables: bool = True,
) -> DatabaseConfig:
    """
    Initialize the database: connect, create tables and load reference data.

    Args:
        database_url: Optional database URL override
        echo: Enable SQL statement logging
        create_tables: Whether to create tables and load the status lookups

    Returns:
        Initialized DatabaseConfig instance
    """
    db_config = get_database_config(database_url=database_url, echo=echo)
    db_config.initialize()

    if create_tables:
        db_config.create_tables()
        db_config.load_reference_data()

    return db_config


def reset_database_config() -> None:
    """Close and forget the global database configuration."""
    global _db_config
    if _db_config is not None:
        _db_config.close()
    _db_config = None


@contextmanager
def get_db_session_context():
    """Get a transactional session using the global configuration."""
    with get_database_config().get_session_context() as session:
        yield session


__all__ = [
    'DatabaseConfig',
    'get_database_config',
    'initialize_database',
    'reset_database_config',
    'get_db_session_context',
]
