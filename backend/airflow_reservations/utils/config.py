"""
Environment configuration loader with validation for the reservation data layer.
"""

import logging
import os
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

SUPPORTED_DB_TYPES = ("sqlite", "mysql", "mariadb", "postgresql")
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_PORTS = {
    "mysql": 3306,
    "mariadb": 3306,
    "postgresql": 5432,
}

DEFAULT_USERS = {
    "mysql": "root",
    "mariadb": "root",
    "postgresql": "postgres",
}


class ReservationsConfig(BaseModel):
    """Configuration model for the reservation data layer with validation."""

    # Full URL override
    database_url: Optional[str] = Field(
        default=None, description="Complete SQLAlchemy database URL"
    )

    # Connection settings
    db_type: str = Field(default="sqlite", description="Database backend type")
    db_host: str = Field(default="localhost", description="Database server host")
    db_port: Optional[int] = Field(
        default=None, ge=1, le=65535, description="Database server port"
    )
    db_name: str = Field(default="airflow", description="Database name")
    db_user: Optional[str] = Field(default=None, description="Database user")
    db_password: str = Field(default="", description="Database password")

    # Diagnostics
    sql_echo: bool = Field(default=False, description="Echo SQL statements")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("db_type")
    @classmethod
    def validate_db_type(cls, v: str) -> str:
        """Validate the database type is one we can build a URL for."""
        v = v.lower()
        if v not in SUPPORTED_DB_TYPES:
            raise ValueError(f"Database type must be one of: {list(SUPPORTED_DB_TYPES)}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {VALID_LOG_LEVELS}")
        return v.upper()

    @property
    def port(self) -> Optional[int]:
        """Configured port, or the backend default."""
        return self.db_port or DEFAULT_PORTS.get(self.db_type)

    @property
    def user(self) -> Optional[str]:
        """Configured user, or the backend default."""
        return self.db_user or DEFAULT_USERS.get(self.db_type)

    def build_database_url(self) -> str:
        """
        Build the SQLAlchemy URL for the configured backend.

        DATABASE_URL wins when set. SQLite uses a file named after DB_NAME
        in the working directory; server databases use host, port, name,
        user and password.

        Returns:
            Complete database URL string
        """
        if self.database_url:
            return self.database_url

        if self.db_type == "sqlite":
            name = self.db_name if self.db_name.endswith(".db") else f"{self.db_name}.db"
            return f"sqlite:///{name}"

        if self.db_type in ("mysql", "mariadb"):
            return (
                f"mysql+pymysql://{self.user}:{self.db_password}"
                f"@{self.db_host}:{self.port}/{self.db_name}?charset=utf8mb4"
            )

        return (
            f"postgresql+psycopg2://{self.user}:{self.db_password}"
            f"@{self.db_host}:{self.port}/{self.db_name}"
        )


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes", "on")


def load_config(env_file: Optional[str] = None) -> ReservationsConfig:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Optional path to .env file. If None, looks for .env in current directory.

    Returns:
        ReservationsConfig: Validated configuration object

    Raises:
        ValueError: If configuration is invalid
    """
    if env_file is None:
        env_file = ".env"

    if os.path.exists(env_file):
        load_dotenv(env_file)

    config_data: Dict[str, Any] = {
        "database_url": os.getenv("DATABASE_URL") or None,
        "db_type": os.getenv("DB_TYPE", "sqlite"),
        "db_host": os.getenv("DB_HOST", "localhost"),
        "db_port": os.getenv("DB_PORT") or None,
        "db_name": os.getenv("DB_NAME", "airflow"),
        "db_user": os.getenv("DB_USER") or None,
        "db_password": os.getenv("DB_PASSWORD", ""),
        "sql_echo": _env_flag("SQL_ECHO"),
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
    }

    try:
        return ReservationsConfig(**config_data)
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}")


def setup_logging(config: ReservationsConfig) -> None:
    """Configure root logging from the loaded configuration."""
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug(f"Logging configured at {config.log_level}")


# Global configuration instance
_config: Optional[ReservationsConfig] = None


def get_config() -> ReservationsConfig:
    """
    Get the global configuration instance, loading it if necessary.

    Returns:
        ReservationsConfig: The global configuration object
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next call reloads it."""
    global _config
    _config = None
