"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.

Database credentials are declared per role, using ``__`` as the nested
delimiter, e.g. ``TOKEND_DB_ROLES__APPLICATION__USERNAME=tokend_app``.
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    """Deployment environment."""

    LOCAL = "local"
    TEST = "test"
    PRODUCTION = "production"


class DatabaseRole(StrEnum):
    """Database role a connection pool authenticates as.

    ROOT administers the server (database creation), MIGRATION owns the
    schema and APPLICATION runs the service queries under row level
    security.
    """

    ROOT = "root"
    APPLICATION = "application"
    MIGRATION = "migration"

    @classmethod
    def parse(cls, value: str) -> DatabaseRole:
        """Parse a role name, case-insensitively."""
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"invalid value for DatabaseRole: {value}") from None


class DatabaseCredentials(BaseModel):
    """Credentials of a single database role.

    Attributes:
        username: Login role
        password: Login password
        on_behalf_of: Role every connection of this login assumes, e.g. the
            schema owner granted to the migration login
    """

    username: str
    password: SecretStr = SecretStr("")
    on_behalf_of: str | None = None


class MissingRoleCredentialsError(KeyError):
    """Raised when no credentials are configured for a database role."""

    def __init__(self, role: DatabaseRole):
        super().__init__(f"Missing role credentials {role}")
        self.role = role


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        TOKEND_DB_HOST: Database host (default: localhost)
        TOKEND_DB_PORT: Database port (default: 5432)
        TOKEND_DB_DATABASE: Database name (default: tokend)
        TOKEND_DB_REQUIRE_SSL: Refuse non-TLS connections (default: false)
        TOKEND_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        TOKEND_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
        TOKEND_DB_ROLES__<ROLE>__USERNAME / __PASSWORD / __ON_BEHALF_OF:
            Credentials of a role (root, application, migration)
    """

    model_config = SettingsConfigDict(
        env_prefix="TOKEND_DB_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="tokend", description="Database name")
    require_ssl: bool = Field(
        default=False,
        description="Require TLS (otherwise TLS is preferred when available)",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )
    roles: dict[DatabaseRole, DatabaseCredentials] = Field(
        default_factory=lambda: {
            DatabaseRole.APPLICATION: DatabaseCredentials(username="tokend")
        },
        description="Credentials per database role",
    )

    @field_validator("roles", mode="before")
    @classmethod
    def parse_role_names(cls, value: Any) -> Any:
        """Accept role names in any case."""
        if isinstance(value, dict):
            return {
                DatabaseRole.parse(str(key)): credentials
                for key, credentials in value.items()
            }
        return value

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    def credentials(self, role: DatabaseRole) -> DatabaseCredentials:
        """Return the credentials of a role.

        Raises:
            MissingRoleCredentialsError: If the role is not configured
        """
        try:
            return self.roles[role]
        except KeyError:
            raise MissingRoleCredentialsError(role) from None

    def connection_string(self, role: DatabaseRole) -> str:
        """Generate a connection string (without password for logging)."""
        username = self.credentials(role).username
        return f"postgresql://{username}@{self.host}:{self.port}/{self.database}"


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections.

    Environment variables:
        TOKEND_APP_NAME: Application name (default: tokend)
        TOKEND_ENVIRONMENT: local, test or production (default: local)
        TOKEND_DEBUG: Debug mode (default: false)
        TOKEND_LOG_LEVEL: Minimum log level (default: INFO)
    """

    model_config = SettingsConfigDict(
        env_prefix="TOKEND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="tokend", description="Application name")
    environment: Environment = Field(
        default=Environment.LOCAL, description="Deployment environment"
    )
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Minimum log level")

    @field_validator("environment", mode="before")
    @classmethod
    def parse_environment(cls, value: Any) -> Any:
        """Accept environment names in any case."""
        if isinstance(value, str):
            return value.lower()
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate the log level is a standard level name."""
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()


def check_settings(settings: Settings, database: DatabaseSettings) -> None:
    """Reject configurations that are unsafe for the environment.

    Raises:
        ValueError: If root credentials are configured in production
    """
    if (
        settings.environment is Environment.PRODUCTION
        and DatabaseRole.ROOT in database.roles
    ):
        raise ValueError("Root role should not appear in production environment")


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once. The settings are
    checked against the current environment before being returned.
    """
    database = DatabaseSettings()
    check_settings(get_settings(), database)
    return database
