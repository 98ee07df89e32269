"""Unit tests for infrastructure settings."""

import pytest
from pydantic import SecretStr, ValidationError

from infrastructure.settings import (
    DatabaseCredentials,
    DatabaseRole,
    DatabaseSettings,
    Environment,
    MissingRoleCredentialsError,
    Settings,
    check_settings,
)


class TestDatabaseSettingsPoolConfiguration:
    """Tests for connection pool configuration."""

    def test_default_pool_settings(self):
        """Should have sensible pool defaults."""
        settings = DatabaseSettings()
        assert settings.pool_min_connections >= 1
        assert settings.pool_max_connections >= settings.pool_min_connections
        assert settings.pool_max_connections <= 20

    def test_pool_settings_from_fields(self):
        """Should accept pool settings via constructor."""
        settings = DatabaseSettings(
            pool_min_connections=5,
            pool_max_connections=15,
        )
        assert settings.pool_min_connections == 5
        assert settings.pool_max_connections == 15

    def test_pool_max_must_be_greater_than_or_equal_to_min(self):
        """Should validate max >= min."""
        with pytest.raises(ValidationError) as exc_info:
            DatabaseSettings(pool_min_connections=10, pool_max_connections=5)

        error_str = str(exc_info.value)
        assert "pool_max_connections" in error_str or "greater" in error_str.lower()

    def test_pool_max_equal_to_min_is_valid(self):
        """Should allow max == min."""
        settings = DatabaseSettings(pool_min_connections=5, pool_max_connections=5)
        assert settings.pool_min_connections == 5
        assert settings.pool_max_connections == 5

    def test_pool_min_must_be_positive(self):
        """Pool min connections must be >= 1."""
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_min_connections=0)

    def test_pool_max_respects_upper_limit(self):
        """Pool max should not exceed reasonable limit."""
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_max_connections=101)


class TestDatabaseRoles:
    """Tests for per-role credentials."""

    def test_roles_from_environment(self, monkeypatch):
        """Nested environment variables declare role credentials."""
        monkeypatch.setenv("TOKEND_DB_ROLES__APPLICATION__USERNAME", "tokend_app")
        monkeypatch.setenv("TOKEND_DB_ROLES__APPLICATION__PASSWORD", "s3cret")
        monkeypatch.setenv("TOKEND_DB_ROLES__MIGRATION__USERNAME", "tokend_mig")
        monkeypatch.setenv("TOKEND_DB_ROLES__MIGRATION__ON_BEHALF_OF", "tokend_owner")

        settings = DatabaseSettings()

        application = settings.credentials(DatabaseRole.APPLICATION)
        assert application.username == "tokend_app"
        assert application.password.get_secret_value() == "s3cret"
        migration = settings.credentials(DatabaseRole.MIGRATION)
        assert migration.on_behalf_of == "tokend_owner"

    def test_role_names_are_case_insensitive(self):
        """Role keys are parsed regardless of case."""
        settings = DatabaseSettings(roles={"Migration": {"username": "mig"}})

        assert DatabaseRole.MIGRATION in settings.roles

    def test_unknown_role_is_rejected(self):
        """Unknown role names fail validation."""
        with pytest.raises(ValidationError):
            DatabaseSettings(roles={"superuser": {"username": "x"}})

    def test_missing_role_credentials(self):
        """Asking for an unconfigured role raises."""
        settings = DatabaseSettings(
            roles={DatabaseRole.APPLICATION: DatabaseCredentials(username="app")}
        )

        with pytest.raises(MissingRoleCredentialsError) as exc_info:
            settings.credentials(DatabaseRole.ROOT)

        assert exc_info.value.role is DatabaseRole.ROOT

    def test_password_is_hidden(self):
        """Passwords are never rendered in clear."""
        credentials = DatabaseCredentials(
            username="app", password=SecretStr("s3cret")
        )

        assert "s3cret" not in repr(credentials)

    def test_connection_string_has_no_password(self, mock_db_settings):
        """The loggable connection string omits the password."""
        connection_string = mock_db_settings.connection_string(
            DatabaseRole.APPLICATION
        )

        assert connection_string == "postgresql://testuser@testhost:5432/testdb"


class TestSettings:
    """Tests for application settings."""

    def test_defaults(self):
        """Defaults target local development."""
        settings = Settings()

        assert settings.app_name == "tokend"
        assert settings.environment is Environment.LOCAL
        assert settings.log_level == "INFO"

    def test_environment_from_env(self, monkeypatch):
        """The environment is read case-insensitively."""
        monkeypatch.setenv("TOKEND_ENVIRONMENT", "Production")

        assert Settings().environment is Environment.PRODUCTION

    def test_log_level_is_normalized(self):
        """Log levels are upper-cased."""
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self):
        """Unknown levels fail validation."""
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")


class TestCheckSettings:
    """Tests for environment safety checks."""

    def root_settings(self) -> DatabaseSettings:
        return DatabaseSettings(
            roles={
                DatabaseRole.ROOT: DatabaseCredentials(username="postgres"),
                DatabaseRole.APPLICATION: DatabaseCredentials(username="app"),
            }
        )

    def test_root_role_refused_in_production(self):
        """Root credentials must not be configured in production."""
        with pytest.raises(ValueError):
            check_settings(
                Settings(environment=Environment.PRODUCTION), self.root_settings()
            )

    @pytest.mark.parametrize("environment", [Environment.LOCAL, Environment.TEST])
    def test_root_role_allowed_outside_production(self, environment):
        """Root credentials are fine for local and test environments."""
        check_settings(Settings(environment=environment), self.root_settings())

    def test_production_without_root_is_valid(self, mock_db_settings):
        """Production with application credentials only passes."""
        check_settings(Settings(environment=Environment.PRODUCTION), mock_db_settings)
