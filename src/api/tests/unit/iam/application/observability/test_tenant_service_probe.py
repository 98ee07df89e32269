"""Unit tests for the tenant service domain probe."""

from unittest.mock import Mock

from iam.application.observability import DefaultTenantServiceProbe


class TestDefaultTenantServiceProbe:
    """Tests for DefaultTenantServiceProbe."""

    def test_creates_with_default_logger(self):
        """Test that probe can be created without providing a logger."""
        probe = DefaultTenantServiceProbe()
        assert probe._logger is not None

    def test_tenant_declared_logs_info(self):
        """tenant_declared is logged at info level."""
        mock_logger = Mock()
        probe = DefaultTenantServiceProbe(logger=mock_logger)

        probe.tenant_declared(tenant_id=1, code="acme")

        mock_logger.info.assert_called_once_with(
            "tenant_declared", tenant_id=1, code="acme"
        )

    def test_tenant_not_found_logs_debug(self):
        """tenant_not_found is logged at debug level."""
        mock_logger = Mock()
        probe = DefaultTenantServiceProbe(logger=mock_logger)

        probe.tenant_not_found(code="acme")

        mock_logger.debug.assert_called_once_with("tenant_not_found", code="acme")

    def test_duplicate_tenant_code_logs_warning(self):
        """duplicate_tenant_code is logged as a warning."""
        mock_logger = Mock()
        probe = DefaultTenantServiceProbe(logger=mock_logger)

        probe.duplicate_tenant_code(code="acme")

        mock_logger.warning.assert_called_once_with(
            "duplicate_tenant_code", code="acme"
        )

    def test_tenants_listed_reports_continuation(self):
        """tenants_listed carries the page size and continuation flag."""
        mock_logger = Mock()
        probe = DefaultTenantServiceProbe(logger=mock_logger)

        probe.tenants_listed(count=2, has_next_page=True)

        mock_logger.debug.assert_called_once_with(
            "tenants_listed", count=2, has_next_page=True
        )

    def test_with_context_binds_caller(self):
        """Bound context fields are added to every event."""
        from shared_kernel.observability_context import ObservationContext

        mock_logger = Mock()
        probe = DefaultTenantServiceProbe(logger=mock_logger).with_context(
            ObservationContext(caller_id="alice", caller_type="USER")
        )

        probe.tenant_retrieved(tenant_id=3)

        mock_logger.debug.assert_called_once_with(
            "tenant_retrieved", tenant_id=3, caller_id="alice", caller_type="USER"
        )
