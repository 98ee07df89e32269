"""Architecture tests using pytest-archon.

These tests enforce DDD architectural boundaries between layers
within the bounded contexts and the shared kernel.
"""

import pytest
from pytest_archon import archrule

CONTEXTS = ["iam", "tokenization"]


class TestDomainLayerBoundaries:
    """Tests that domain layers have no forbidden dependencies."""

    @pytest.mark.parametrize("context", CONTEXTS)
    def test_domain_does_not_import_infrastructure(self, context):
        """Domain layer should not depend on infrastructure.

        The domain layer contains pure business logic and should not
        know about database sessions, SQL, or other infrastructure concerns.
        """
        (
            archrule("domain_no_infrastructure")
            .match(f"{context}.domain*")
            .should_not_import(f"{context}.infrastructure*", "infrastructure*")
            .check(context)
        )

    @pytest.mark.parametrize("context", CONTEXTS)
    def test_domain_does_not_import_application(self, context):
        """Domain layer should not depend on application layer."""
        (
            archrule("domain_no_application")
            .match(f"{context}.domain*")
            .should_not_import(f"{context}.application*")
            .check(context)
        )

    @pytest.mark.parametrize("context", CONTEXTS)
    def test_domain_does_not_import_sqlalchemy(self, context):
        """Domain objects should be persistence-agnostic."""
        (
            archrule("domain_no_sqlalchemy")
            .match(f"{context}.domain*")
            .should_not_import("sqlalchemy*", "asyncpg*")
            .check(context)
        )


class TestPortsLayerBoundaries:
    """Tests that ports layers have no forbidden dependencies."""

    @pytest.mark.parametrize("context", CONTEXTS)
    def test_ports_does_not_import_infrastructure(self, context):
        """Ports should not depend on infrastructure implementations."""
        (
            archrule("ports_no_infrastructure")
            .match(f"{context}.ports*")
            .should_not_import(f"{context}.infrastructure*", "infrastructure*")
            .check(context)
        )

    @pytest.mark.parametrize("context", CONTEXTS)
    def test_ports_does_not_import_application(self, context):
        """Ports are used by the application layer, not the reverse."""
        (
            archrule("ports_no_application")
            .match(f"{context}.ports*")
            .should_not_import(f"{context}.application*")
            .check(context)
        )


class TestApplicationLayerBoundaries:
    """Tests that application services depend on ports only."""

    @pytest.mark.parametrize("context", CONTEXTS)
    def test_application_does_not_import_database(self, context):
        """Application services reach storage through ports."""
        (
            archrule("application_no_database")
            .match(f"{context}.application*")
            .should_not_import("sqlalchemy*", "infrastructure.database*")
            .check(context)
        )


class TestBoundedContextIsolation:
    """Tests that bounded contexts do not reach into each other."""

    def test_tokenization_does_not_import_iam(self):
        """Tokenization only shares the kernel with IAM."""
        (
            archrule("tokenization_no_iam")
            .match("tokenization*")
            .should_not_import("iam*")
            .check("tokenization")
        )

    def test_iam_does_not_import_tokenization(self):
        """IAM only shares the kernel with tokenization."""
        (
            archrule("iam_no_tokenization")
            .match("iam*")
            .should_not_import("tokenization*")
            .check("iam")
        )

    def test_shared_kernel_does_not_import_contexts(self):
        """The shared kernel is a leaf shared by every context."""
        (
            archrule("shared_kernel_is_leaf")
            .match("shared_kernel*")
            .should_not_import("iam*", "tokenization*", "infrastructure*")
            .check("shared_kernel")
        )
