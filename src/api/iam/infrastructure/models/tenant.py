"""SQLAlchemy ORM model for the tenants table."""

from sqlalchemy import BigInteger, Identity, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin

TENANT_CODE_CONSTRAINT = "tenants_code_key"


class TenantModel(Base, TimestampMixin):
    """ORM model for tenants table.

    Note: Tenant codes are globally unique across the entire system. Row
    level security policies on this table read the session variables set
    by the contextualized session.
    """

    __tablename__ = "tenants"
    __table_args__ = (UniqueConstraint("code", name=TENANT_CODE_CONSTRAINT),)

    id: Mapped[int] = mapped_column(BigInteger, Identity(), primary_key=True)
    code: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<TenantModel(id={self.id}, code={self.code})>"
