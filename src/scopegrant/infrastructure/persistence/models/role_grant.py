"""SQLAlchemy model for the iam_role_grant table.

Each row attaches one grant string to one role. The grant string is opaque
to the persistence layer.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from scopegrant.infrastructure.persistence.database import Base


class RoleGrantModel(Base):
    """SQLAlchemy model for the iam_role_grant table.

    Attributes:
        public_id: Primary key.
        scope_id: Foreign key to the owning organization or project scope.
        role_id: Foreign key to the role the grant belongs to.
        grant: Opaque grant string.
        name: Optional label.
    """

    __tablename__ = "iam_role_grant"
    __table_args__ = (
        UniqueConstraint("role_id", "grant", name="uq_iam_role_grant_role_grant"),
    )

    public_id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
    )
    scope_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("iam_scope.public_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("iam_role.public_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    grant: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Opaque authorization rule string",
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    role: Mapped["RoleModel"] = relationship(  # noqa: F821
        "RoleModel",
        back_populates="grants",
    )

    def __repr__(self) -> str:
        return f"<RoleGrant(public_id={self.public_id}, role_id={self.role_id})>"
