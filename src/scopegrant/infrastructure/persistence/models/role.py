"""SQLAlchemy model for the iam_role table."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from scopegrant.infrastructure.persistence.database import Base


class RoleModel(Base):
    """SQLAlchemy model for the iam_role table.

    Attributes:
        public_id: Primary key.
        scope_id: Foreign key to the scope the role is defined in.
        name: Optional role name.
        description: Optional description of the role's purpose.
    """

    __tablename__ = "iam_role"

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
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    # Relationships
    scope: Mapped["ScopeModel"] = relationship(  # noqa: F821
        "ScopeModel",
        back_populates="roles",
    )
    grants: Mapped[list["RoleGrantModel"]] = relationship(  # noqa: F821
        "RoleGrantModel",
        back_populates="role",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Role(public_id={self.public_id}, name={self.name})>"
