"""SQLAlchemy model for the iam_scope table.

Scopes form a hierarchy: global > organization > project.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from scopegrant.infrastructure.persistence.database import Base


class ScopeModel(Base):
    """SQLAlchemy model for the iam_scope table.

    Attributes:
        public_id: Primary key.
        type: Scope kind ('global', 'organization' or 'project').
        parent_id: Enclosing scope, null for the global scope.
        name: Optional display name.
        description: Optional description.
    """

    __tablename__ = "iam_scope"

    public_id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
    )
    type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="Scope kind: global, organization or project",
    )
    parent_id: Mapped[str | None] = mapped_column(
        String(64),
        ForeignKey("iam_scope.public_id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(String(1024), nullable=True)
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
    roles: Mapped[list["RoleModel"]] = relationship(  # noqa: F821
        "RoleModel",
        back_populates="scope",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Scope(public_id={self.public_id}, type={self.type})>"
