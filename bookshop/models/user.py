"""
User Model

Users are created through registration and are never updated or deleted
through the API. Only a bcrypt hash of the password is stored.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookshop.database import Base

if TYPE_CHECKING:
    from bookshop.models.review import Review


class User(Base):
    """
    User model representing registered users.

    Table: users

    Indexes:
    - username: Unique index for login lookups
    - email: Unique index

    Example:
        user = User(
            username="user1",
            email="user1@example.com",
            hashed_password=hash_password("password1"),
        )
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)

    username: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        index=True,
        nullable=False,
        comment="Unique username (used for login)"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="User's email address"
    )

    hashed_password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="When the user registered"
    )

    reviews: Mapped[list["Review"]] = relationship(
        "Review",
        back_populates="user",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation."""
        return f"User(id={self.id}, username='{self.username}', email='{self.email}')"
