"""
Book Model

Books are created by the seed script; the API only reads them and manages
their review list.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookshop.database import Base

if TYPE_CHECKING:
    from bookshop.models.review import Review


class Book(Base):
    """
    Book model representing books in the shop.

    Table: books

    Fields:
    - isbn: International Standard Book Number (unique, lookup key)
    - title: Book title
    - author: Author name as a plain string

    Relationships:
    - reviews: One-to-Many review list. Removing a review from the list
      deletes it (delete-orphan), so clearing the list clears the reviews.

    Example:
        book = Book(
            isbn="978-3-16-148410-0",
            title="Example Book 1",
            author="Author 1",
        )
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    # Kept as entered (hyphens included); lookups are exact
    isbn: Mapped[str] = mapped_column(
        String(20),
        unique=True,
        index=True,
        nullable=False,
        comment="International Standard Book Number"
    )

    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Author name"
    )

    reviews: Mapped[list["Review"]] = relationship(
        "Review",
        back_populates="book",
        cascade="all, delete-orphan",
        order_by="Review.id",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, isbn='{self.isbn}', title='{self.title}')"
