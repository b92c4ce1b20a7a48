"""
Book Catalog Query Service

Read-only lookups over the book catalog. Every query eagerly loads the
review list so responses can include review ids without N+1 queries.

Matching rules:
- isbn: exact
- author: exact for by_author, case-insensitive substring for search
- title: case-insensitive substring
"""

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session, selectinload

from bookshop.exceptions import NotFoundError
from bookshop.models import Book


def _contains_ci(column, value: str):
    """Case-insensitive literal substring match (LIKE wildcards escaped)."""
    return func.lower(column).contains(value.lower(), autoescape=True)


class BookCatalog:
    """
    Book catalog queries.

    Args:
        db: Database session
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def _books(self) -> Select:
        return select(Book).options(selectinload(Book.reviews)).order_by(Book.id)

    def _all(self, stmt: Select) -> list[Book]:
        return list(self.db.execute(stmt).scalars().all())

    def list_all(self) -> list[Book]:
        """Return every book, unfiltered."""
        return self._all(self._books())

    def search(
        self,
        isbn: str | None = None,
        author: str | None = None,
        title: str | None = None,
    ) -> list[Book]:
        """
        Find books matching every provided filter.

        Blank or missing filters are ignored, so a call without filters
        returns the whole catalog.
        """
        stmt = self._books()

        if isbn:
            stmt = stmt.where(Book.isbn == isbn)
        if author:
            stmt = stmt.where(_contains_ci(Book.author, author))
        if title:
            stmt = stmt.where(_contains_ci(Book.title, title))

        return self._all(stmt)

    def by_author(self, author: str) -> list[Book]:
        """Books whose author is exactly `author`."""
        return self._all(self._books().where(Book.author == author))

    def by_title(self, title: str) -> list[Book]:
        """Books whose title contains `title`, ignoring case."""
        return self._all(self._books().where(_contains_ci(Book.title, title)))

    def by_isbn(self, isbn: str) -> Book:
        """
        Get a book by ISBN.

        Raises:
            NotFoundError: If no book has this ISBN
        """
        book = self.db.execute(
            self._books().where(Book.isbn == isbn)
        ).scalar_one_or_none()

        if book is None:
            raise NotFoundError("Book not found")
        return book
