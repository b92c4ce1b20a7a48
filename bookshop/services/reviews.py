"""
Review Manager

Reads and writes the review of a book, keeping the book's review list and
each review's back-reference consistent.

Business Rules:
- A book has at most one review, whoever writes it; writing again
  overwrites the rating and comment in place
- A new review is appended to the book's review list
- Deleting a book's reviews removes every review and empties the list
"""

import enum
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from bookshop.exceptions import NotFoundError
from bookshop.models import Book, Review
from bookshop.services.validation import require_fields

logger = logging.getLogger(__name__)


class UpsertResult(str, enum.Enum):
    """Outcome of writing the review of a book."""

    CREATED = "created"
    UPDATED = "updated"


class ReviewManager:
    """
    Review operations keyed by book ISBN.

    Args:
        db: Database session
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def _get_book_or_404(self, isbn: str, with_reviews: bool = False) -> Book:
        stmt = select(Book).where(Book.isbn == isbn)
        if with_reviews:
            stmt = stmt.options(selectinload(Book.reviews))
        book = self.db.execute(stmt).scalar_one_or_none()

        if book is None:
            raise NotFoundError("Book not found")
        return book

    def upsert_review(
        self,
        isbn: str,
        rating: float,
        comment: str | None = None,
        user_id: int | None = None,
    ) -> UpsertResult:
        """
        Add the review of a book, or overwrite it if one exists.

        Args:
            isbn: ISBN of the reviewed book
            rating: Numeric rating
            comment: Optional text; replaces the old comment even when None
            user_id: Writer to record on the review, if known

        Returns:
            UpsertResult.CREATED or UpsertResult.UPDATED

        Raises:
            ValidationError: If isbn is blank or rating is missing
            NotFoundError: If no book has this ISBN
        """
        require_fields(isbn=isbn, rating=rating)

        book = self._get_book_or_404(isbn)

        stmt = (
            select(Review)
            .where(Review.book_id == book.id)
            .order_by(Review.id)
            .limit(1)
        )
        existing = self.db.execute(stmt).scalar_one_or_none()

        if existing is not None:
            existing.rating = rating
            existing.comment = comment
            if user_id is not None:
                existing.user_id = user_id
            self.db.commit()

            logger.info(f"Review {existing.id} updated for book {isbn}")
            return UpsertResult.UPDATED

        review = Review(rating=rating, comment=comment, user_id=user_id)
        book.reviews.append(review)
        self.db.commit()

        logger.info(f"Review {review.id} added for book {isbn}")
        return UpsertResult.CREATED

    def delete_reviews(self, isbn: str) -> int:
        """
        Delete every review of a book and clear its review list.

        Returns:
            Number of reviews deleted

        Raises:
            NotFoundError: If the book does not exist or has no reviews
        """
        require_fields(isbn=isbn)

        book = self._get_book_or_404(isbn)

        stmt = select(Review).where(Review.book_id == book.id)
        reviews = self.db.execute(stmt).scalars().all()

        if not reviews:
            raise NotFoundError("No reviews found for this book")

        for review in reviews:
            self.db.delete(review)
        book.reviews.clear()
        self.db.commit()

        logger.info(f"Deleted {len(reviews)} review(s) for book {isbn}")
        return len(reviews)

    def list_reviews(self, isbn: str) -> list[Review]:
        """
        Get the reviews linked to a book.

        Returns:
            The book's review list (empty if it has none)

        Raises:
            NotFoundError: If no book has this ISBN
        """
        require_fields(isbn=isbn)

        book = self._get_book_or_404(isbn, with_reviews=True)
        return list(book.reviews)
