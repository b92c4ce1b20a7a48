"""
Tests for the Review Manager service.

Business Rules covered:
- One review per book, whoever writes it
- A new review is linked into the book's review list
- Bulk delete empties the review list; a second delete finds nothing
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from bookshop.exceptions import NotFoundError, ValidationError
from bookshop.models import Book, Review, User
from bookshop.services.reviews import ReviewManager, UpsertResult


def count_reviews(db: Session, book: Book) -> int:
    stmt = select(func.count()).select_from(Review).where(Review.book_id == book.id)
    return db.execute(stmt).scalar_one()


class TestUpsertReview:
    def test_creates_review_and_links_it(self, db_session: Session, sample_book: Book):
        manager = ReviewManager(db_session)

        result = manager.upsert_review(sample_book.isbn, rating=5, comment="ok")

        assert result is UpsertResult.CREATED
        db_session.refresh(sample_book)
        assert len(sample_book.reviews) == 1
        review = sample_book.reviews[0]
        assert review.rating == 5
        assert review.comment == "ok"
        assert review.book_id == sample_book.id
        assert review.user_id is None

    def test_second_write_overwrites_the_same_review(
        self, db_session: Session, sample_book: Book
    ):
        manager = ReviewManager(db_session)

        first = manager.upsert_review(sample_book.isbn, rating=5, comment="ok")
        second = manager.upsert_review(sample_book.isbn, rating=2)

        assert first is UpsertResult.CREATED
        assert second is UpsertResult.UPDATED
        assert count_reviews(db_session, sample_book) == 1

        reviews = manager.list_reviews(sample_book.isbn)
        assert len(reviews) == 1
        assert reviews[0].rating == 2
        # Comment is replaced even when the new write omits it
        assert reviews[0].comment is None

    def test_overwrite_ignores_who_wrote_the_review(
        self, db_session: Session, sample_book: Book, sample_user: User
    ):
        manager = ReviewManager(db_session)

        manager.upsert_review(sample_book.isbn, rating=4, comment="mine")
        result = manager.upsert_review(
            sample_book.isbn, rating=1, comment="not mine", user_id=sample_user.id
        )

        assert result is UpsertResult.UPDATED
        reviews = manager.list_reviews(sample_book.isbn)
        assert len(reviews) == 1
        assert reviews[0].user_id == sample_user.id
        assert reviews[0].comment == "not mine"

    def test_unknown_book(self, db_session: Session):
        manager = ReviewManager(db_session)

        with pytest.raises(NotFoundError, match="Book not found"):
            manager.upsert_review("does-not-exist", rating=3)

    def test_missing_rating_rejected_before_lookup(self, db_session: Session):
        manager = ReviewManager(db_session)

        # Validation wins even though the book does not exist
        with pytest.raises(ValidationError, match="rating"):
            manager.upsert_review("does-not-exist", rating=None)

    def test_blank_isbn_rejected(self, db_session: Session):
        with pytest.raises(ValidationError, match="isbn"):
            ReviewManager(db_session).upsert_review("  ", rating=3)


class TestDeleteReviews:
    def test_deletes_all_reviews_and_clears_list(
        self, db_session: Session, sample_book: Book
    ):
        # Reviews created outside the manager can number more than one
        for rating in (1, 2, 3):
            sample_book.reviews.append(Review(rating=rating))
        db_session.commit()

        manager = ReviewManager(db_session)
        deleted = manager.delete_reviews(sample_book.isbn)

        assert deleted == 3
        assert count_reviews(db_session, sample_book) == 0
        db_session.refresh(sample_book)
        assert sample_book.reviews == []

    def test_second_delete_is_not_found(
        self, db_session: Session, sample_review: Review
    ):
        manager = ReviewManager(db_session)
        isbn = sample_review.book.isbn

        assert manager.delete_reviews(isbn) == 1
        with pytest.raises(NotFoundError, match="No reviews found for this book"):
            manager.delete_reviews(isbn)

    def test_book_without_reviews(self, db_session: Session, sample_book: Book):
        with pytest.raises(NotFoundError, match="No reviews found"):
            ReviewManager(db_session).delete_reviews(sample_book.isbn)

    def test_unknown_book(self, db_session: Session):
        with pytest.raises(NotFoundError, match="Book not found"):
            ReviewManager(db_session).delete_reviews("missing")


class TestListReviews:
    def test_empty_list(self, db_session: Session, sample_book: Book):
        assert ReviewManager(db_session).list_reviews(sample_book.isbn) == []

    def test_returns_linked_reviews(self, db_session: Session, sample_review: Review):
        reviews = ReviewManager(db_session).list_reviews(sample_review.book.isbn)

        assert [r.id for r in reviews] == [sample_review.id]
        assert reviews[0].comment == "Great book!"

    def test_unknown_book(self, db_session: Session):
        with pytest.raises(NotFoundError):
            ReviewManager(db_session).list_reviews("missing")
