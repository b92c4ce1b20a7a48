"""
Reviews Router

Endpoints for the review of a book, addressed by ISBN.

Endpoints:
- GET /books/{isbn}/reviews - List the book's reviews
- POST /books/{isbn}/reviews - Add or modify the book's review
- DELETE /books/{isbn}/reviews - Delete the book's reviews

Business Rules:
- A book has one review; posting again overwrites it
- Writes are open unless REQUIRE_AUTH_FOR_REVIEWS is enabled, in which
  case a bearer token is required and the writer is recorded
"""

from fastapi import APIRouter

from bookshop.dependencies import Reviews, ReviewWriter
from bookshop.schemas import (
    MessageResponse,
    ReviewDeleteResponse,
    ReviewResponse,
    ReviewWrite,
)
from bookshop.services.reviews import UpsertResult

router = APIRouter(
    prefix="/books/{isbn}/reviews",
    tags=["Reviews"],
    responses={
        404: {"description": "Book or review not found"},
    },
)

UPSERT_MESSAGES = {
    UpsertResult.CREATED: "Review added successfully",
    UpsertResult.UPDATED: "Review updated successfully",
}


@router.get(
    "",
    response_model=list[ReviewResponse],
    summary="List reviews for a book",
)
def list_book_reviews(isbn: str, reviews: Reviews) -> list[ReviewResponse]:
    return [ReviewResponse.model_validate(r) for r in reviews.list_reviews(isbn)]


@router.post(
    "",
    response_model=MessageResponse,
    summary="Add or modify a review",
    description="Create the review of a book, or overwrite it if it exists.",
    responses={
        400: {"description": "Missing or invalid fields"},
        401: {"description": "Token required (when review auth is enforced)"},
    },
)
def upsert_book_review(
    isbn: str,
    review_data: ReviewWrite,
    reviews: Reviews,
    writer: ReviewWriter,
) -> MessageResponse:
    """
    Add or modify the review of a book.

    Args:
        isbn: ISBN of the book to review
        review_data: Rating and optional comment
        writer: Authenticated user, or None when review auth is off

    Returns:
        "Review added successfully" or "Review updated successfully"
    """
    result = reviews.upsert_review(
        isbn,
        rating=review_data.rating,
        comment=review_data.comment,
        user_id=writer.id if writer else None,
    )
    return MessageResponse(message=UPSERT_MESSAGES[result])


@router.delete(
    "",
    response_model=ReviewDeleteResponse,
    summary="Delete the reviews of a book",
    responses={
        401: {"description": "Token required (when review auth is enforced)"},
    },
)
def delete_book_reviews(
    isbn: str,
    reviews: Reviews,
    writer: ReviewWriter,
) -> ReviewDeleteResponse:
    deleted = reviews.delete_reviews(isbn)
    return ReviewDeleteResponse(
        message="Reviews deleted successfully",
        deleted=deleted,
    )
