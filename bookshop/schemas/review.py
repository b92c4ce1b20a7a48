"""
Review Pydantic Schemas

Schemas:
- ReviewWrite: Body for adding or modifying the review of a book
- ReviewResponse: Review data for API responses
- ReviewDeleteResponse: Result of deleting a book's reviews

Business Rules:
- Rating is required, comment is optional
- A book has one review; writing again overwrites it
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from bookshop.schemas.common import MessageResponse


class ReviewWrite(BaseModel):
    """
    Schema for adding or modifying a review.

    Example request body:
    {
        "rating": 5,
        "comment": "Great book!"
    }
    """

    rating: float = Field(
        ...,
        description="Numeric rating",
        examples=[5, 4.5],
    )

    comment: str | None = Field(
        default=None,
        max_length=5000,
        description="Optional review text",
        examples=["Great book!"],
    )


class ReviewResponse(BaseModel):
    """Schema for review responses."""

    id: int = Field(..., description="Unique review identifier")
    book_id: int = Field(..., description="ID of the reviewed book")
    user_id: int | None = Field(
        default=None,
        description="ID of the user who last wrote the review, if recorded",
    )
    rating: float = Field(..., description="Numeric rating")
    comment: str | None = Field(default=None, description="Review text")
    created_at: datetime = Field(..., description="When the review was created")
    updated_at: datetime = Field(..., description="When the review was last updated")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "book_id": 1,
                "user_id": None,
                "rating": 5,
                "comment": "Great book!",
                "created_at": "2024-01-15T10:30:00Z",
                "updated_at": "2024-01-15T10:30:00Z",
            }
        },
    )


class ReviewDeleteResponse(MessageResponse):
    """Result of deleting every review of a book."""

    deleted: int = Field(..., ge=1, description="Number of reviews deleted")
