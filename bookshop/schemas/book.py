"""
Book Pydantic Schemas

Books are read-only through the API, so only a response schema is needed.
The review list is serialised as review ids.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookResponse(BaseModel):
    """
    Schema for book responses.

    Example response:
    {
        "id": 1,
        "isbn": "978-3-16-148410-0",
        "title": "Example Book 1",
        "author": "Author 1",
        "reviews": [1]
    }
    """

    id: int = Field(..., description="Unique book identifier")
    isbn: str = Field(..., description="International Standard Book Number")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Author name")
    reviews: list[int] = Field(
        default_factory=list,
        description="IDs of the reviews linked to this book",
    )

    @field_validator("reviews", mode="before")
    @classmethod
    def reviews_to_ids(cls, v: Any) -> Any:
        """Accept ORM Review objects and keep only their ids."""
        if v is None:
            return []
        return [getattr(item, "id", item) for item in v]

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "isbn": "978-3-16-148410-0",
                "title": "Example Book 1",
                "author": "Author 1",
                "reviews": [1],
            }
        },
    )
