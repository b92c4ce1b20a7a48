"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

Schema Naming Convention:
- XxxCreate / XxxWrite: Fields accepted when creating or writing a record
- XxxResponse: Fields returned in API responses
"""

from bookshop.schemas.book import BookResponse
from bookshop.schemas.common import MessageResponse
from bookshop.schemas.review import (
    ReviewDeleteResponse,
    ReviewResponse,
    ReviewWrite,
)
from bookshop.schemas.user import (
    CurrentUserResponse,
    LoginRequest,
    TokenResponse,
    UserCreate,
)

__all__ = [
    # Book schemas
    "BookResponse",
    # Shared schemas
    "MessageResponse",
    # Review schemas
    "ReviewWrite",
    "ReviewResponse",
    "ReviewDeleteResponse",
    # User / auth schemas
    "UserCreate",
    "LoginRequest",
    "TokenResponse",
    "CurrentUserResponse",
]
