"""
Domain Exceptions

Services raise these errors instead of HTTP exceptions. The application
factory registers a handler that renders any BookshopError as a JSON body
of the form {"message": "..."} with the error's status code.

Taxonomy:
- NotFoundError: missing book, user or review (404)
- ConflictError: duplicate user on registration (400)
- UnauthorizedError: bad credentials or missing/invalid/expired token (401)
- ValidationError: missing or blank required input (400)
- InternalError: store or connection failure (500), raised for SQLAlchemy errors
"""

from fastapi import status


class BookshopError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An internal error occurred"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def headers(self) -> dict[str, str] | None:
        return None


class NotFoundError(BookshopError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(BookshopError):
    # Registration has always answered duplicates with 400
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class UnauthorizedError(BookshopError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"

    @property
    def headers(self) -> dict[str, str]:
        return {"WWW-Authenticate": "Bearer"}


class ValidationError(BookshopError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation error"


class InternalError(BookshopError):
    pass
