"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Everything here is resolved from the request: the settings and database
handle live on app.state, so routes never touch module-level globals.
"""

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from bookshop.config import Settings
from bookshop.database import get_db
from bookshop.exceptions import NotFoundError, UnauthorizedError
from bookshop.models.user import User
from bookshop.services.auth import AuthService, TokenClaims
from bookshop.services.catalog import BookCatalog
from bookshop.services.reviews import ReviewManager

logger = logging.getLogger(__name__)

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def get_books(db: Session = Depends(get_db)):
#
# You can write:
#   def get_books(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


def get_app_settings(request: Request) -> Settings:
    """Settings of the application serving this request."""
    return request.app.state.settings


AppSettings = Annotated[Settings, Depends(get_app_settings)]


# =============================================================================
# Services
# =============================================================================
def get_book_catalog(db: DbSession) -> BookCatalog:
    return BookCatalog(db)


def get_review_manager(db: DbSession) -> ReviewManager:
    return ReviewManager(db)


def get_auth_service(db: DbSession, settings: AppSettings) -> AuthService:
    return AuthService(db, settings)


Catalog = Annotated[BookCatalog, Depends(get_book_catalog)]
Reviews = Annotated[ReviewManager, Depends(get_review_manager)]
Auth = Annotated[AuthService, Depends(get_auth_service)]


# =============================================================================
# Bearer Token Authentication
# =============================================================================
# HTTPBearer extracts the token from the "Authorization: Bearer <token>"
# header. auto_error=False lets us answer with our own 401 message.

bearer_scheme = HTTPBearer(auto_error=False)

BearerCredentials = Annotated[
    HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
]


def get_current_claims(credentials: BearerCredentials, auth: Auth) -> TokenClaims:
    """
    Verify the bearer token and return the identity it asserts.

    Raises:
        UnauthorizedError: 401 if the token is missing, invalid or expired
    """
    token = credentials.credentials if credentials else None
    return auth.authenticate(token)


CurrentClaims = Annotated[TokenClaims, Depends(get_current_claims)]


def get_review_writer(
    settings: AppSettings,
    credentials: BearerCredentials,
    auth: Auth,
) -> User | None:
    """
    Identify who is writing a review, when review writes require a token.

    With REQUIRE_AUTH_FOR_REVIEWS disabled, review writes stay open and
    this returns None without looking at the Authorization header.

    Raises:
        UnauthorizedError: 401 if a token is required and missing, invalid,
            or names a user that no longer exists
    """
    if not settings.require_auth_for_reviews:
        return None

    token = credentials.credentials if credentials else None
    claims = auth.authenticate(token)

    try:
        return auth.get_user(claims.username)
    except NotFoundError:
        logger.warning(f"Token for unknown user: {claims.username}")
        raise UnauthorizedError("Unauthorized: Invalid token")


ReviewWriter = Annotated[User | None, Depends(get_review_writer)]
