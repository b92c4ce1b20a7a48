"""
Authentication Service

Registration, login and access token verification.

Security:
=========
- Passwords are hashed with bcrypt before storage
- Plain text passwords and tokens are never logged
- Tokens carry the username and email and expire after a fixed interval
  (ACCESS_TOKEN_EXPIRE_MINUTES, one hour by default)
"""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookshop.config import Settings
from bookshop.exceptions import ConflictError, NotFoundError, UnauthorizedError
from bookshop.models.user import User
from bookshop.services.security import (
    ACCESS_TOKEN_TYPE,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from bookshop.services.validation import require_fields

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    """Identity decoded from a verified access token."""

    username: str
    email: str
    expires_at: datetime


class AuthService:
    """
    User registration and token-based authentication.

    Args:
        db: Database session
        settings: Application settings (token secret, algorithm, lifetime)
    """

    def __init__(self, db: Session, settings: Settings) -> None:
        self.db = db
        self.settings = settings

    @property
    def token_lifetime(self) -> timedelta:
        return timedelta(minutes=self.settings.access_token_expire_minutes)

    def _user_exists(self, username: str, email: str) -> bool:
        stmt = select(User.id).where(or_(User.username == username, User.email == email))
        return self.db.execute(stmt).first() is not None

    def register(self, username: str, email: str, password: str) -> User:
        """
        Register a new user.

        Raises:
            ValidationError: If a field is missing or blank
            ConflictError: If the username or email is already taken
        """
        require_fields(username=username, email=email, password=password)

        if self._user_exists(username, email):
            raise ConflictError("User already exists")

        user = User(
            username=username,
            email=email,
            hashed_password=hash_password(password),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # A concurrent registration won the unique index
            self.db.rollback()
            logger.warning(f"Registration conflict on insert for {username}")
            raise ConflictError("User already exists")
        self.db.refresh(user)

        logger.info(f"New user registered: {user.username}")
        return user

    def login(self, username: str, password: str) -> str:
        """
        Check credentials and issue an access token.

        Returns:
            Signed token embedding the username and email

        Raises:
            NotFoundError: If no user has this username
            UnauthorizedError: If the password does not match
        """
        require_fields(username=username, password=password)

        stmt = select(User).where(User.username == username)
        user = self.db.execute(stmt).scalar_one_or_none()

        if user is None:
            logger.warning(f"Login failed: user not found for {username}")
            raise NotFoundError("User not found")

        if not verify_password(password, user.hashed_password):
            logger.warning(f"Login failed: incorrect password for {username}")
            raise UnauthorizedError("Invalid password")

        token = create_access_token(
            {"sub": user.username, "username": user.username, "email": user.email},
            self.settings.secret_key,
            expires_delta=self.token_lifetime,
            algorithm=self.settings.jwt_algorithm,
        )

        logger.info(f"User logged in: {user.username}")
        return token

    def authenticate(self, token: str | None) -> TokenClaims:
        """
        Verify a bearer token and return the identity it asserts.

        Raises:
            UnauthorizedError: If the token is missing, forged, expired,
                not an access token, or lacks the identity claims
        """
        if not token:
            raise UnauthorizedError("Unauthorized: No token provided")

        payload = decode_token(
            token,
            self.settings.secret_key,
            algorithm=self.settings.jwt_algorithm,
        )
        if payload is None:
            raise UnauthorizedError("Unauthorized: Invalid token")

        if payload.get("type") != ACCESS_TOKEN_TYPE:
            logger.warning(f"Token type mismatch: expected {ACCESS_TOKEN_TYPE}")
            raise UnauthorizedError("Unauthorized: Invalid token")

        username = payload.get("username")
        email = payload.get("email")
        exp = payload.get("exp")
        if not username or not email or exp is None:
            raise UnauthorizedError("Unauthorized: Invalid token")

        return TokenClaims(
            username=username,
            email=email,
            expires_at=datetime.fromtimestamp(exp, UTC),
        )

    def get_user(self, username: str) -> User:
        """
        Look up a registered user by username.

        Raises:
            NotFoundError: If no user has this username
        """
        stmt = select(User).where(User.username == username)
        user = self.db.execute(stmt).scalar_one_or_none()
        if user is None:
            raise NotFoundError("User not found")
        return user
