"""
Security Service

Handles password hashing and JWT token operations.

Security Features:
==================
1. Password hashing with bcrypt (passlib), salted and cost-factored
2. Signed, time-limited JWT access tokens
3. Secure password verification

The signing secret is always passed in by the caller; nothing here reads
configuration on its own.

Usage:
    from bookshop.services.security import hash_password, verify_password

    hashed = hash_password("password1")
    is_valid = verify_password("password1", hashed)
"""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------------
# Password Hashing Configuration
# -------------------------------------------------------------------------
# bcrypt with 10 rounds; deprecated="auto" upgrades old hashes on verify
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Example:
        >>> hashed = hash_password("password1")
        >>> hashed.startswith("$2b$")
        True
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Uses constant-time comparison to prevent timing attacks.

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


# -------------------------------------------------------------------------
# JWT Token Configuration
# -------------------------------------------------------------------------
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 60
ACCESS_TOKEN_TYPE = "access"


def create_access_token(
    data: dict,
    secret_key: str,
    expires_delta: timedelta | None = None,
    algorithm: str = ALGORITHM,
) -> str:
    """
    Create a JWT access token.

    Args:
        data: Payload data to encode in the token
        secret_key: Shared secret used to sign the token
        expires_delta: Optional custom lifetime (default one hour)
        algorithm: Signing algorithm

    Returns:
        Encoded JWT token string

    Example:
        >>> token = create_access_token({"sub": "user1"}, secret)
        >>> token.count(".") == 2  # JWT format: header.payload.signature
        True
    """
    to_encode = data.copy()

    if expires_delta is None:
        expires_delta = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(UTC) + expires_delta

    to_encode.update({"exp": expire, "type": ACCESS_TOKEN_TYPE})

    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def decode_token(
    token: str,
    secret_key: str,
    algorithm: str = ALGORITHM,
) -> dict | None:
    """
    Decode and validate a JWT token.

    Checks the signature and the expiry claim.

    Returns:
        Decoded payload if valid, None if invalid or expired
    """
    try:
        return jwt.decode(token, secret_key, algorithms=[algorithm])
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        return None
