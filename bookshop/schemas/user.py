"""
User Pydantic Schemas

These schemas define the shape of data for registration and login.

Schemas:
- UserCreate: Registration data (username, email, password)
- LoginRequest: Login credentials (username, password)
- TokenResponse: Issued access token
- CurrentUserResponse: Claims carried by a verified token

Passwords only appear in request schemas; no response ever includes them.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserCreate(BaseModel):
    """
    Schema for user registration.

    Example request body:
    {
        "username": "user1",
        "email": "user1@example.com",
        "password": "password1"
    }
    """

    username: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Unique username",
        examples=["user1"],
    )

    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["user1@example.com"],
    )

    password: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Plain text password (stored only as a bcrypt hash)",
        examples=["password1"],
    )

    @field_validator("username")
    @classmethod
    def username_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Username cannot be empty or whitespace")
        return v


class LoginRequest(BaseModel):
    """Schema for login credentials."""

    username: str = Field(..., min_length=1, description="Registered username")
    password: str = Field(..., min_length=1, description="Account password")


class TokenResponse(BaseModel):
    """
    Schema for a successful login.

    Clients send the token back as: Authorization: Bearer <token>
    """

    token: str = Field(..., description="Signed access token")
    token_type: str = Field(default="bearer", description="Token scheme")
    expires_in: int = Field(..., description="Token lifetime in seconds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 3600,
            }
        },
    )


class CurrentUserResponse(BaseModel):
    """Identity asserted by a verified access token."""

    username: str = Field(..., description="Username embedded in the token")
    email: str = Field(..., description="Email embedded in the token")
    expires_at: datetime = Field(..., description="When the token expires")

    model_config = ConfigDict(from_attributes=True)
