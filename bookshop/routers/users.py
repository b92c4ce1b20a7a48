"""
Users Router

Registration and login.

Endpoints:
- POST /users/register - Create an account
- POST /users/login - Exchange credentials for an access token
- GET /users/me - Identity asserted by the current bearer token

Security:
=========
- Passwords are hashed with bcrypt before storage
- Tokens expire after ACCESS_TOKEN_EXPIRE_MINUTES (one hour by default)
"""

from fastapi import APIRouter, status

from bookshop.dependencies import AppSettings, Auth, CurrentClaims
from bookshop.schemas import (
    CurrentUserResponse,
    LoginRequest,
    MessageResponse,
    TokenResponse,
    UserCreate,
)

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={
        400: {"description": "Bad request"},
        401: {"description": "Unauthorized"},
    },
)


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Create an account. Username and email must both be unused.",
)
def register(user_data: UserCreate, auth: Auth) -> MessageResponse:
    auth.register(
        username=user_data.username,
        email=user_data.email,
        password=user_data.password,
    )
    return MessageResponse(message="User registered successfully")


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with username and password",
    description="""
    Authenticate to receive a signed access token.

    **Usage:**
    Include the token in the Authorization header:
    ```
    Authorization: Bearer <token>
    ```
    """,
    responses={404: {"description": "User not found"}},
)
def login(credentials: LoginRequest, auth: Auth, settings: AppSettings) -> TokenResponse:
    token = auth.login(credentials.username, credentials.password)
    return TokenResponse(
        token=token,
        token_type="bearer",
        expires_in=settings.access_token_expire_minutes * 60,
    )


@router.get(
    "/me",
    response_model=CurrentUserResponse,
    summary="Get current user",
    description="Return the username and email carried by the bearer token.",
)
def get_me(claims: CurrentClaims) -> CurrentUserResponse:
    return CurrentUserResponse.model_validate(claims)
