# blogapi/routes/auth.py

"""
Authentication Routes.

Summary
-------
Endpoints include:
  - Sign up (create an account and receive a token)
  - Sign in (exchange email and password for a token)

Both return the same body: a bearer token plus the user's public fields.
"""

from typing import Annotated

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from blogapi.dependencies import AuthServiceDep
from blogapi.schemas.auth import AuthResponse, SigninRequest, SignupRequest

router = APIRouter(prefix="/auth", tags=["🔐 Auth"])

_AUTH_EXAMPLE = {
    "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
    "user": {
        "id": "123e4567-e89b-12d3-a456-426614174000",
        "first_name": "Alice",
        "last_name": "Smith",
        "email": "alice@example.com",
        "bio": "Writes about Python.",
    },
}


@router.post(
    "/signup",
    response_class=ORJSONResponse,
    response_model=AuthResponse,
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    description="Create an account and receive an access token.",
    responses={
        201: {"content": {"application/json": {"example": _AUTH_EXAMPLE}}},
        400: {
            "description": "Missing fields",
            "content": {"application/json": {"example": {"message": "Missing required fields"}}},
        },
        409: {
            "description": "Email taken",
            "content": {"application/json": {"example": {"message": "Email already registered"}}},
        },
    },
    operation_id="auth_signup",
)
async def signup(
    payload: Annotated[SignupRequest, Body()],
    auth_service: AuthServiceDep,
) -> AuthResponse:
    """
    Register a new user.

    Parameters
    ----------
    payload : SignupRequest
        first_name, last_name, email, password and an optional bio.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    AuthResponse
        Access token and public user data.

    Raises
    ------
    ValidationError
        If a required field is missing.
    ConflictError
        If the email is already registered.
    """
    return await auth_service.signup(payload)


@router.post(
    "/signin",
    response_class=ORJSONResponse,
    response_model=AuthResponse,
    summary="Sign in",
    description="Exchange email and password for an access token.",
    responses={
        200: {"content": {"application/json": {"example": _AUTH_EXAMPLE}}},
        400: {
            "description": "Missing fields",
            "content": {"application/json": {"example": {"message": "Missing email or password"}}},
        },
        401: {
            "description": "Unauthorized",
            "content": {"application/json": {"example": {"message": "Invalid credentials"}}},
        },
    },
    operation_id="auth_signin",
)
async def signin(
    payload: Annotated[SigninRequest, Body()],
    auth_service: AuthServiceDep,
) -> AuthResponse:
    """
    Authenticate a user.

    Parameters
    ----------
    payload : SigninRequest
        Email and password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    AuthResponse
        Access token and public user data.

    Raises
    ------
    ValidationError
        If email or password is missing.
    InvalidCredentialsError
        If the email is unknown or the password is wrong.
    """
    return await auth_service.signin(payload)
