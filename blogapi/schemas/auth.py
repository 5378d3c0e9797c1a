from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blogapi.schemas.user import UserPublic


def _strip(value: object) -> object:
    return value.strip() if isinstance(value, str) else value


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    user_id: UUID
    email: str
    jti: str
    token_type: str = "access"


class SignupRequest(BaseModel):
    """Signup payload. Presence of required fields is enforced by the auth service."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "first_name": "Alice",
                "last_name": "Smith",
                "email": "alice@example.com",
                "password": "password123",
                "bio": "Writes about Python.",
            },
        },
    )

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=255)
    password: str | None = Field(default=None, repr=False)
    bio: str | None = Field(default=None, max_length=500)

    @field_validator("first_name", "last_name", "email", "bio", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        """Trim surrounding whitespace from text fields."""
        return _strip(v)


class SigninRequest(BaseModel):
    """Signin payload."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "alice@example.com", "password": "password123"},
        },
    )

    email: str | None = None
    password: str | None = Field(default=None, repr=False)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v: object) -> object:
        """Trim surrounding whitespace from the email."""
        return _strip(v)


class AuthResponse(BaseModel):
    """Token plus the public user fields returned by signup and signin."""

    token: str
    user: UserPublic
