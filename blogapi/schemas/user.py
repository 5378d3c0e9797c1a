"""Public user representations (never carry the password hash)."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AuthorResponse(BaseModel):
    """Author fields embedded in populated blog responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    first_name: str
    last_name: str
    email: str


class UserPublic(AuthorResponse):
    """User fields returned after signup and signin."""

    bio: str | None = None
