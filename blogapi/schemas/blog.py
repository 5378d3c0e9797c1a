"""
Blog request and response schemas.

Request models accept partial input so that the blog service, not the
HTTP layer, decides which fields are required. Tags may arrive either as
a list or as a comma-separated string.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blogapi.models import BlogDB, BlogState, UserDB
from blogapi.schemas.user import AuthorResponse


def split_tags(raw: str | list[str] | None) -> list[str]:
    """
    Normalize tags given as a list or a comma-separated string.

    Each tag is trimmed and empty tags are dropped; order is kept.

    Args:
        raw: Tags as a list, a comma-separated string or None

    Returns:
        list[str]: Trimmed tags
    """
    if raw is None:
        return []
    items = raw.split(",") if isinstance(raw, str) else raw
    return [tag.strip() for tag in items if isinstance(tag, str) and tag.strip()]


def _strip(value: object) -> object:
    return value.strip() if isinstance(value, str) else value


class BlogCreate(BaseModel):
    """Blog creation payload."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Getting Started with Async Python",
                "description": "A gentle introduction",
                "tags": "python,async",
                "body": "Async Python lets a single thread juggle many requests...",
            },
        },
    )

    title: str | None = Field(default=None, max_length=255)
    description: str | None = Field(default=None, max_length=500)
    tags: list[str] = Field(default_factory=list)
    body: str | None = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        """Trim surrounding whitespace."""
        return _strip(v)

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: object) -> object:
        """Accept a list or a comma-separated string."""
        if v is None or isinstance(v, str):
            return split_tags(v)
        if isinstance(v, list):
            return [_strip(tag) for tag in v if not (isinstance(tag, str) and not tag.strip())]
        return v


class BlogUpdate(BlogCreate):
    """
    Blog update payload.

    Only fields present in the request are applied; author and state are
    not updatable through this model.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"body": "An updated body.", "tags": ["python"]},
        },
    )

    tags: list[str] | None = None


class BlogResponse(BaseModel):
    """Blog as stored, with the author as an id."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str | None = None
    author: UUID
    state: BlogState
    read_count: int
    reading_time: int
    tags: list[str]
    body: str
    timestamp: datetime
    created_at: datetime
    updated_at: datetime


class BlogWithAuthorResponse(BlogResponse):
    """Blog with the author populated with name and email only."""

    author: AuthorResponse


class PageMeta(BaseModel):
    """Pagination envelope fields."""

    model_config = ConfigDict(populate_by_name=True)

    total_docs: int = Field(alias="totalDocs")
    limit: int
    page: int
    total_pages: int = Field(alias="totalPages")
    has_next_page: bool = Field(alias="hasNextPage")
    has_prev_page: bool = Field(alias="hasPrevPage")


class BlogListResponse(PageMeta):
    """Public listing page (authors populated)."""

    docs: list[BlogWithAuthorResponse]


class OwnerBlogListResponse(PageMeta):
    """Owner listing page (author ids only)."""

    docs: list[BlogResponse]


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


def db_blog_to_response(db_blog: BlogDB) -> BlogResponse:
    """Convert a `BlogDB` row to `BlogResponse`."""
    data = db_blog.model_dump()
    data["author"] = data.pop("author_id")
    return BlogResponse.model_validate(data)


def db_blog_to_author_response(db_blog: BlogDB, author: UserDB) -> BlogWithAuthorResponse:
    """Convert a `BlogDB` row and its author to `BlogWithAuthorResponse`."""
    data = db_blog.model_dump()
    data.pop("author_id")
    data["author"] = AuthorResponse.model_validate(author)
    return BlogWithAuthorResponse.model_validate(data)
