# blogapi/routes/blog.py

"""
Blog Routes.

Summary
-------
Endpoints include:
  - List published blogs (filters, search, sort, pagination)
  - List the caller's own blogs
  - Get blog by id (counts a read)
  - Create blog (as a draft)
  - Update blog
  - Publish blog
  - Delete blog

Dependencies
------------
  - `BlogServiceDep`: Blog service bound to the request's repositories.
  - `UserDBDep`: Authenticated user; required for every mutation.
  - `OptionalUserIdDep`: Requester id for reads that also serve anonymous callers.
"""

from typing import Annotated

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from blogapi.dependencies import (
    BlogListParamsDep,
    BlogServiceDep,
    OptionalUserIdDep,
    OwnerListParamsDep,
    UserDBDep,
)
from blogapi.schemas.blog import (
    BlogCreate,
    BlogListResponse,
    BlogResponse,
    BlogUpdate,
    BlogWithAuthorResponse,
    MessageResponse,
    OwnerBlogListResponse,
    db_blog_to_response,
)

router = APIRouter(prefix="/blogs", tags=["📝 Blogs"])

_BLOG_EXAMPLE = {
    "id": "550e8400-e29b-41d4-a716-446655440000",
    "title": "Getting Started with Async Python",
    "description": "A gentle introduction",
    "author": "123e4567-e89b-12d3-a456-426614174000",
    "state": "draft",
    "read_count": 0,
    "reading_time": 1,
    "tags": ["python", "async"],
    "body": "Async Python lets a single thread juggle many requests...",
    "timestamp": "2025-01-01T10:00:00Z",
    "created_at": "2025-01-01T10:00:00Z",
    "updated_at": "2025-01-01T10:00:00Z",
}

_PAGE_EXAMPLE = {
    "docs": [],
    "totalDocs": 0,
    "limit": 20,
    "page": 1,
    "totalPages": 0,
    "hasNextPage": False,
    "hasPrevPage": False,
}


def _message(description: str, message: str) -> dict:
    return {"description": description, "content": {"application/json": {"example": {"message": message}}}}


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=BlogListResponse,
    summary="List blogs",
    description=(
        "List blogs, published only unless `state` is given. Supports free-text search, "
        "author, title and tag filters, sorting and pagination."
    ),
    responses={
        200: {"content": {"application/json": {"example": _PAGE_EXAMPLE}}},
        400: _message("Invalid state", "Invalid state, expected one of: draft, published"),
    },
    operation_id="blogs_list",
)
async def list_blogs(
    params: BlogListParamsDep,
    blog_service: BlogServiceDep,
) -> BlogListResponse:
    """
    List blogs with filters.

    Parameters
    ----------
    params : BlogListParams
        Raw page, limit, state, q, author, title, tags and sort values.
    blog_service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogListResponse
        Page of blogs with authors populated.
    """
    return await blog_service.list_blogs(params)


@router.get(
    "/me/list",
    response_class=ORJSONResponse,
    response_model=OwnerBlogListResponse,
    summary="List my blogs",
    description="List the authenticated user's blogs in every state, optionally narrowed by `state`.",
    responses={
        200: {"content": {"application/json": {"example": _PAGE_EXAMPLE}}},
        401: _message("Unauthorized", "Not authenticated"),
    },
    operation_id="blogs_list_mine",
)
async def list_my_blogs(
    params: OwnerListParamsDep,
    current_user: UserDBDep,
    blog_service: BlogServiceDep,
) -> OwnerBlogListResponse:
    """
    List the caller's own blogs.

    Parameters
    ----------
    params : OwnerListParams
        Raw page, limit, state and sort values.
    current_user : UserDB
        Authenticated user.
    blog_service : BlogService
        Blog service dependency.

    Returns
    -------
    OwnerBlogListResponse
        Page of the caller's blogs.
    """
    return await blog_service.list_owned(current_user.id, params)


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogWithAuthorResponse,
    summary="Get blog by ID",
    description="Retrieve a blog and count the read. Drafts are only visible to their author.",
    responses={
        400: _message("Invalid id", "Invalid id"),
        403: _message("Draft of another author", "Forbidden"),
        404: _message("Not found", "Blog not found"),
    },
    operation_id="blogs_get_by_id",
)
async def get_blog(
    blog_id: str,
    requester_id: OptionalUserIdDep,
    blog_service: BlogServiceDep,
) -> BlogWithAuthorResponse:
    """
    Get a blog by id and increment its read count.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    requester_id : UUID | None
        Caller, when a valid bearer token is sent.
    blog_service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogWithAuthorResponse
        Blog with its author populated.
    """
    return await blog_service.get_one(blog_id, requester_id)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog post",
    description="Create a blog as a draft owned by the caller.",
    responses={
        201: {"content": {"application/json": {"example": _BLOG_EXAMPLE}}},
        400: _message("Missing fields", "title and body are required"),
        401: _message("Unauthorized", "Not authenticated"),
        409: _message("Duplicate title", "Blog title must be unique"),
    },
    operation_id="blogs_create",
)
async def create_blog(
    payload: Annotated[BlogCreate, Body()],
    current_user: UserDBDep,
    blog_service: BlogServiceDep,
) -> BlogResponse:
    """
    Create a new blog post.

    Parameters
    ----------
    payload : BlogCreate
        Title, body and optional description and tags.
    current_user : UserDB
        Authenticated author.
    blog_service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        Created draft.
    """
    blog = await blog_service.create(payload, current_user.id)
    return db_blog_to_response(blog)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update a blog post",
    description="Change title, description, tags or body of one of the caller's blogs.",
    responses={
        200: {"content": {"application/json": {"example": _BLOG_EXAMPLE}}},
        401: _message("Unauthorized", "Not authenticated"),
        403: _message("Not the author", "Forbidden"),
        404: _message("Not found", "Blog not found"),
        409: _message("Duplicate title", "Title already used"),
    },
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: str,
    payload: Annotated[BlogUpdate, Body()],
    current_user: UserDBDep,
    blog_service: BlogServiceDep,
) -> BlogResponse:
    """
    Update a blog post.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    payload : BlogUpdate
        Fields to change.
    current_user : UserDB
        Authenticated user, must be the author.
    blog_service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        Updated blog.
    """
    blog = await blog_service.update(blog_id, payload, current_user.id)
    return db_blog_to_response(blog)


@router.patch(
    "/{blog_id}/publish",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Publish a blog post",
    description="Move one of the caller's drafts to the published state.",
    responses={
        401: _message("Unauthorized", "Not authenticated"),
        403: _message("Not the author", "Forbidden"),
        404: _message("Not found", "Blog not found"),
    },
    operation_id="blogs_publish",
)
async def publish_blog(
    blog_id: str,
    current_user: UserDBDep,
    blog_service: BlogServiceDep,
) -> BlogResponse:
    """Publish a blog post owned by the caller."""
    blog = await blog_service.publish(blog_id, current_user.id)
    return db_blog_to_response(blog)


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete a blog post",
    description="Permanently delete one of the caller's blogs.",
    responses={
        200: {"content": {"application/json": {"example": {"message": "Deleted"}}}},
        401: _message("Unauthorized", "Not authenticated"),
        403: _message("Not the author", "Forbidden"),
        404: _message("Not found", "Blog not found"),
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    blog_id: str,
    current_user: UserDBDep,
    blog_service: BlogServiceDep,
) -> MessageResponse:
    """Delete a blog post owned by the caller."""
    return await blog_service.delete(blog_id, current_user.id)
