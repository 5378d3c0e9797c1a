# blogapi/dependencies/dependencies.py

"""Request dependencies: repositories, services, authentication and list queries."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Query
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.db import get_session
from blogapi.errors import UserNotFoundError
from blogapi.managers.token_manager import decode_access_token, verify_bearer
from blogapi.models import UserDB
from blogapi.repositories import (
    BlogRepository,
    BlogRepositoryProtocol,
    UserRepository,
    UserRepositoryProtocol,
)
from blogapi.schemas.query import BlogListParams, OwnerListParams
from blogapi.services import AuthService, BlogService

# auto_error is off so missing tokens go through the app's own error handlers.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/signin", auto_error=False)


def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> UserRepositoryProtocol:
    """
    Resolve the user repository dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepositoryProtocol
        Repository instance bound to the session.
    """
    return UserRepository(session)


def get_blog_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> BlogRepositoryProtocol:
    """
    Resolve the blog repository dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepositoryProtocol
        Repository instance bound to the session.
    """
    return BlogRepository(session)


UserRepoDep = Annotated[UserRepositoryProtocol, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepositoryProtocol, Depends(get_blog_repository)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    return AuthService(user_repo)


def get_blog_service(blog_repo: BlogRepoDep, user_repo: UserRepoDep) -> BlogService:
    return BlogService(blog_repo, user_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    user_repo: UserRepoDep,
) -> UserDB:
    """
    Get the authenticated user from the bearer token.

    Parameters
    ----------
    token : str | None
        Bearer token, None when the header is absent.
    user_repo : UserRepositoryProtocol
        Repository used to load the user.

    Returns
    -------
    UserDB
        Current authenticated user.

    Raises
    ------
    MissingTokenError
        If no bearer token was sent.
    InvalidTokenError
        If the token is malformed, expired or badly signed.
    UserNotFoundError
        If the token's user no longer exists.
    """
    user_id = verify_bearer(token)
    user = await user_repo.get_by_id(user_id)
    if not user:
        raise UserNotFoundError
    return user


def get_optional_user_id(
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> UUID | None:
    """
    Resolve the requester for routes that also serve anonymous callers.

    A missing or invalid token makes the request anonymous instead of
    failing it.
    """
    if not token:
        return None
    token_data = decode_access_token(token)
    return token_data.user_id if token_data else None


UserDBDep = Annotated[UserDB, Depends(get_current_user)]
OptionalUserIdDep = Annotated[UUID | None, Depends(get_optional_user_id)]


def get_blog_list_params(
    page: Annotated[str | None, Query(description="Page number, 1-based")] = None,
    limit: Annotated[str | None, Query(description="Page size")] = None,
    state: Annotated[
        str | None,
        Query(description="draft or published; published when omitted"),
    ] = None,
    q: Annotated[
        str | None,
        Query(description="Search title, tags and author name or email"),
    ] = None,
    author: Annotated[str | None, Query(description="Author ID filter")] = None,
    title: Annotated[str | None, Query(description="Case-insensitive title filter")] = None,
    tags: Annotated[str | None, Query(description="Comma-separated tags, any may match")] = None,
    sort: Annotated[
        str | None,
        Query(description="read_count, reading_time or timestamp; prefix '-' for descending"),
    ] = None,
) -> BlogListParams:
    """
    Dependency to construct `BlogListParams` from query parameters.

    Values are passed through raw; the query builder decides how lenient
    to be with each one.

    Returns
    -------
    BlogListParams
        Aggregated query parameters object.
    """
    return BlogListParams(
        page=page,
        limit=limit,
        state=state,
        q=q,
        author=author,
        title=title,
        tags=tags,
        sort=sort,
    )


def get_owner_list_params(
    page: Annotated[str | None, Query(description="Page number, 1-based")] = None,
    limit: Annotated[str | None, Query(description="Page size")] = None,
    state: Annotated[str | None, Query(description="draft or published; all when omitted")] = None,
    sort: Annotated[
        str | None,
        Query(description="read_count, reading_time or timestamp; prefix '-' for descending"),
    ] = None,
) -> OwnerListParams:
    return OwnerListParams(page=page, limit=limit, state=state, sort=sort)


BlogListParamsDep = Annotated[BlogListParams, Depends(get_blog_list_params)]
OwnerListParamsDep = Annotated[OwnerListParams, Depends(get_owner_list_params)]
