"""
Translate raw listing parameters into typed blog queries.

Unusable input is mostly forgiven: bad page numbers fall back to defaults,
an invalid author id is ignored and an unknown sort field falls back to
newest first. Only an unknown state is rejected.
"""

from uuid import UUID

from blogapi.configs import settings
from blogapi.errors import ValidationError
from blogapi.models import BlogState
from blogapi.repositories import UserRepositoryProtocol
from blogapi.schemas.blog import split_tags
from blogapi.schemas.query import (
    BlogFilter,
    BlogListParams,
    BlogQuery,
    OwnerListParams,
    SortField,
    SortOrder,
    TextSearch,
)
from blogapi.utils.pagination import normalize_pagination

DEFAULT_SORT = SortOrder(field=SortField.TIMESTAMP, descending=True)


def parse_sort(raw: str | None) -> SortOrder:
    """
    Parse a sort expression such as `read_count` or `-reading_time`.

    A leading "-" sorts descending, otherwise ascending. Fields outside the
    allow-list give the default sort (timestamp, newest first).

    Args:
        raw: Sort expression from the query string

    Returns:
        SortOrder: Field and direction
    """
    if not raw or not raw.strip():
        return DEFAULT_SORT
    expression = raw.strip()
    descending = expression.startswith("-")
    name = expression.removeprefix("-")
    try:
        return SortOrder(field=SortField(name), descending=descending)
    except ValueError:
        return DEFAULT_SORT


def parse_state(raw: str | None) -> BlogState | None:
    """
    Parse an optional state filter.

    Raises:
        ValidationError: If the value is not a known blog state
    """
    if raw is None or not raw.strip():
        return None
    try:
        return BlogState(raw.strip())
    except ValueError as e:
        states = ", ".join(state.value for state in BlogState)
        raise ValidationError(f"Invalid state, expected one of: {states}") from e


def parse_identity(raw: str | None) -> UUID | None:
    """Parse a user or blog id, returning None when it is not a valid UUID."""
    if not raw:
        return None
    try:
        return UUID(raw.strip())
    except ValueError:
        return None


def _clean(raw: str | None) -> str | None:
    if raw is None:
        return None
    return raw.strip() or None


async def build_blog_query(
    params: BlogListParams,
    user_repo: UserRepositoryProtocol,
    *,
    default_limit: int = settings.DEFAULT_PAGE_LIMIT,
    max_limit: int | None = settings.MAX_PAGE_LIMIT,
) -> BlogQuery:
    """
    Build the public listing query.

    Without a state filter only published blogs are listed. The free-text
    term `q` matches the title, any tag, or the author's name or email;
    authors are resolved through `user_repo` before the blog query runs.

    Args:
        params: Raw query-string parameters
        user_repo: Repository used to resolve authors matching `q`
        default_limit: Page size when none is given
        max_limit: Upper bound on the page size, or None for no bound

    Returns:
        BlogQuery: Typed query for the blog repository

    Raises:
        ValidationError: If `state` is not a known blog state
    """
    state = parse_state(params.state)
    term = _clean(params.q)

    search = None
    if term is not None:
        author_ids = await user_repo.find_ids_matching(term)
        search = TextSearch(term=term, author_ids=tuple(author_ids))

    blog_filter = BlogFilter(
        states=(state or BlogState.PUBLISHED,),
        author_id=parse_identity(params.author),
        title_contains=_clean(params.title),
        tags_any=tuple(split_tags(params.tags)),
        search=search,
    )
    page = normalize_pagination(
        params.page,
        params.limit,
        default_limit=default_limit,
        max_limit=max_limit,
    )
    return BlogQuery(filter=blog_filter, sort=parse_sort(params.sort), page=page.page, limit=page.limit)


def build_owner_query(
    owner_id: UUID,
    params: OwnerListParams,
    *,
    default_limit: int = settings.DEFAULT_PAGE_LIMIT,
    max_limit: int | None = settings.MAX_PAGE_LIMIT,
) -> BlogQuery:
    """
    Build the query listing one author's own blogs.

    All states are included unless `state` narrows them.

    Raises:
        ValidationError: If `state` is not a known blog state
    """
    state = parse_state(params.state)
    blog_filter = BlogFilter(
        states=(state,) if state is not None else None,
        author_id=owner_id,
    )
    page = normalize_pagination(
        params.page,
        params.limit,
        default_limit=default_limit,
        max_limit=max_limit,
    )
    return BlogQuery(filter=blog_filter, sort=parse_sort(params.sort), page=page.page, limit=page.limit)
