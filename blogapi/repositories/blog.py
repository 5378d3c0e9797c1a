"""Blog repository for database operations."""

from logging import getLogger
from uuid import UUID

from sqlalchemy import ColumnElement, asc, desc, exists, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col

from blogapi.configs import file_logger
from blogapi.errors.database import DatabaseError, DuplicateEntryError
from blogapi.models import BlogDB
from blogapi.repositories.base import like_pattern
from blogapi.schemas.query import BlogFilter, BlogPage, BlogQuery, SortField, TextSearch
from blogapi.utils.helpers import utc_now

logger = file_logger(getLogger(__name__))

_SORT_COLUMNS = {
    SortField.READ_COUNT: BlogDB.read_count,
    SortField.READING_TIME: BlogDB.reading_time,
    SortField.TIMESTAMP: BlogDB.timestamp,
}


def _tag_matches(pattern: str) -> ColumnElement[bool]:
    """True when any element of the blog's tags matches `pattern` (ILIKE)."""
    tag_values = func.jsonb_array_elements_text(BlogDB.tags).table_valued("value")
    return exists(select(tag_values.c.value).where(tag_values.c.value.ilike(pattern, escape="\\")))


def _search_condition(search: TextSearch) -> ColumnElement[bool]:
    pattern = like_pattern(search.term)
    clauses = [col(BlogDB.title).ilike(pattern, escape="\\"), _tag_matches(pattern)]
    if search.author_ids:
        clauses.append(col(BlogDB.author_id).in_(search.author_ids))
    return or_(*clauses)


def _filter_conditions(blog_filter: BlogFilter) -> list[ColumnElement[bool]]:
    """Translate a `BlogFilter` into SQL conditions, all of which must hold."""
    conditions: list[ColumnElement[bool]] = []
    if blog_filter.states is not None:
        conditions.append(col(BlogDB.state).in_([state.value for state in blog_filter.states]))
    if blog_filter.author_id is not None:
        conditions.append(col(BlogDB.author_id) == blog_filter.author_id)
    if blog_filter.title_contains:
        pattern = like_pattern(blog_filter.title_contains)
        conditions.append(col(BlogDB.title).ilike(pattern, escape="\\"))
    if blog_filter.tags_any:
        # pyrefly: ignore [missing-attribute]
        conditions.append(or_(*(func.jsonb_exists(BlogDB.tags, tag) for tag in blog_filter.tags_any)))
    if blog_filter.search is not None:
        conditions.append(_search_condition(blog_filter.search))
    return conditions


class BlogRepository:
    """
    Repository for Blog database operations.

    This class implements the repository pattern for Blog entities.
    Business rules (ownership, uniqueness messages, reading time) live in
    the blog service; this class only talks to the database.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def create(self, blog: BlogDB) -> BlogDB:
        """
        Create a new blog in the database.

        Args:
            blog: Blog model to persist

        Returns:
            BlogDB: Created blog database model

        Raises:
            DuplicateEntryError: If the title already exists
            DatabaseError: For other database errors
        """
        try:
            self.session.add(blog)
            await self.session.flush()
            await self.session.refresh(blog)
            return blog
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "title" in error_msg.lower():
                raise DuplicateEntryError(detail="Blog title must be unique") from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e

    async def get_by_id(self, blog_id: UUID) -> BlogDB | None:
        """
        Get blog by ID.

        Args:
            blog_id: Blog UUID

        Returns:
            BlogDB | None: Blog if found, None otherwise
        """
        result = await self.session.execute(select(BlogDB).where(col(BlogDB.id) == blog_id))
        return result.scalar_one_or_none()

    async def get_by_title(self, title: str) -> BlogDB | None:
        """
        Get blog by its exact title.

        Args:
            title: Blog title

        Returns:
            BlogDB | None: Blog if found, None otherwise
        """
        result = await self.session.execute(select(BlogDB).where(col(BlogDB.title) == title))
        return result.scalar_one_or_none()

    async def save(self, blog: BlogDB) -> BlogDB:
        """
        Flush pending changes to a blog.

        Args:
            blog: Blog model with changes applied

        Returns:
            BlogDB: Refreshed blog

        Raises:
            DuplicateEntryError: If a changed title collides with another blog
        """
        blog.updated_at = utc_now()
        try:
            self.session.add(blog)
            await self.session.flush()
            await self.session.refresh(blog)
            return blog
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "title" in error_msg.lower():
                raise DuplicateEntryError(detail="Title already used") from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e

    async def delete(self, blog: BlogDB) -> None:
        """Delete a blog permanently."""
        await self.session.delete(blog)
        await self.session.flush()

    async def increment_read_count(self, blog_id: UUID) -> BlogDB | None:
        """
        Increment the read count of a blog in a single statement.

        The increment is committed immediately, so it is kept even when the
        request later fails (a forbidden read of a draft still counts).

        Args:
            blog_id: Blog UUID

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        statement = (
            update(BlogDB)
            .where(col(BlogDB.id) == blog_id)
            .values(read_count=col(BlogDB.read_count) + 1)
            .returning(BlogDB)
        )
        result = await self.session.execute(statement)
        blog = result.scalar_one_or_none()
        if blog is not None:
            await self.session.commit()
        return blog

    async def find(self, query: BlogQuery) -> BlogPage:
        """
        Run a listing query.

        Results are ordered by the requested field with the id as a
        tie-breaker so that pages are stable.

        Args:
            query: Filter, sort and page to fetch

        Returns:
            BlogPage: Requested page and the total number of matches
        """
        conditions = _filter_conditions(query.filter)

        count_statement = select(func.count()).select_from(BlogDB).where(*conditions)
        total_docs = (await self.session.execute(count_statement)).scalar_one()

        sort_column = _SORT_COLUMNS[query.sort.field]
        direction = desc if query.sort.descending else asc
        statement = (
            select(BlogDB)
            .where(*conditions)
            # pyrefly: ignore [bad-argument-type]
            .order_by(direction(sort_column), col(BlogDB.id))
            .offset(query.skip)
            .limit(query.limit)
        )
        result = await self.session.execute(statement)
        docs = list(result.scalars().all())
        logger.debug(f"Blog listing matched {total_docs} rows, returning {len(docs)}")

        return BlogPage(docs=docs, total_docs=total_docs, limit=query.limit, page=query.page)
