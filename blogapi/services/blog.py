"""Blog service: creation, owner-only mutations, single reads and listings."""

from logging import getLogger
from uuid import UUID

from blogapi.auth.permissions import ensure_can_view, ensure_owner
from blogapi.configs import file_logger, settings
from blogapi.errors import ConflictError, NotFoundError, ValidationError
from blogapi.models import BlogDB, BlogState
from blogapi.repositories import BlogRepositoryProtocol, UserRepositoryProtocol
from blogapi.schemas.blog import (
    BlogCreate,
    BlogListResponse,
    BlogUpdate,
    BlogWithAuthorResponse,
    MessageResponse,
    OwnerBlogListResponse,
    db_blog_to_author_response,
    db_blog_to_response,
)
from blogapi.schemas.query import BlogListParams, OwnerListParams
from blogapi.services.blog_query import build_blog_query, build_owner_query, parse_identity
from blogapi.utils.reading_time import blog_reading_text, calculate_reading_time

logger = file_logger(getLogger(__name__))

UPDATABLE_FIELDS = ("title", "description", "tags", "body")


class BlogService:
    """
    Business rules for blogs.

    Only the author may update, publish or delete a blog. Lookups happen
    before ownership checks so that an unknown id is reported as not found
    rather than forbidden.
    """

    def __init__(
        self,
        blog_repo: BlogRepositoryProtocol,
        user_repo: UserRepositoryProtocol,
    ) -> None:
        """
        Initialize the blog service.

        Args:
            blog_repo: Blog repository
            user_repo: User repository, used to populate authors and resolve search terms
        """
        self.blog_repo = blog_repo
        self.user_repo = user_repo

    async def _get_owned(self, blog_id: str | UUID, requester_id: UUID) -> BlogDB:
        blog_uuid = blog_id if isinstance(blog_id, UUID) else parse_identity(blog_id)
        blog = await self.blog_repo.get_by_id(blog_uuid) if blog_uuid else None
        if blog is None:
            raise NotFoundError("Blog not found")
        ensure_owner(blog.author_id, requester_id)
        return blog

    async def create(self, payload: BlogCreate, author_id: UUID) -> BlogDB:
        """
        Create a draft blog owned by `author_id`.

        Args:
            payload: Title, body and optional description and tags
            author_id: Authenticated author

        Returns:
            BlogDB: The stored draft

        Raises:
            ValidationError: If the title or body is missing
            ConflictError: If another blog already has the title
        """
        if not payload.title or not payload.body or not payload.body.strip():
            raise ValidationError("title and body are required")

        if await self.blog_repo.get_by_title(payload.title):
            raise ConflictError("Blog title must be unique")

        blog = BlogDB(
            title=payload.title,
            description=payload.description or None,
            author_id=author_id,
            tags=payload.tags,
            body=payload.body,
            reading_time=calculate_reading_time(blog_reading_text(payload.description, payload.body)),
            state=BlogState.DRAFT,
        )
        blog = await self.blog_repo.create(blog)
        logger.info(f"Blog {blog.id} created by {author_id}")
        return blog

    async def update(self, blog_id: str | UUID, payload: BlogUpdate, requester_id: UUID) -> BlogDB:
        """
        Apply a partial update to a blog the requester owns.

        Only title, description, tags and body change. Reading time is
        recomputed when the body or description is part of the update.

        Args:
            blog_id: Blog id
            payload: Fields to change; fields not sent are left alone
            requester_id: Authenticated user

        Returns:
            BlogDB: The updated blog

        Raises:
            NotFoundError: If the blog does not exist
            ForbiddenError: If the requester is not the author
            ConflictError: If the new title belongs to another blog
            ValidationError: If the title or body would become empty
        """
        blog = await self._get_owned(blog_id, requester_id)
        updates = payload.model_dump(include=set(UPDATABLE_FIELDS), exclude_unset=True)

        if "title" in updates:
            if not updates["title"]:
                raise ValidationError("Blog title cannot be empty")
            if updates["title"] != blog.title and await self.blog_repo.get_by_title(updates["title"]):
                raise ConflictError("Title already used")

        if "body" in updates and not (updates["body"] and updates["body"].strip()):
            raise ValidationError("Blog body cannot be empty")

        if "tags" in updates and updates["tags"] is None:
            updates["tags"] = []

        if "body" in updates or "description" in updates:
            description = updates.get("description", blog.description)
            body = updates.get("body", blog.body)
            updates["reading_time"] = calculate_reading_time(blog_reading_text(description, body))

        for key, value in updates.items():
            setattr(blog, key, value)

        blog = await self.blog_repo.save(blog)
        logger.info(f"Blog {blog.id} updated by {requester_id}")
        return blog

    async def publish(self, blog_id: str | UUID, requester_id: UUID) -> BlogDB:
        """
        Publish a blog the requester owns. Publishing twice is harmless.

        Raises:
            NotFoundError: If the blog does not exist
            ForbiddenError: If the requester is not the author
        """
        blog = await self._get_owned(blog_id, requester_id)
        blog.state = BlogState.PUBLISHED
        blog = await self.blog_repo.save(blog)
        logger.info(f"Blog {blog.id} published by {requester_id}")
        return blog

    async def delete(self, blog_id: str | UUID, requester_id: UUID) -> MessageResponse:
        """
        Permanently delete a blog the requester owns.

        Raises:
            NotFoundError: If the blog does not exist
            ForbiddenError: If the requester is not the author
        """
        blog = await self._get_owned(blog_id, requester_id)
        await self.blog_repo.delete(blog)
        logger.info(f"Blog {blog.id} deleted by {requester_id}")
        return MessageResponse(message="Deleted")

    async def get_one(self, blog_id: str, requester_id: UUID | None = None) -> BlogWithAuthorResponse:
        """
        Read a single blog, counting the read.

        The read count is incremented before visibility is checked, so a
        forbidden attempt on a draft still counts.

        Args:
            blog_id: Blog id as received in the path
            requester_id: Authenticated user, or None for anonymous reads

        Returns:
            BlogWithAuthorResponse: Blog with its author populated

        Raises:
            ValidationError: If the id is not a valid UUID
            NotFoundError: If the blog does not exist
            ForbiddenError: If the blog is a draft and the requester is not its author
        """
        blog_uuid = parse_identity(blog_id)
        if blog_uuid is None:
            raise ValidationError("Invalid id")

        blog = await self.blog_repo.increment_read_count(blog_uuid)
        if blog is None:
            raise NotFoundError("Blog not found")

        ensure_can_view(blog.state, blog.author_id, requester_id)

        author = await self.user_repo.get_by_id(blog.author_id)
        if author is None:
            raise NotFoundError("Blog not found")
        return db_blog_to_author_response(blog, author)

    async def list_blogs(self, params: BlogListParams) -> BlogListResponse:
        """
        List blogs for the public feed, authors populated.

        Raises:
            ValidationError: If `state` is not a known blog state
        """
        query = await build_blog_query(
            params,
            self.user_repo,
            default_limit=settings.DEFAULT_PAGE_LIMIT,
            max_limit=settings.MAX_PAGE_LIMIT,
        )
        page = await self.blog_repo.find(query)
        authors = await self.user_repo.get_many(blog.author_id for blog in page.docs)
        docs = [
            db_blog_to_author_response(blog, authors[blog.author_id])
            for blog in page.docs
            if blog.author_id in authors
        ]
        return BlogListResponse(
            docs=docs,
            total_docs=page.total_docs,
            limit=page.limit,
            page=page.page,
            total_pages=page.total_pages,
            has_next_page=page.has_next_page,
            has_prev_page=page.has_prev_page,
        )

    async def list_owned(self, owner_id: UUID, params: OwnerListParams) -> OwnerBlogListResponse:
        """
        List the requester's own blogs in every state.

        Raises:
            ValidationError: If `state` is not a known blog state
        """
        query = build_owner_query(
            owner_id,
            params,
            default_limit=settings.DEFAULT_PAGE_LIMIT,
            max_limit=settings.MAX_PAGE_LIMIT,
        )
        page = await self.blog_repo.find(query)
        return OwnerBlogListResponse(
            docs=[db_blog_to_response(blog) for blog in page.docs],
            total_docs=page.total_docs,
            limit=page.limit,
            page=page.page,
            total_pages=page.total_pages,
            has_next_page=page.has_next_page,
            has_prev_page=page.has_prev_page,
        )
