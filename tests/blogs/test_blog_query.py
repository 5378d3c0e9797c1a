# tests/blogs/test_blog_query.py
"""Tests for blogapi/services/blog_query.py module."""

from uuid import uuid4

import pytest

from blogapi.errors import ValidationError
from blogapi.models import BlogState, UserDB
from blogapi.repositories import InMemoryUserRepository
from blogapi.schemas.query import BlogListParams, OwnerListParams, SortField, SortOrder
from blogapi.services.blog_query import (
    DEFAULT_SORT,
    build_blog_query,
    build_owner_query,
    parse_identity,
    parse_sort,
    parse_state,
)


class TestParseSort:
    """Tests for parse_sort."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("read_count", SortOrder(SortField.READ_COUNT, descending=False)),
            ("-read_count", SortOrder(SortField.READ_COUNT, descending=True)),
            ("reading_time", SortOrder(SortField.READING_TIME, descending=False)),
            ("-timestamp", SortOrder(SortField.TIMESTAMP, descending=True)),
            ("timestamp", SortOrder(SortField.TIMESTAMP, descending=False)),
        ],
    )
    def test_allowed_fields(self, raw: str, expected: SortOrder) -> None:
        assert parse_sort(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "-", "title", "-body", "password_hash"])
    def test_unknown_falls_back_to_newest_first(self, raw: str | None) -> None:
        assert parse_sort(raw) == DEFAULT_SORT
        assert DEFAULT_SORT == SortOrder(SortField.TIMESTAMP, descending=True)


class TestParseState:
    def test_values(self) -> None:
        assert parse_state("draft") is BlogState.DRAFT
        assert parse_state(" published ") is BlogState.PUBLISHED
        assert parse_state(None) is None
        assert parse_state("") is None

    def test_invalid(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_state("archived")
        assert exc_info.value.status_code == 400


class TestParseIdentity:
    def test_valid(self) -> None:
        user_id = uuid4()
        assert parse_identity(str(user_id)) == user_id

    @pytest.mark.parametrize("raw", [None, "", "abc", "12345"])
    def test_invalid_is_none(self, raw: str | None) -> None:
        assert parse_identity(raw) is None


class TestBuildBlogQuery:
    """Tests for build_blog_query."""

    async def test_defaults_to_published(self, user_repo: InMemoryUserRepository) -> None:
        query = await build_blog_query(BlogListParams(), user_repo)

        assert query.filter.states == (BlogState.PUBLISHED,)
        assert query.filter.search is None
        assert query.sort == DEFAULT_SORT
        assert (query.page, query.limit) == (1, 20)

    async def test_explicit_state(self, user_repo: InMemoryUserRepository) -> None:
        query = await build_blog_query(BlogListParams(state="draft"), user_repo)
        assert query.filter.states == (BlogState.DRAFT,)

    async def test_invalid_author_ignored(self, user_repo: InMemoryUserRepository) -> None:
        query = await build_blog_query(BlogListParams(author="not-a-uuid"), user_repo)
        assert query.filter.author_id is None

    async def test_valid_author(self, user_repo: InMemoryUserRepository) -> None:
        author = uuid4()
        query = await build_blog_query(BlogListParams(author=str(author)), user_repo)
        assert query.filter.author_id == author

    async def test_tags_split_and_trimmed(self, user_repo: InMemoryUserRepository) -> None:
        query = await build_blog_query(BlogListParams(tags=" python, ,async ,"), user_repo)
        assert query.filter.tags_any == ("python", "async")

    async def test_search_resolves_authors(self, user_repo: InMemoryUserRepository) -> None:
        alice = await user_repo.create(
            UserDB(first_name="Alice", last_name="Smith", email="alice@example.com", password_hash="x"),
        )
        await user_repo.create(
            UserDB(first_name="Bob", last_name="Jones", email="bob@example.com", password_hash="x"),
        )

        query = await build_blog_query(BlogListParams(q="SMITH"), user_repo)

        assert query.filter.search is not None
        assert query.filter.search.term == "SMITH"
        assert query.filter.search.author_ids == (alice.id,)

    async def test_limit_clamped(self, user_repo: InMemoryUserRepository) -> None:
        query = await build_blog_query(BlogListParams(page="2", limit="1000"), user_repo, max_limit=50)
        assert (query.page, query.limit, query.skip) == (2, 50, 50)


class TestBuildOwnerQuery:
    def test_all_states_by_default(self) -> None:
        owner = uuid4()
        query = build_owner_query(owner, OwnerListParams())
        assert query.filter.author_id == owner
        assert query.filter.states is None

    def test_state_narrows(self) -> None:
        query = build_owner_query(uuid4(), OwnerListParams(state="draft", sort="-read_count"))
        assert query.filter.states == (BlogState.DRAFT,)
        assert query.sort == SortOrder(SortField.READ_COUNT, descending=True)
