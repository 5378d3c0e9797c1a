# tests/blogs/test_permissions.py
"""Tests for blogapi/auth/permissions.py module."""

from uuid import uuid4

import pytest

from blogapi.auth.permissions import can_view, ensure_can_view, ensure_owner
from blogapi.errors import ForbiddenError
from blogapi.models import BlogState


class TestCanView:
    """Tests for the visibility rule."""

    def test_published_visible_to_everyone(self) -> None:
        author = uuid4()
        assert can_view(BlogState.PUBLISHED, author, None)
        assert can_view(BlogState.PUBLISHED, author, uuid4())
        assert can_view(BlogState.PUBLISHED, author, author)

    def test_draft_visible_to_author_only(self) -> None:
        author = uuid4()
        assert can_view(BlogState.DRAFT, author, author)
        assert not can_view(BlogState.DRAFT, author, uuid4())
        assert not can_view(BlogState.DRAFT, author, None)

    def test_accepts_stored_strings(self) -> None:
        assert can_view("published", uuid4(), None)

    def test_unknown_state(self) -> None:
        with pytest.raises(ValueError):
            can_view("archived", uuid4(), None)


class TestEnsureCanView:
    def test_draft_anonymous(self) -> None:
        with pytest.raises(ForbiddenError) as exc_info:
            ensure_can_view(BlogState.DRAFT, uuid4(), None)
        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "Forbidden"

    def test_published_passes(self) -> None:
        ensure_can_view(BlogState.PUBLISHED, uuid4(), None)


class TestEnsureOwner:
    def test_owner_passes(self) -> None:
        author = uuid4()
        ensure_owner(author, author)

    def test_other_user(self) -> None:
        with pytest.raises(ForbiddenError):
            ensure_owner(uuid4(), uuid4())
