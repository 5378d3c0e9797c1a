"""Blog visibility and ownership rules."""

from typing import assert_never
from uuid import UUID

from blogapi.errors import ForbiddenError
from blogapi.models import BlogState


def can_view(state: BlogState | str, author_id: UUID, requester_id: UUID | None) -> bool:
    """
    Decide whether a requester may read a blog.

    Args:
        state: Blog state
        author_id: Blog author
        requester_id: Authenticated user id, or None for anonymous requests

    Returns:
        bool: True for published blogs, and for drafts read by their author
    """
    match BlogState(state):
        case BlogState.PUBLISHED:
            return True
        case BlogState.DRAFT:
            return requester_id is not None and requester_id == author_id
        case unreachable:
            assert_never(unreachable)


def ensure_can_view(state: BlogState | str, author_id: UUID, requester_id: UUID | None) -> None:
    """
    Raise unless the requester may read the blog.

    A draft read by anyone but its author is forbidden; the blog's
    existence is not hidden.

    Raises:
        ForbiddenError: If the blog is a draft and the requester is not its author
    """
    if not can_view(state, author_id, requester_id):
        raise ForbiddenError


def ensure_owner(author_id: UUID, requester_id: UUID) -> None:
    """
    Raise unless the requester wrote the blog.

    Callers look the blog up first so an unknown id is reported as not
    found before ownership is checked.

    Raises:
        ForbiddenError: If the requester is not the author
    """
    if author_id != requester_id:
        raise ForbiddenError
