"""Authorization rules for blogs."""

from blogapi.auth.permissions import can_view, ensure_can_view, ensure_owner

__all__ = ["can_view", "ensure_can_view", "ensure_owner"]
