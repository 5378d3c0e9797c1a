from blogapi.services.auth import AuthService
from blogapi.services.blog import BlogService
from blogapi.services.blog_query import (
    build_blog_query,
    build_owner_query,
    parse_identity,
    parse_sort,
    parse_state,
)

__all__ = [
    "AuthService",
    "BlogService",
    "build_blog_query",
    "build_owner_query",
    "parse_identity",
    "parse_sort",
    "parse_state",
]
