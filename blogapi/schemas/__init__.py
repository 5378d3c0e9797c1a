from blogapi.schemas.auth import AuthResponse, SigninRequest, SignupRequest, TokenData
from blogapi.schemas.blog import (
    BlogCreate,
    BlogListResponse,
    BlogResponse,
    BlogUpdate,
    BlogWithAuthorResponse,
    MessageResponse,
    OwnerBlogListResponse,
    db_blog_to_author_response,
    db_blog_to_response,
    split_tags,
)
from blogapi.schemas.health import HealthCheckResponse
from blogapi.schemas.query import (
    BlogFilter,
    BlogListParams,
    BlogPage,
    BlogQuery,
    OwnerListParams,
    SortField,
    SortOrder,
    TextSearch,
)
from blogapi.schemas.user import AuthorResponse, UserPublic

__all__ = [
    "AuthResponse",
    "AuthorResponse",
    "BlogCreate",
    "BlogFilter",
    "BlogListParams",
    "BlogListResponse",
    "BlogPage",
    "BlogQuery",
    "BlogResponse",
    "BlogUpdate",
    "BlogWithAuthorResponse",
    "HealthCheckResponse",
    "MessageResponse",
    "OwnerBlogListResponse",
    "OwnerListParams",
    "SigninRequest",
    "SignupRequest",
    "SortField",
    "SortOrder",
    "TextSearch",
    "TokenData",
    "UserPublic",
    "db_blog_to_author_response",
    "db_blog_to_response",
    "split_tags",
]
