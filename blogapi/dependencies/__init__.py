# blogapi/dependencies/__init__.py

from blogapi.dependencies.dependencies import (
    AuthServiceDep,
    BlogListParamsDep,
    BlogRepoDep,
    BlogServiceDep,
    OptionalUserIdDep,
    OwnerListParamsDep,
    UserDBDep,
    UserRepoDep,
    get_auth_service,
    get_blog_list_params,
    get_blog_repository,
    get_blog_service,
    get_current_user,
    get_optional_user_id,
    get_owner_list_params,
    get_user_repository,
    oauth2_scheme,
)

__all__ = [
    "AuthServiceDep",
    "BlogListParamsDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "OptionalUserIdDep",
    "OwnerListParamsDep",
    "UserDBDep",
    "UserRepoDep",
    "get_auth_service",
    "get_blog_list_params",
    "get_blog_repository",
    "get_blog_service",
    "get_current_user",
    "get_optional_user_id",
    "get_owner_list_params",
    "get_user_repository",
    "oauth2_scheme",
]
