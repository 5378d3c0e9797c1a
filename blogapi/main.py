# blogapi/main.py

"""Blog Publishing API - accounts, drafts and published posts over FastAPI."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from blogapi.configs import settings
from blogapi.errors import (
    AuthError,
    ConflictError,
    DatabaseError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    PasswordHashingError,
    ValidationError,
    api_exception_handler,
    auth_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    unhandled_exception_handler,
    validation_error_handler,
    validation_exception_handler,
)
from blogapi.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from blogapi.routes import auth_router, blog_router
from blogapi.schemas import HealthCheckResponse
from blogapi.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Blog publishing API with draft and publish workflow",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

routes = [auth_router, blog_router]

_ = [app.include_router(router) for router in routes]

errors = [
    (ValidationError, validation_error_handler),
    (AuthError, auth_exception_handler),
    (ForbiddenError, api_exception_handler),
    (NotFoundError, api_exception_handler),
    (ConflictError, api_exception_handler),
    (InternalError, api_exception_handler),
    (DatabaseError, database_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (RequestValidationError, validation_exception_handler),
    (Exception, unhandled_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"status": "ok", "version": "1.0.0", "timestamp": "2025-01-01 10:00:00"},
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check() -> HealthCheckResponse:
    """
    Health check endpoint.

    Returns
    -------
    HealthCheckResponse
        Status, application version and server time.
    """
    return HealthCheckResponse(status="ok", version=app.version, timestamp=today_str())


@app.get(
    "/",
    tags=["🏠 Root"],
    summary="Root access",
    response_model=dict[str, str],
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"message": f"Welcome to {settings.APP_NAME}"},
                },
            },
        },
    },
    operation_id="root_access",
)
async def root() -> dict[str, str]:
    """
    Root endpoint.

    Returns
    -------
    dict[str, str]
        Welcome message payload.
    """
    return {"message": f"Welcome to {settings.APP_NAME}"}
