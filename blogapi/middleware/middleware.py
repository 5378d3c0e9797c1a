# blogapi/middleware/middleware.py
"""
Middleware components for the blog API.

Security headers, request logging and CORS live here, together with the
console logging setup and the lifespan handler that opens and closes the
database.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import basicConfig, getLogger
from time import perf_counter

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from rich.logging import RichHandler
from rich.traceback import install
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from blogapi.configs import file_logger, settings
from blogapi.db import close_db, init_db
from blogapi.utils.helpers import get_summary, host

basicConfig(
    level=settings.LOG_LEVEL,
    format="%(message)s",
    datefmt="%X",
    handlers=[RichHandler(rich_tracebacks=True, show_path=settings.DEBUG)],
)
logger = file_logger(getLogger("blogapi"))

install(show_locals=settings.DEBUG)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}
HSTS_HEADER = "max-age=31536000; includeSubDomains"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Connect to PostgreSQL on startup and dispose of the pool on shutdown."""
    logger.info(f"{app.title} v{app.version} starting ({settings.ENVIRONMENT})")
    if settings.LOG_TO_FILE:
        logger.info(f"Writing JSON logs to {settings.LOG_FILE}")

    try:
        await init_db()
    except Exception:
        logger.exception("Database startup failed")
        raise

    logger.info(f"Ready on http://{settings.HOST}:{settings.PORT} (docs at /docs)")

    yield

    logger.info(f"{app.title} stopping")
    try:
        await close_db()
    except Exception:
        logger.exception("Database pool did not close cleanly")


def configure_cors(app: FastAPI) -> None:
    """Allow the local frontend and, when configured, the production one."""
    origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
    if settings.PRODUCTION_FRONTEND_URL:
        origins.append(settings.PRODUCTION_FRONTEND_URL)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log each request with its route summary, status and duration."""
        started = perf_counter()
        route = get_summary(request) or request.url.path
        logger.info(f"{request.method} {route} from {host(request)}")

        response = await call_next(request)

        elapsed_ms = (perf_counter() - started) * 1000
        logger.info(f"{response.status_code} {request.method} {request.url.path} {elapsed_ms:.1f}ms")
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to every response; HSTS only in production."""
        response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        if settings.ENVIRONMENT == "production":
            response.headers["Strict-Transport-Security"] = HSTS_HEADER
        return response
