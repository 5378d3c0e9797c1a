from datetime import UTC, datetime

from fastapi import Request
from fastapi.routing import APIRoute
from starlette.routing import Match


def host(request: Request) -> str:
    """Return the client IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return the current local time as a string."""
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def utc_now() -> datetime:
    """Return the current UTC time."""
    return datetime.now(tz=UTC)


def get_summary(request: Request) -> str | None:
    """Return the OpenAPI summary of the route matching the request, if any."""
    for route in request.app.routes:
        if isinstance(route, APIRoute) and route.matches(request.scope)[0] == Match.FULL:
            return route.summary
    return None
