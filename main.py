# main.py

from uvicorn import run

from blogapi import app
from blogapi.configs import settings


def main() -> None:
    """Serve the API with uvicorn, reloading on changes outside production."""
    run(
        "blogapi:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
        proxy_headers=True,
    )


if __name__ == "__main__":
    __all__ = ["app"]
    main()
