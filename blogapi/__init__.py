from blogapi.main import app

__all__ = ["app"]
