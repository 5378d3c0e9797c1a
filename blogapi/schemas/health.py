from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """Liveness payload for `/health`."""

    status: str
    version: str
    timestamp: str
