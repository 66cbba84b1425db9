"""Ping utility used by the API health-check."""

from sipcalc.config import AppSettings
from sipcalc.schemas.ping import PingResponse


def get_ping_response(settings: AppSettings) -> PingResponse:
    """Return a static pong tagged with the running environment."""
    return PingResponse(message="pong", environment=settings.app_env)
