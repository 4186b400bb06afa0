"""Health API."""

from web.api.health.views import check_health, check_readiness, ping

__all__ = [
    "ping",
    "check_health",
    "check_readiness",
]
