"""
Per-application rate limiting.

Uses slowapi to enforce a process-wide default limit per client address.
The limiter is applied to every route by SlowAPIMiddleware.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from composers_api.core.config import Settings

HTTP_429 = 429


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter with its own in-memory counters.

    Args:
        settings: Supplies the default limit and the on/off switch.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Synchronous so SlowAPIMiddleware can call it directly.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=HTTP_429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
