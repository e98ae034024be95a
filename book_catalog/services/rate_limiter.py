"""
Rate Limiting

Per-client request limits for the books router, enforced by slowapi.

    reads  (list, get, author, title)  settings.rate_limit_default
    writes (create, delete)            settings.rate_limit_write

Counters live in settings.rate_limit_storage_uri (in-process memory unless
a shared backend such as redis:// is configured). A client over its limit
gets the standard envelope with status 429.
"""

import logging

from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from book_catalog.config import get_settings
from book_catalog.errors import rate_limited
from book_catalog.services.envelope import error_response

logger = logging.getLogger(__name__)
settings = get_settings()

RETRY_AFTER_SECONDS = 60


def get_client_ip(request: Request) -> str:
    """
    Rate limit key for a request.

    Behind a proxy the socket peer is the proxy itself, so the left-most
    X-Forwarded-For entry wins, then X-Real-IP, then the peer address.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return get_remote_address(request)


def create_limiter() -> Limiter:
    """Build the application limiter from settings (keyed by get_client_ip)."""
    limiter = Limiter(
        key_func=get_client_ip,
        default_limits=[settings.rate_limit_default],
        storage_uri=settings.rate_limit_storage_uri,
        strategy="fixed-window",
        enabled=settings.rate_limit_enabled,
    )

    logger.info(
        f"Rate limiter ready - enabled: {settings.rate_limit_enabled}, "
        f"reads: {settings.rate_limit_default}, writes: {settings.rate_limit_write}, "
        f"storage: {settings.rate_limit_storage_uri.split('://')[0]}"
    )

    return limiter


limiter = create_limiter()


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """
    Answer a rejected request with the 429 envelope.

    The exceeded limit (e.g. "100 per 1 minute") goes in X-RateLimit-Limit
    and the client is told to retry after a fixed window.
    """
    limit_detail = str(exc.detail)

    logger.warning(f"Rate limit {limit_detail} hit by {get_client_ip(request)}")

    return error_response(
        rate_limited(),
        headers={
            "Retry-After": str(RETRY_AFTER_SECONDS),
            "X-RateLimit-Limit": limit_detail,
        },
    )
