#!/usr/bin/env python3
"""
Per-client rate limiting for every endpoint.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from core.config_loader import RateLimitConfig

logger = logging.getLogger(__name__)


def add_rate_limit_handlers(app: FastAPI, config: RateLimitConfig) -> Limiter:
    """Attach a limiter applying `config.limit` to all routes of the app."""
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[config.limit],
        enabled=config.enabled
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    return limiter


# Must stay sync: SlowAPIMiddleware does not await the handler
def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded for {get_remote_address(request)}: {exc.detail}")
    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "error": "Too many requests from this IP, please try again later.",
            "code": "RATE_LIMITED"
        }
    )
