#!/usr/bin/env python3
"""
Resume Parser API - FastAPI Application

Extracts structured fields from resume text, with an in-process result cache.

Usage:
    uv run python -m web.backend.app

Then open:
    - http://localhost:3001/api/parse-resume - Parse endpoint (POST)
    - http://localhost:3001/health - Health check
    - http://localhost:3001/cache/stats - Result cache statistics
    - http://localhost:3001/docs - API Documentation (Swagger UI)
"""

import logging
import resource
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from core.cache.result_cache import ResultCacheService
from core.config_loader import AppConfig
from .dependencies import build_cache, build_parsing_service, get_cache, load_app_config
from .exceptions import register_exception_handlers
from .models.responses import HealthResponse, Uptime
from .rate_limit import add_rate_limit_handlers
from .routers import resume_router, stats_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

_started_at = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the cache sweeper on startup, stop it on shutdown."""
    cache = app.state.cache
    if cache is not None:
        cache.start_sweeper()
        logger.info(f"Cache TTL: {cache.ttl_seconds // 60} minutes")

    yield

    if cache is not None:
        cache.stop_sweeper()
    logger.info("Shutting down Resume Parser API")


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Build the FastAPI app with middleware, handlers and routers."""
    config = config or load_app_config()

    app = FastAPI(
        title="Resume Parser API",
        description="Heuristic extraction of structured fields from resume text",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.config = config
    app.state.environment = config.web.environment
    app.state.cache = build_cache(config)
    app.state.parsing_service = build_parsing_service(config, app.state.cache)

    add_rate_limit_handlers(app, config.web.rate_limit)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.web.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"]
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f} ms")
        return response

    register_exception_handlers(app)

    app.include_router(resume_router)
    app.include_router(stats_router)

    @app.get("/health", response_model=HealthResponse)
    def health_check(cache: Optional[ResultCacheService] = Depends(get_cache)):
        """Health check endpoint with uptime, memory and cache size."""
        uptime = int(time.monotonic() - _started_at)
        # ru_maxrss is reported in kilobytes on Linux
        max_rss_kb = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss

        return HealthResponse(
            success=True,
            message="Resume Parser API is running",
            timestamp=datetime.now(timezone.utc).isoformat(),
            environment=app.state.environment,
            version=API_VERSION,
            uptime=Uptime(seconds=uptime, minutes=uptime // 60, hours=uptime // 3600),
            memory={"max_rss": f"{round(max_rss_kb / 1024)} MB"},
            cache={"size": cache.size if cache is not None else 0}
        )

    return app


app = create_app()


def main():
    """Run the web server."""
    import uvicorn

    config = load_app_config()
    logger.info(f"Starting Resume Parser API on {config.web.host}:{config.web.port}")
    logger.info(f"Health check: http://{config.web.host}:{config.web.port}/health")
    logger.info(f"Environment: {config.web.environment}")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
