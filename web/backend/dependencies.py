#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.

create_app() builds the config, result cache and parsing service once and
keeps them on app.state; the providers below hand them to endpoints.
"""

import os
import logging
from functools import lru_cache
from typing import Optional

from fastapi import Request

from core.cache.result_cache import ResultCacheService, get_result_cache, init_result_cache
from core.config_loader import AppConfig, load_config
from etl.resume.extractor import ResumeExtractor
from etl.resume.keywords import load_vocabulary
from etl.resume.service import ResumeParsingService

logger = logging.getLogger(__name__)


@lru_cache()
def load_app_config() -> AppConfig:
    """
    Get the process configuration with caching.

    Loads from the YAML file named by RESUME_PARSER_CONFIG (default
    config.yaml) and applies environment variable overrides.
    """
    return load_config(os.environ.get("RESUME_PARSER_CONFIG", "config.yaml"))


def build_cache(config: AppConfig) -> Optional[ResultCacheService]:
    """
    Result cache for an app built from config.

    Returns None when caching is disabled. The process-wide cache is reused
    while its TTL and sweep interval match the config.
    """
    if not config.cache.enabled:
        return None

    cache = get_result_cache()
    if cache is None or (cache.ttl_seconds, cache.sweep_interval_seconds) != (
        config.cache.ttl_seconds, config.cache.sweep_interval_seconds
    ):
        cache = init_result_cache(
            ttl_seconds=config.cache.ttl_seconds,
            sweep_interval_seconds=config.cache.sweep_interval_seconds
        )
    return cache


def build_parsing_service(
    config: AppConfig,
    cache: Optional[ResultCacheService]
) -> ResumeParsingService:
    """Parsing service using the configured keyword vocabulary and cache."""
    vocabulary = load_vocabulary(config.extraction.keywords_file)
    logger.info(f"Resume extractor using keyword vocabulary v{vocabulary.version}")
    return ResumeParsingService(ResumeExtractor(vocabulary), cache)


def get_config(request: Request) -> AppConfig:
    """FastAPI dependency returning the configuration the app was built with."""
    return request.app.state.config


def get_cache(request: Request) -> Optional[ResultCacheService]:
    """
    FastAPI dependency returning the app's result cache.

    Returns None when caching is disabled in configuration.
    """
    return request.app.state.cache


def get_parsing_service(request: Request) -> ResumeParsingService:
    """
    FastAPI dependency returning the cache-backed parsing service.

    Usage:
        @router.post("/endpoint")
        def my_endpoint(service: ResumeParsingService = Depends(get_parsing_service)):
            ...
    """
    return request.app.state.parsing_service
