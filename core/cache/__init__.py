"""Cache Module - Caching services."""
from core.cache.result_cache import (
    CacheEntry,
    ResultCacheService,
    get_result_cache,
    init_result_cache,
    CACHE_TTL_SECONDS,
    SWEEP_INTERVAL_SECONDS
)

__all__ = [
    'CacheEntry',
    'ResultCacheService',
    'get_result_cache',
    'init_result_cache',
    'CACHE_TTL_SECONDS',
    'SWEEP_INTERVAL_SECONDS'
]
