#!/usr/bin/env python3
"""
Stats endpoints - view result cache statistics.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from core.cache.result_cache import ResultCacheService
from ..dependencies import get_cache
from ..models.responses import CacheStats, CacheStatsResponse

router = APIRouter(prefix="/cache", tags=["stats"])


@router.get("/stats", response_model=CacheStatsResponse)
def get_cache_stats(cache: Optional[ResultCacheService] = Depends(get_cache)):
    """
    Get statistics about the result cache.

    Returns entry count, TTL, approximate memory footprint and the
    fingerprints currently stored (stale entries included until swept).
    """
    if cache is None:
        return CacheStatsResponse(success=True, data=CacheStats(available=False))

    return CacheStatsResponse(
        success=True,
        data=CacheStats(**cache.get_cache_stats())
    )
