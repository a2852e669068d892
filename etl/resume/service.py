#!/usr/bin/env python3
"""
Resume Parsing Service - cache-mediated extraction.

Control flow: fingerprint the text, look it up in the result cache, return
the cached record on a fresh hit, otherwise extract, cache and return.
The cache is an optimization only: if it misbehaves we extract anyway.
"""
import logging
from typing import Optional, Tuple

from core.cache.result_cache import ResultCacheService
from core.utils import ContentFingerprinter
from etl.resume.exceptions import ParsingError
from etl.resume.extractor import ResumeExtractor
from etl.resume.models import ResumeRecord

logger = logging.getLogger(__name__)


class ResumeParsingService:
    """Parse resume text through an optional result cache."""

    def __init__(
        self,
        extractor: Optional[ResumeExtractor] = None,
        cache: Optional[ResultCacheService] = None
    ):
        self.extractor = extractor or ResumeExtractor()
        self.cache = cache

    def parse(self, text: str) -> ResumeRecord:
        """Return the structured record for text, from cache when fresh.

        Raises:
            ParsingError: If extraction fails
        """
        record, _ = self.parse_with_status(text)
        return record

    def parse_with_status(self, text: str) -> Tuple[ResumeRecord, bool]:
        """Like parse, also reporting whether the record came from cache."""
        fingerprint = self._lookup_key(text)

        if fingerprint is not None:
            cached = self._cache_get(fingerprint)
            if cached is not None:
                logger.info(f"Cache hit for content hash: {ContentFingerprinter.short(fingerprint)}")
                return cached, True

        try:
            record = self.extractor.extract(text)
        except ParsingError:
            raise
        except Exception as e:
            logger.error(f"Resume extraction failed: {e}", exc_info=True)
            raise ParsingError(f"Failed to parse resume content: {e}") from e

        if fingerprint is not None:
            self._cache_put(fingerprint, record)

        return record, False

    def _lookup_key(self, text: str) -> Optional[str]:
        if self.cache is None:
            return None
        try:
            return self.cache.fingerprint(text)
        except Exception as e:
            logger.warning(f"Could not fingerprint resume text, skipping cache: {e}")
            return None

    def _cache_get(self, fingerprint: str) -> Optional[ResumeRecord]:
        try:
            return self.cache.get(fingerprint)
        except Exception as e:
            logger.warning(f"Result cache lookup failed, extracting fresh: {e}")
            return None

    def _cache_put(self, fingerprint: str, record: ResumeRecord) -> None:
        try:
            self.cache.put(fingerprint, record)
        except Exception as e:
            logger.warning(f"Result cache write failed: {e}")
