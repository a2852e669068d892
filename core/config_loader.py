import yaml
import os
import logging
from typing import List, Optional
from pydantic import BaseModel, Field

from core.cache.result_cache import CACHE_TTL_SECONDS, SWEEP_INTERVAL_SECONDS
from etl.resume.validation import MIN_CONTENT_LENGTH, MAX_CONTENT_LENGTH

logger = logging.getLogger(__name__)


class CacheConfig(BaseModel):
    """Configuration for the in-process result cache."""
    enabled: bool = True
    ttl_seconds: int = Field(default=CACHE_TTL_SECONDS, gt=0)
    # Background sweep cadence; reads enforce the TTL regardless
    sweep_interval_seconds: int = Field(default=SWEEP_INTERVAL_SECONDS, gt=0)


class ExtractionConfig(BaseModel):
    """Configuration for the heuristic extractor."""
    # YAML keyword vocabulary; None uses the bundled etl/resume/keywords.yaml
    keywords_file: Optional[str] = None


class ValidationConfig(BaseModel):
    """Bounds applied to resume text before extraction."""
    min_content_length: int = Field(default=MIN_CONTENT_LENGTH, ge=1)
    max_content_length: int = Field(default=MAX_CONTENT_LENGTH, ge=1)
    max_upload_bytes: int = Field(default=5 * 1024 * 1024, ge=1)


class RateLimitConfig(BaseModel):
    enabled: bool = True
    # slowapi limit string, per client address
    limit: str = "100/15minutes"


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = "0.0.0.0"
    port: int = 3001
    environment: str = "development"
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    rate_limit: RateLimitConfig = Field(default_factory=RateLimitConfig)


class AppConfig(BaseModel):
    cache: CacheConfig = Field(default_factory=CacheConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    web: WebConfig = Field(default_factory=WebConfig)


def _section(data: dict, name: str) -> dict:
    if name not in data or data[name] is None:
        data[name] = {}
    return data[name]


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from root), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info("No config.yaml found, using default configuration")

    # Allow env var overrides for cache timing
    env_ttl = os.environ.get("CACHE_TTL_SECONDS")
    if env_ttl:
        _section(data, 'cache')['ttl_seconds'] = int(env_ttl)

    env_sweep = os.environ.get("CACHE_SWEEP_INTERVAL_SECONDS")
    if env_sweep:
        _section(data, 'cache')['sweep_interval_seconds'] = int(env_sweep)

    # Allow env var override for the keyword vocabulary
    env_keywords = os.environ.get("RESUME_KEYWORDS_FILE")
    if env_keywords:
        _section(data, 'extraction')['keywords_file'] = env_keywords

    # Web server overrides
    if 'WEB_HOST' in os.environ:
        _section(data, 'web')['host'] = os.environ['WEB_HOST']

    if 'WEB_PORT' in os.environ:
        _section(data, 'web')['port'] = int(os.environ['WEB_PORT'])

    if 'APP_ENV' in os.environ:
        _section(data, 'web')['environment'] = os.environ['APP_ENV']

    env_frontend_url = os.environ.get("FRONTEND_URL")
    if env_frontend_url:
        _section(data, 'web')['cors_origins'] = [env_frontend_url]

    return AppConfig(**data)
