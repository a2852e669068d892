"""API route handlers."""

from .resume import router as resume_router
from .stats import router as stats_router
