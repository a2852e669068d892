#!/usr/bin/env python3
"""
Input validation for resume parsing requests.

Runs before extraction: a request that fails here never reaches the
extractor or the cache.
"""
from dataclasses import dataclass
from typing import Optional

from etl.resume.exceptions import ValidationError

SUPPORTED_FORMATS = ('pdf', 'doc', 'docx', 'txt')
DEFAULT_FORMAT = 'txt'

MIN_CONTENT_LENGTH = 10
MAX_CONTENT_LENGTH = 50_000


@dataclass
class ResumeInput:
    """Validated resume text plus its source format tag."""
    content: str
    format: str = DEFAULT_FORMAT


def validate_resume_input(
    content: Optional[str],
    format: Optional[str] = None,
    min_length: int = MIN_CONTENT_LENGTH,
    max_length: int = MAX_CONTENT_LENGTH,
) -> ResumeInput:
    """Check resume text and format tag.

    Args:
        content: Raw resume text, None when nothing was provided
        format: Source format tag (pdf, doc, docx, txt), defaults to txt
        min_length: Minimum number of characters
        max_length: Maximum number of characters

    Returns:
        ResumeInput ready for extraction

    Raises:
        ValidationError: If content is missing, blank or out of bounds,
            or the format tag is unsupported
    """
    if content is None:
        raise ValidationError("No resume content or file provided")

    if not isinstance(content, str):
        raise ValidationError("Resume content must be a string")

    if not content.strip():
        raise ValidationError("Resume content must not be empty")

    if len(content) < min_length:
        raise ValidationError(
            f"Resume content must be at least {min_length} characters"
        )

    if len(content) > max_length:
        raise ValidationError(
            f"Resume content is too long (max {max_length:,} characters)"
        )

    format = (format or DEFAULT_FORMAT).lower()
    if format not in SUPPORTED_FORMATS:
        supported = ', '.join(SUPPORTED_FORMATS)
        raise ValidationError(
            f"Unsupported resume format: {format}. Supported formats: {supported}"
        )

    return ResumeInput(content=content, format=format)
