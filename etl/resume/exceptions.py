#!/usr/bin/env python3
"""
Resume parsing exceptions.

Every error carries a stable `code` that the API reports next to the
message, so callers can tell bad input apart from an extraction fault.
"""


class ResumeServiceError(Exception):
    """Base exception for resume parsing errors."""
    code = "INTERNAL_ERROR"


class ValidationError(ResumeServiceError):
    """Raised when input text is missing, empty or outside length bounds."""
    code = "VALIDATION_ERROR"


class InvalidFileTypeError(ValidationError):
    """Raised when an uploaded file has a MIME type we do not accept."""
    code = "INVALID_FILE_TYPE"


class FileUploadError(ValidationError):
    """Raised when an uploaded file cannot be received (e.g. too large)."""
    code = "FILE_UPLOAD_ERROR"


class ParsingError(ResumeServiceError):
    """Raised when the extractor hits an unexpected internal fault."""
    code = "PARSING_ERROR"
