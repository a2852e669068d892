#!/usr/bin/env python3
"""
Resume endpoints - parse resume text or an uploaded text file.
"""

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as PydanticValidationError
from starlette.datastructures import UploadFile

from core.config_loader import AppConfig, ValidationConfig
from etl.resume.exceptions import FileUploadError, InvalidFileTypeError, ValidationError
from etl.resume.service import ResumeParsingService
from etl.resume.validation import ResumeInput, validate_resume_input
from ..dependencies import get_config, get_parsing_service
from ..models.requests import ResumeParseRequest
from ..models.responses import ErrorResponse, ParsedResumeData, ResumeParseResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["resume"])

ALLOWED_MIME_TYPES = {
    'application/pdf',
    'text/plain',
    'application/msword',
    'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
}


def _format_pydantic_errors(exc: PydanticValidationError) -> str:
    return ', '.join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


async def _read_json_body(request: Request, limits: ValidationConfig) -> ResumeInput:
    raw = await request.body()
    if not raw:
        payload: Dict[str, Any] = {}
    else:
        try:
            payload = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ValidationError(f"Malformed JSON body: {e}")

    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    try:
        body = ResumeParseRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid input: {_format_pydantic_errors(e)}")

    return validate_resume_input(
        body.content,
        body.format,
        min_length=limits.min_content_length,
        max_length=limits.max_content_length
    )


async def _read_form_body(request: Request, limits: ValidationConfig) -> ResumeInput:
    form = await request.form()
    upload = form.get("file")

    if not isinstance(upload, UploadFile):
        content = form.get("content")
        return validate_resume_input(
            content if isinstance(content, str) else None,
            form.get("format") if isinstance(form.get("format"), str) else None,
            min_length=limits.min_content_length,
            max_length=limits.max_content_length
        )

    if upload.content_type not in ALLOWED_MIME_TYPES:
        raise InvalidFileTypeError(
            f"Invalid file type: {upload.content_type}. "
            f"Only PDF, DOC, DOCX, and TXT files are allowed."
        )

    data = await upload.read(limits.max_upload_bytes + 1)
    if len(data) > limits.max_upload_bytes:
        raise FileUploadError(
            f"File upload error: file exceeds {limits.max_upload_bytes // (1024 * 1024)}MB limit"
        )

    # Document formats are not decoded; the bytes are read as UTF-8 text
    content = data.decode('utf-8', errors='replace')
    if not content.strip():
        raise ValidationError("Uploaded file appears to be empty or unreadable")

    file_format = Path(upload.filename or '').suffix.lower().lstrip('.') or None
    return validate_resume_input(
        content,
        file_format,
        min_length=limits.min_content_length,
        max_length=limits.max_content_length
    )


@router.post(
    "/parse-resume",
    response_model=ResumeParseResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}}
)
async def parse_resume_endpoint(
    request: Request,
    service: ResumeParsingService = Depends(get_parsing_service),
    config: AppConfig = Depends(get_config)
):
    """
    Parse a resume into structured fields.

    Accepts either a JSON body `{"content": "...", "format": "txt"}` or a
    multipart upload with a `file` field (PDF, DOC, DOCX or TXT, max 5MB).
    Uploaded bytes are read as UTF-8 text.

    Identical content within the cache TTL is answered from cache.
    """
    start_time = time.perf_counter()
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(("multipart/form-data", "application/x-www-form-urlencoded")):
        resume_input = await _read_form_body(request, config.validation)
    else:
        resume_input = await _read_json_body(request, config.validation)

    record, from_cache = service.parse_with_status(resume_input.content)

    processing_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"Resume parsed successfully in {processing_ms:.1f}ms "
        f"(format: {resume_input.format}, cached: {from_cache})"
    )

    return ResumeParseResponse(
        success=True,
        data=ParsedResumeData(**record.to_dict())
    )
