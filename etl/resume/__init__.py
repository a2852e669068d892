#!/usr/bin/env python3
"""
Resume Extraction Module - heuristic parsing of resume text.

Handles:
- Input validation for resume text
- Line-oriented field extraction (name, email, phone, skills, experience, education)
- Cache-mediated parsing via ResumeParsingService
"""
from etl.resume.exceptions import (
    ResumeServiceError,
    ValidationError,
    InvalidFileTypeError,
    FileUploadError,
    ParsingError,
)
from etl.resume.models import ResumeRecord, ExperienceEntry, EducationEntry
from etl.resume.keywords import KeywordVocabulary, load_vocabulary
from etl.resume.extractor import ResumeExtractor, extract
from etl.resume.validation import ResumeInput, validate_resume_input
from etl.resume.service import ResumeParsingService

__all__ = [
    'ResumeServiceError',
    'ValidationError',
    'InvalidFileTypeError',
    'FileUploadError',
    'ParsingError',
    'ResumeRecord',
    'ExperienceEntry',
    'EducationEntry',
    'KeywordVocabulary',
    'load_vocabulary',
    'ResumeExtractor',
    'extract',
    'ResumeInput',
    'validate_resume_input',
    'ResumeParsingService',
]
