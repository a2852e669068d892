#!/usr/bin/env python3
"""
Resume Extractor - deterministic heuristic extraction of resume fields.

Pipeline shape:
- split text into non-empty trimmed lines
- classify with regexes (email, phone, name) and keyword vocabularies
  (skills, experience headers, education headers)
- accumulate into a bounded ResumeRecord

No I/O and no shared mutable state, so one extractor instance can serve
concurrent callers.
"""
import logging
from typing import Optional

from etl.resume.exceptions import ParsingError
from etl.resume.keywords import KeywordVocabulary, default_vocabulary
from etl.resume.matchers import (
    match_email,
    match_keyword_lines,
    match_name,
    match_phone,
    match_section_lines,
    split_lines,
)
from etl.resume.models import (
    MAX_EDUCATION_ENTRIES,
    MAX_EXPERIENCE_ENTRIES,
    UNKNOWN_NAME,
    EducationEntry,
    ExperienceEntry,
    ResumeRecord,
)

logger = logging.getLogger(__name__)

POSITION_PLACEHOLDER = "Position"
EXPERIENCE_DESCRIPTION_PLACEHOLDER = "Experience details"
DEGREE_PLACEHOLDER = "Degree"


class ResumeExtractor:
    """Extract a ResumeRecord from plain resume text.

    Absence of a field is reported with default values, never as an error.
    """

    def __init__(self, vocabulary: Optional[KeywordVocabulary] = None):
        self.vocabulary = vocabulary or default_vocabulary()

    def extract(self, text: str) -> ResumeRecord:
        """Extract structured fields from text.

        Args:
            text: Resume text already decoded from its original format

        Returns:
            ResumeRecord with every field populated or defaulted

        Raises:
            ParsingError: If extraction fails unexpectedly
        """
        try:
            return self._extract(text)
        except ParsingError:
            raise
        except Exception as e:
            logger.error(f"Resume extraction failed: {e}", exc_info=True)
            raise ParsingError(f"Failed to parse resume content: {e}") from e

    def _extract(self, text: str) -> ResumeRecord:
        lines = split_lines(text)

        experience = [
            ExperienceEntry(
                company=line,
                position=POSITION_PLACEHOLDER,
                description=EXPERIENCE_DESCRIPTION_PLACEHOLDER,
            )
            for line in match_section_lines(lines, self.vocabulary.experience)
        ]
        education = [
            EducationEntry(institution=line, degree=DEGREE_PLACEHOLDER)
            for line in match_section_lines(lines, self.vocabulary.education)
        ]

        record = ResumeRecord(
            name=match_name(lines) or UNKNOWN_NAME,
            email=match_email(text),
            phone=match_phone(text),
            skills=tuple(match_keyword_lines(lines, self.vocabulary.skills)),
            experience=tuple(experience[:MAX_EXPERIENCE_ENTRIES]),
            education=tuple(education[:MAX_EDUCATION_ENTRIES]),
        )
        logger.debug(
            f"Extracted resume fields from {len(lines)} lines: "
            f"{len(record.skills)} skills, {len(record.experience)} experience, "
            f"{len(record.education)} education"
        )
        return record


_default_extractor: Optional[ResumeExtractor] = None


def extract(text: str) -> ResumeRecord:
    """Extract with the bundled keyword vocabulary."""
    global _default_extractor
    if _default_extractor is None:
        _default_extractor = ResumeExtractor()
    return _default_extractor.extract(text)
