#!/usr/bin/env python3
"""
Resume Models - Data structures produced by resume extraction.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


UNKNOWN_NAME = "Unknown"

MAX_EXPERIENCE_ENTRIES = 5
MAX_EDUCATION_ENTRIES = 3


def _drop_unset(values: Dict[str, Any]) -> Dict[str, Any]:
    """Optional entry fields are omitted from the serialized form when unset."""
    return {k: v for k, v in values.items() if v is not None}


@dataclass(frozen=True)
class ExperienceEntry:
    """One work experience item found after an experience header."""
    company: str
    position: str
    duration: Optional[str] = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_unset({
            "company": self.company,
            "position": self.position,
            "duration": self.duration,
            "description": self.description,
        })


@dataclass(frozen=True)
class EducationEntry:
    """One education item found after an education header."""
    institution: str
    degree: str
    field: Optional[str] = None
    year: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_unset({
            "institution": self.institution,
            "degree": self.degree,
            "field": self.field,
            "year": self.year,
        })


@dataclass(frozen=True)
class ResumeRecord:
    """Structured resume data extracted from free text.

    Attributes:
        name: Best-effort candidate name, "Unknown" when nothing qualifies
        email: First email address in the text, "" when absent
        phone: First phone number in the text, "" when absent
        skills: Lower-cased lines mentioning a skill keyword, first-seen order
        experience: At most MAX_EXPERIENCE_ENTRIES items
        education: At most MAX_EDUCATION_ENTRIES items

    Instances are immutable so a cached record can be shared between
    requests without copying.
    """
    name: str = UNKNOWN_NAME
    email: str = ""
    phone: str = ""
    skills: Tuple[str, ...] = field(default_factory=tuple)
    experience: Tuple[ExperienceEntry, ...] = field(default_factory=tuple)
    education: Tuple[EducationEntry, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if len(self.experience) > MAX_EXPERIENCE_ENTRIES:
            raise ValueError(
                f"experience holds {len(self.experience)} entries, "
                f"limit is {MAX_EXPERIENCE_ENTRIES}"
            )
        if len(self.education) > MAX_EDUCATION_ENTRIES:
            raise ValueError(
                f"education holds {len(self.education)} entries, "
                f"limit is {MAX_EDUCATION_ENTRIES}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the shape returned under `data` by the API."""
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "skills": list(self.skills),
            "experience": [entry.to_dict() for entry in self.experience],
            "education": [entry.to_dict() for entry in self.education],
        }
