#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class ExperienceItem(BaseModel):
    """Work experience entry."""
    company: str = Field(min_length=1)
    position: str = Field(min_length=1)
    duration: Optional[str] = None
    description: Optional[str] = None


class EducationItem(BaseModel):
    """Education entry."""
    institution: str = Field(min_length=1)
    degree: str = Field(min_length=1)
    field: Optional[str] = None
    year: Optional[str] = None


class ParsedResumeData(BaseModel):
    """Structured resume fields."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "email": "john.doe@example.com",
                "phone": "+1-555-123-4567",
                "skills": ["skills: javascript, react, node.js, python"],
                "experience": [
                    {
                        "company": "Software Engineer at Tech Corp (2020-2023)",
                        "position": "Position",
                        "description": "Experience details"
                    }
                ],
                "education": [
                    {
                        "institution": "Bachelor of Science in Computer Science",
                        "degree": "Degree"
                    }
                ]
            }
        }
    )

    name: str
    email: str
    phone: str
    skills: List[str]
    experience: List[ExperienceItem] = Field(max_length=5)
    education: List[EducationItem] = Field(max_length=3)


class ResumeParseResponse(BaseModel):
    """Success envelope for a parsed resume."""
    success: bool
    data: ParsedResumeData


class ErrorResponse(BaseModel):
    """Failure envelope shared by every endpoint."""
    success: bool = False
    error: str
    code: str


class CacheStats(BaseModel):
    """Result cache statistics."""
    available: bool
    size: int = 0
    ttl_seconds: Optional[int] = None
    ttl_human: Optional[str] = None
    sweep_interval_seconds: Optional[int] = None
    memory_usage_bytes: int = 0
    memory_usage_human: Optional[str] = None
    cache_keys: List[str] = Field(default_factory=list)
    error: Optional[str] = None


class CacheStatsResponse(BaseModel):
    """Response containing cache statistics."""
    success: bool
    data: CacheStats


class Uptime(BaseModel):
    seconds: int
    minutes: int
    hours: int


class HealthResponse(BaseModel):
    """Service health details."""
    success: bool
    message: str
    timestamp: str
    environment: str
    version: str
    uptime: Uptime
    memory: dict
    cache: dict
