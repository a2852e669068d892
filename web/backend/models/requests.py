#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import Literal, Optional


class ResumeParseRequest(BaseModel):
    """JSON body for POST /api/parse-resume."""
    content: Optional[str] = Field(None, description="Plain resume text")
    format: Optional[Literal['pdf', 'doc', 'docx', 'txt']] = Field(
        None,
        description="Format the text was decoded from (pdf, doc, docx, txt); defaults to txt"
    )
