#!/usr/bin/env python3
"""
Field matchers for heuristic resume extraction.

Each matcher is a pure function over the whole text or the list of
non-empty, trimmed lines. ResumeExtractor composes them; they are kept
separate so each heuristic can be tested and replaced on its own.
"""
import re
from typing import Iterable, List, Optional, Sequence

EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b", re.ASCII)

# Loose North-American shape: +CC, (AAA), then 3-3-4 digits with . - or space
PHONE_PATTERN = re.compile(r"(\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}", re.ASCII)

# Exactly two title-case words, e.g. "Jane Smith"
NAME_PATTERN = re.compile(r"[A-Z][a-z]+ [A-Z][a-z]+")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50

SECTION_LOOKAHEAD = 10
SECTION_LINE_MIN_LENGTH = 3
SECTION_LINE_MAX_LENGTH = 100


def split_lines(text: str) -> List[str]:
    """Non-empty lines of text, each stripped of surrounding whitespace."""
    return [line.strip() for line in text.split('\n') if line.strip()]


def match_email(text: str) -> str:
    """First email-shaped substring of text, or ''."""
    match = EMAIL_PATTERN.search(text)
    return match.group() if match else ""


def match_phone(text: str) -> str:
    """First phone-shaped substring of text, or ''."""
    match = PHONE_PATTERN.search(text)
    return match.group() if match else ""


def is_name_line(line: str) -> bool:
    """True if the line looks like a two-word title-case name."""
    if not NAME_MIN_LENGTH < len(line) < NAME_MAX_LENGTH:
        return False
    if not NAME_PATTERN.fullmatch(line):
        return False
    return not (EMAIL_PATTERN.search(line) or PHONE_PATTERN.search(line))


def match_name(lines: Sequence[str]) -> Optional[str]:
    """First line accepted by is_name_line, or None."""
    return next((line for line in lines if is_name_line(line)), None)


def contains_keyword(line: str, keywords: Iterable[str]) -> bool:
    """Case-insensitive substring test of any keyword against the line."""
    lowered = line.lower()
    return any(keyword in lowered for keyword in keywords)


def match_keyword_lines(lines: Sequence[str], keywords: Iterable[str]) -> List[str]:
    """Lower-cased lines mentioning any keyword, deduplicated, first-seen order.

    The whole line is kept, not just the keyword that matched.
    """
    keywords = tuple(keywords)
    found: List[str] = []
    for line in lines:
        if contains_keyword(line, keywords):
            token = line.lower().strip()
            if token not in found:
                found.append(token)
    return found


def match_section_lines(
    lines: Sequence[str],
    triggers: Iterable[str],
    lookahead: int = SECTION_LOOKAHEAD,
) -> List[str]:
    """Lines following section headers.

    For every line containing a trigger, returns the first of the next
    lines (up to lookahead - 1 of them) whose length is strictly between
    SECTION_LINE_MIN_LENGTH and SECTION_LINE_MAX_LENGTH. Each header is
    evaluated on its own, so headers close together can pick the same line.
    """
    triggers = tuple(triggers)
    found: List[str] = []
    for i, line in enumerate(lines):
        if not contains_keyword(line, triggers):
            continue
        for candidate in lines[i + 1:min(i + lookahead, len(lines))]:
            if SECTION_LINE_MIN_LENGTH < len(candidate) < SECTION_LINE_MAX_LENGTH:
                found.append(candidate)
                break
    return found
