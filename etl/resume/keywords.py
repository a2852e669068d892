#!/usr/bin/env python3
"""
Keyword vocabularies for heuristic extraction.

The vocabularies live in a versioned YAML file next to this module so the
heuristic can be tuned without touching extraction control flow.
"""
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

DEFAULT_KEYWORDS_FILE = Path(__file__).parent / "keywords.yaml"

CATEGORIES = ("skills", "experience", "education")


@dataclass(frozen=True)
class KeywordVocabulary:
    """Lower-cased keyword lists per category, duplicates removed."""
    version: int
    skills: Tuple[str, ...]
    experience: Tuple[str, ...]
    education: Tuple[str, ...]


def _normalize(keywords) -> Tuple[str, ...]:
    seen = []
    for keyword in keywords:
        value = str(keyword).strip().lower()
        if value and value not in seen:
            seen.append(value)
    return tuple(seen)


def vocabulary_from_dict(data) -> KeywordVocabulary:
    """Build a vocabulary from a parsed mapping.

    Raises:
        ValueError: If the mapping is malformed or a category is missing/empty
    """
    if not isinstance(data, dict):
        raise ValueError(
            f"Keyword vocabulary must be a mapping, got {type(data).__name__}"
        )

    lists = {}
    for category in CATEGORIES:
        raw = data.get(category)
        if not isinstance(raw, list):
            raise ValueError(f"Keyword vocabulary is missing list '{category}'")
        lists[category] = _normalize(raw)
        if not lists[category]:
            raise ValueError(f"Keyword vocabulary '{category}' is empty")

    return KeywordVocabulary(version=int(data.get("version", 1)), **lists)


def load_vocabulary(path: Optional[str] = None) -> KeywordVocabulary:
    """Load a keyword vocabulary from YAML.

    Args:
        path: Vocabulary file, defaults to the bundled keywords.yaml

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML is invalid or incomplete
    """
    vocab_path = Path(path) if path else DEFAULT_KEYWORDS_FILE
    if not vocab_path.exists():
        raise FileNotFoundError(f"Keyword vocabulary not found: {vocab_path}")

    try:
        with open(vocab_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in keyword vocabulary: {e}")

    vocabulary = vocabulary_from_dict(data)
    logger.debug(
        f"Loaded keyword vocabulary v{vocabulary.version} from {vocab_path} "
        f"({len(vocabulary.skills)} skills)"
    )
    return vocabulary


@lru_cache()
def default_vocabulary() -> KeywordVocabulary:
    """Bundled vocabulary, loaded once per process."""
    return load_vocabulary()
