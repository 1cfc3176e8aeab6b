"""Keyword and pattern based signal extraction over normalized resume text.

Nothing here classifies or scores: a skill is reported when its keyword
occurs anywhere in the text, an experience phrase when one of the
configured patterns matches. The keyword lists and patterns live in
:class:`ExtractionConfig` so callers can swap them without code changes.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from .types import ContactInfo, ExtractionSections

LOGGER = logging.getLogger(__name__)

PHRASE_GROUP = "phrase"
MIN_PHRASE_LENGTH = 3
MAX_PHRASE_LENGTH = 100

DEFAULT_SKILL_KEYWORDS = (
    "JavaScript",
    "TypeScript",
    "Python",
    "Java",
    "C++",
    "React",
    "Node.js",
    "AWS",
    "Docker",
    "Kubernetes",
    "SQL",
    "MongoDB",
    "Git",
    "Agile",
    "Machine Learning",
    "Data Analysis",
    "Project Management",
    "Leadership",
)

DEFAULT_EDUCATION_KEYWORDS = (
    "Bachelor",
    "Master",
    "PhD",
    "Degree",
    "University",
    "College",
    "Computer Science",
    "Engineering",
    "Business Administration",
)

DEFAULT_EXPERIENCE_PATTERNS = (
    r"(?P<phrase>\d+\+?\s*years?\s+(?:of\s+)?experience)",
    r"worked\s+(?:as|at|with)\s+(?P<phrase>[^.,\n]+)",
    r"developed\s+(?P<phrase>[^.,\n]+)",
    r"managed\s+(?P<phrase>[^.,\n]+)",
    r"led\s+(?P<phrase>[^.,\n]+)",
)

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_PATTERN = re.compile(r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
LINKEDIN_PATTERN = re.compile(r"linkedin\.com/in/[\w-]+", re.IGNORECASE)


def compile_experience_pattern(pattern: Union[str, re.Pattern[str]]) -> re.Pattern[str]:
    """Compile *pattern* case-insensitively and check it exposes a ``phrase`` group."""

    if isinstance(pattern, re.Pattern):
        compiled = pattern
        if not compiled.flags & re.IGNORECASE:
            compiled = re.compile(pattern.pattern, pattern.flags | re.IGNORECASE)
    else:
        compiled = re.compile(pattern, re.IGNORECASE)
    if PHRASE_GROUP not in compiled.groupindex:
        raise ValueError(f"Experience pattern {compiled.pattern!r} has no (?P<{PHRASE_GROUP}>...) group")
    return compiled


def _compile_all(patterns: Iterable[Union[str, re.Pattern[str]]]) -> List[re.Pattern[str]]:
    return [compile_experience_pattern(pattern) for pattern in patterns]


@dataclass
class ExtractionConfig:
    """Ordered keyword lists and experience patterns used for extraction."""

    skill_keywords: List[str] = field(default_factory=lambda: list(DEFAULT_SKILL_KEYWORDS))
    education_keywords: List[str] = field(default_factory=lambda: list(DEFAULT_EDUCATION_KEYWORDS))
    experience_patterns: List[re.Pattern[str]] = field(
        default_factory=lambda: _compile_all(DEFAULT_EXPERIENCE_PATTERNS)
    )

    def __post_init__(self) -> None:
        self.skill_keywords = [keyword for keyword in self.skill_keywords if keyword]
        self.education_keywords = [keyword for keyword in self.education_keywords if keyword]
        self.experience_patterns = _compile_all(self.experience_patterns)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ExtractionConfig":
        """Build a config from a mapping; missing keys fall back to the defaults."""

        defaults = cls()
        return cls(
            skill_keywords=list(payload.get("skill_keywords", defaults.skill_keywords)),
            education_keywords=list(payload.get("education_keywords", defaults.education_keywords)),
            experience_patterns=list(payload.get("experience_patterns", defaults.experience_patterns)),
        )

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "ExtractionConfig":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise ValueError("Extraction config must be a JSON object")
        return cls.from_dict(payload)

    def to_dict(self) -> dict:
        return {
            "skill_keywords": list(self.skill_keywords),
            "education_keywords": list(self.education_keywords),
            "experience_patterns": [pattern.pattern for pattern in self.experience_patterns],
        }


def match_keywords(text: str, keywords: Sequence[str]) -> List[str]:
    """Return the keywords occurring in *text*, in keyword-list order."""

    lowered = text.lower()
    return [keyword for keyword in keywords if keyword.lower() in lowered]


def match_experience(text: str, patterns: Sequence[re.Pattern[str]]) -> List[str]:
    phrases: List[str] = []
    for pattern in patterns:
        for match in pattern.finditer(text):
            phrase = (match.group(PHRASE_GROUP) or "").strip()
            if MIN_PHRASE_LENGTH < len(phrase) < MAX_PHRASE_LENGTH:
                phrases.append(phrase)
    return phrases


def extract_resume_sections(text: str, config: Optional[ExtractionConfig] = None) -> ExtractionSections:
    """Scan *text* for skills, experience phrases and education markers."""

    config = config or ExtractionConfig()
    sections = ExtractionSections(
        skills=match_keywords(text, config.skill_keywords),
        experience=match_experience(text, config.experience_patterns),
        education=match_keywords(text, config.education_keywords),
    )
    LOGGER.debug(
        "Found %s skills, %s experience phrases, %s education markers",
        len(sections.skills),
        len(sections.experience),
        len(sections.education),
    )
    return sections


def _unique(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(values))


def extract_contact_info(text: str) -> ContactInfo:
    """Find e-mail addresses, phone numbers and a LinkedIn profile path."""

    linkedin = LINKEDIN_PATTERN.search(text)
    return ContactInfo(
        emails=_unique(EMAIL_PATTERN.findall(text)),
        phones=_unique(PHONE_PATTERN.findall(text)),
        linkedin=linkedin.group(0) if linkedin else None,
    )


__all__ = [
    "ExtractionConfig",
    "DEFAULT_SKILL_KEYWORDS",
    "DEFAULT_EDUCATION_KEYWORDS",
    "DEFAULT_EXPERIENCE_PATTERNS",
    "compile_experience_pattern",
    "match_keywords",
    "match_experience",
    "extract_resume_sections",
    "extract_contact_info",
]
