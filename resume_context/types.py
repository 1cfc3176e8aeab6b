"""Common data structures used across the resume context pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class FileStat:
    """Size information reported by a storage backend."""

    size: int


@dataclass
class ValidationResult:
    """Outcome of the pre-extraction file check."""

    valid: bool
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"valid": self.valid}
        if self.error is not None:
            payload["error"] = self.error
        return payload


@dataclass
class ResumeMetadata:
    """Derived view over normalized resume text."""

    raw_text: str
    word_count: int
    has_content: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ExtractionSections:
    """Keyword and phrase matches found in resume text."""

    skills: List[str] = field(default_factory=list)
    experience: List[str] = field(default_factory=list)
    education: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ContactInfo:
    """Contact identifiers; emails and phones hold unique values in first-seen order."""

    emails: List[str] = field(default_factory=list)
    phones: List[str] = field(default_factory=list)
    linkedin: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"emails": list(self.emails), "phones": list(self.phones)}
        if self.linkedin is not None:
            payload["linkedin"] = self.linkedin
        return payload


@dataclass
class InterviewContext:
    """Everything needed to brief an interview agent about one candidate."""

    resume_text: str
    metadata: ResumeMetadata
    sections: ExtractionSections
    contact: ContactInfo
    prompt: str
    candidate_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "candidate_name": self.candidate_name,
            "resume_text": self.resume_text,
            "metadata": self.metadata.to_dict(),
            "sections": self.sections.to_dict(),
            "contact": self.contact.to_dict(),
            "prompt": self.prompt,
        }


__all__ = [
    "FileStat",
    "ValidationResult",
    "ResumeMetadata",
    "ExtractionSections",
    "ContactInfo",
    "InterviewContext",
]
