"""Top-level package for the resume context pipeline."""

from .errors import (
    ContentTooShort,
    DecodeFailure,
    EmptyContent,
    FileInvalid,
    ResumeParsingError,
    UnsupportedFormat,
)
from .heuristics import ExtractionConfig, extract_contact_info, extract_resume_sections
from .pipeline import ResumeParser, build_interview_context, get_resume_metadata, parse_resume
from .prompt import format_resume_for_ai
from .text import normalize_text, sanitize_resume_text
from .validation import validate_resume_file

__all__ = [
    "parse_resume",
    "validate_resume_file",
    "get_resume_metadata",
    "format_resume_for_ai",
    "sanitize_resume_text",
    "extract_contact_info",
    "extract_resume_sections",
    "build_interview_context",
    "normalize_text",
    "ResumeParser",
    "ExtractionConfig",
    "ResumeParsingError",
    "FileInvalid",
    "UnsupportedFormat",
    "DecodeFailure",
    "EmptyContent",
    "ContentTooShort",
]
