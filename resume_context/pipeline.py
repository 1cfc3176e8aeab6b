"""End-to-end resume text pipeline."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from . import heuristics, ingestion, validation
from .prompt import format_resume_for_ai
from .storage import FileStorage, LocalFileStorage, PathLike
from .text import count_words, normalize_text
from .types import InterviewContext, ResumeMetadata

LOGGER = logging.getLogger(__name__)


class ResumeParser:
    """High-level orchestrator: validate, extract, normalize, check length."""

    def __init__(
        self,
        ingestion_config: Optional[ingestion.IngestionConfig] = None,
        extraction_config: Optional[heuristics.ExtractionConfig] = None,
        storage: Optional[FileStorage] = None,
        registry: Optional[ingestion.ExtractorRegistry] = None,
    ) -> None:
        self.registry = registry or ingestion.ExtractorRegistry()
        if ingestion_config is None:
            # Without an explicit policy, accept whatever the registry can read.
            ingestion_config = ingestion.IngestionConfig(supported_extensions=self.registry.extensions)
        self.ingestion_config = ingestion_config
        self.extraction_config = extraction_config or heuristics.ExtractionConfig()
        self.storage = storage or LocalFileStorage()

    def load_text(self, file_path: PathLike) -> str:
        extractor = self.registry.for_path(file_path)
        validation.check_resume_file(file_path, self.storage, self.ingestion_config)
        LOGGER.info("Extracting %s text from %s", extractor.name, file_path)
        data = self.storage.read_file(file_path)
        text = extractor.extract(data)
        LOGGER.debug("Extracted %s raw characters", len(text))
        return text

    def parse(self, file_path: PathLike) -> str:
        """Return normalized text for the resume at *file_path*.

        Raises:
            UnsupportedFormat, FileInvalid, DecodeFailure, EmptyContent, ContentTooShort
        """

        text = normalize_text(self.load_text(file_path))
        validation.ensure_min_length(text, self.ingestion_config.min_text_length)
        LOGGER.info("Parsed resume %s (%s characters)", file_path, len(text))
        return text

    def metadata(self, text: str) -> ResumeMetadata:
        return get_resume_metadata(text, self.ingestion_config.min_word_count)

    def interview_context(self, file_path: PathLike, candidate_name: Optional[str] = None) -> InterviewContext:
        text = self.parse(file_path)
        prompt = format_resume_for_ai(text, candidate_name, self.extraction_config)
        LOGGER.info("Resume context length: %s", len(prompt))
        return InterviewContext(
            resume_text=text,
            metadata=self.metadata(text),
            sections=heuristics.extract_resume_sections(text, self.extraction_config),
            contact=heuristics.extract_contact_info(text),
            prompt=prompt,
            candidate_name=candidate_name,
        )


def parse_resume(file_path: PathLike) -> str:
    """Convenience function returning normalized text for a PDF or DOCX resume."""

    parser = ResumeParser()
    return parser.parse(str(Path(file_path).expanduser()))


def get_resume_metadata(text: str, min_word_count: int = 50) -> ResumeMetadata:
    """Normalize *text* and report its word count; recomputed on every call."""

    cleaned = normalize_text(text)
    word_count = count_words(cleaned)
    return ResumeMetadata(raw_text=cleaned, word_count=word_count, has_content=word_count >= min_word_count)


def build_interview_context(file_path: PathLike, candidate_name: Optional[str] = None) -> InterviewContext:
    """Parse *file_path* and assemble the interview briefing for it."""

    parser = ResumeParser()
    return parser.interview_context(str(Path(file_path).expanduser()), candidate_name)
