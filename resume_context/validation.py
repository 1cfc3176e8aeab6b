"""Pre- and post-extraction checks on resume files and text."""

from __future__ import annotations

import logging
from typing import Optional

from .errors import ContentTooShort, FileInvalid
from .ingestion import IngestionConfig, detect_file_type
from .storage import FileStorage, LocalFileStorage, PathLike
from .types import ValidationResult

LOGGER = logging.getLogger(__name__)


def _size_limit_label(limit: int) -> str:
    megabytes = limit / (1024 * 1024)
    return f"{megabytes:g}MB"


def check_resume_file(
    file_path: PathLike,
    storage: Optional[FileStorage] = None,
    config: Optional[IngestionConfig] = None,
) -> None:
    """Raise :class:`FileInvalid` unless *file_path* may be handed to an extractor.

    Only metadata is consulted; the file contents are not read.
    """

    storage = storage or LocalFileStorage()
    config = config or IngestionConfig()

    try:
        if not storage.exists(file_path):
            raise FileInvalid("File not found or inaccessible")
        size = storage.stat(file_path).size
    except OSError as exc:
        LOGGER.debug("Could not stat %s", file_path, exc_info=True)
        raise FileInvalid("File not found or inaccessible", cause=exc) from exc

    if size > config.max_file_size:
        raise FileInvalid(f"File size exceeds {_size_limit_label(config.max_file_size)} limit")

    if detect_file_type(file_path) not in config.supported_extensions:
        raise FileInvalid("Only PDF and DOCX files are supported")


def validate_resume_file(
    file_path: PathLike,
    storage: Optional[FileStorage] = None,
    config: Optional[IngestionConfig] = None,
) -> ValidationResult:
    """Report whether *file_path* passes the pre-extraction checks. Never raises for bad files."""

    try:
        check_resume_file(file_path, storage, config)
    except FileInvalid as exc:
        LOGGER.info("Resume file %s rejected: %s", file_path, exc.message)
        return ValidationResult(valid=False, error=exc.message)
    return ValidationResult(valid=True)


def ensure_min_length(text: str, minimum: int = 50) -> str:
    """Return *text* when its trimmed length reaches *minimum*, else raise :class:`ContentTooShort`."""

    length = len(text.strip())
    if length < minimum:
        raise ContentTooShort(length, minimum)
    return text


__all__ = ["check_resume_file", "validate_resume_file", "ensure_min_length"]
