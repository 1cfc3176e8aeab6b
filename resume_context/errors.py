"""Error taxonomy for the resume context pipeline.

Every error carries a message that is safe to show to an end user. The
underlying library exception, when there is one, is kept on ``cause`` and
chained through ``__cause__`` so callers can decide how to log it.
"""

from __future__ import annotations

from typing import List, Optional


class ResumeParsingError(Exception):
    """Base class for all pipeline failures."""

    default_message = "Failed to process resume."

    def __init__(self, message: Optional[str] = None, *, cause: Optional[BaseException] = None) -> None:
        self.message = message or self.default_message
        self.cause = cause
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause

    def cause_chain(self) -> List[BaseException]:
        """Return the chain of underlying exceptions, nearest first."""

        chain: List[BaseException] = []
        current = self.__cause__ or self.__context__
        while current is not None and current not in chain:
            chain.append(current)
            current = current.__cause__ or current.__context__
        return chain


class FileInvalid(ResumeParsingError):
    """Pre-flight check failed: missing, unreadable, oversized or wrong type."""

    default_message = "File not found or inaccessible"

    def __init__(self, reason: Optional[str] = None, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(reason, cause=cause)
        self.reason = self.message


class UnsupportedFormat(ResumeParsingError):
    """The file extension has no registered extractor."""

    def __init__(self, extension: str, *, cause: Optional[BaseException] = None) -> None:
        self.extension = extension
        shown = extension or "(none)"
        super().__init__(
            f"Unsupported file format: {shown}. Only PDF and DOCX are supported.",
            cause=cause,
        )


class DecodeFailure(ResumeParsingError):
    """The format library could not read the document bytes."""

    _MESSAGES = {
        "pdf": "Failed to parse PDF file. The file may be corrupted or password-protected.",
        "docx": "Failed to parse DOCX file. The file may be corrupted or in an unsupported format.",
    }

    def __init__(self, file_format: str, *, cause: Optional[BaseException] = None) -> None:
        self.file_format = file_format
        message = self._MESSAGES.get(
            file_format, f"Failed to parse {file_format.upper()} file. The file may be corrupted."
        )
        super().__init__(message, cause=cause)


class EmptyContent(ResumeParsingError):
    """The parser succeeded but produced no text."""

    _MESSAGES = {
        "pdf": "PDF contains no extractable text. It may be an image-based PDF.",
        "docx": "DOCX contains no extractable text.",
    }

    def __init__(self, file_format: str) -> None:
        self.file_format = file_format
        super().__init__(
            self._MESSAGES.get(file_format, f"{file_format.upper()} contains no extractable text.")
        )


class ContentTooShort(ResumeParsingError):
    """Extracted text is below the minimum useful length."""

    def __init__(self, length: int, minimum: int) -> None:
        self.length = length
        self.minimum = minimum
        super().__init__("Resume appears to be empty or too short. Please upload a valid resume.")


__all__ = [
    "ResumeParsingError",
    "FileInvalid",
    "UnsupportedFormat",
    "DecodeFailure",
    "EmptyContent",
    "ContentTooShort",
]
