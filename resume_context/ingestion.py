"""Document ingestion: turn PDF/DOCX bytes into plain text."""

from __future__ import annotations

import io
import logging
import threading
import warnings
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import docx  # python-docx
import pdfplumber
from docx.table import Table

from .errors import DecodeFailure, EmptyContent, UnsupportedFormat
from .storage import PathLike

LOGGER = logging.getLogger(__name__)

MAX_FILE_SIZE = 10 * 1024 * 1024
SUPPORTED_EXTENSIONS = (".pdf", ".docx")

_WARNINGS_LOCK = threading.Lock()


@dataclass
class IngestionConfig:
    """Limits applied before and after extraction."""

    max_file_size: int = MAX_FILE_SIZE
    min_text_length: int = 50
    min_word_count: int = 50
    supported_extensions: Tuple[str, ...] = SUPPORTED_EXTENSIONS


def detect_file_type(file_path: PathLike) -> str:
    """Return the lower-cased extension of *file_path*, including the dot."""

    return Path(file_path).suffix.lower()


def extract_pdf_text(data: bytes) -> str:
    """Extract text from PDF bytes using pdfplumber.

    Raises:
        EmptyContent: No selectable text, usually a scanned/image-only PDF.
        DecodeFailure: pdfplumber could not open or read the document.
    """

    try:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as exc:
        LOGGER.debug("PDF parsing error", exc_info=True)
        raise DecodeFailure("pdf", cause=exc) from exc

    LOGGER.debug("Extracted text from %s PDF pages", len(pages))
    text = "\n\n".join(page for page in pages if page.strip())
    if not text.strip():
        raise EmptyContent("pdf")
    return text


def _table_lines(table) -> List[str]:
    lines: List[str] = []
    for row in table.rows:
        cells: List[str] = []
        seen: List[object] = []
        for cell in row.cells:
            # a merged cell is reported once per grid column it spans
            if any(cell._tc is tc for tc in seen):
                continue
            seen.append(cell._tc)
            value = cell.text.strip()
            if value:
                cells.append(value)
        if cells:
            lines.append(" ".join(cells))
    return lines


def _read_docx_blocks(data: bytes) -> Tuple[List[str], List[warnings.WarningMessage]]:
    # catch_warnings swaps process-wide filters, so only one reader may hold it at a time.
    with _WARNINGS_LOCK:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            document = docx.Document(io.BytesIO(data))
            parts: List[str] = []
            for block in document.iter_inner_content():
                if isinstance(block, Table):
                    parts.extend(_table_lines(block))
                elif block.text.strip():
                    parts.append(block.text)
    return parts, list(caught)


def extract_docx_text(data: bytes) -> str:
    """Extract paragraph and table text, in document order, from DOCX bytes.

    Warnings emitted while the package is read are logged, not raised.

    Raises:
        EmptyContent: The document holds no text.
        DecodeFailure: python-docx could not open the package.
    """

    try:
        parts, caught = _read_docx_blocks(data)
    except Exception as exc:
        LOGGER.debug("DOCX parsing error", exc_info=True)
        raise DecodeFailure("docx", cause=exc) from exc

    for warning in caught:
        LOGGER.warning("DOCX conversion warning: %s", warning.message)

    text = "\n\n".join(parts)
    if not text.strip():
        raise EmptyContent("docx")
    return text


class DocumentExtractor(ABC):
    """A text extractor for one family of file extensions."""

    #: Lower-cased extensions, dot included.
    extensions: Tuple[str, ...] = ()
    #: Short format name used in errors and logs.
    name: str = ""

    def can_handle(self, extension: str) -> bool:
        return extension.lower() in self.extensions

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Return the raw text contained in *data*."""


class PdfExtractor(DocumentExtractor):
    extensions = (".pdf",)
    name = "pdf"

    def extract(self, data: bytes) -> str:
        return extract_pdf_text(data)


class DocxExtractor(DocumentExtractor):
    extensions = (".docx",)
    name = "docx"

    def extract(self, data: bytes) -> str:
        return extract_docx_text(data)


class ExtractorRegistry:
    """Select an extractor by file extension."""

    def __init__(self, extractors: Optional[Iterable[DocumentExtractor]] = None) -> None:
        self._extractors: List[DocumentExtractor] = []
        for extractor in extractors if extractors is not None else (PdfExtractor(), DocxExtractor()):
            self.register(extractor)

    def register(self, extractor: DocumentExtractor) -> None:
        """Add *extractor*; later registrations win for shared extensions."""

        self._extractors.insert(0, extractor)

    @property
    def extensions(self) -> Tuple[str, ...]:
        seen: Dict[str, None] = {}
        for extractor in reversed(self._extractors):
            for extension in extractor.extensions:
                seen.setdefault(extension, None)
        return tuple(seen)

    def get(self, extension: str) -> DocumentExtractor:
        for extractor in self._extractors:
            if extractor.can_handle(extension):
                return extractor
        raise UnsupportedFormat(extension)

    def for_path(self, file_path: PathLike) -> DocumentExtractor:
        """Return the extractor for *file_path* without touching the file."""

        return self.get(detect_file_type(file_path))


__all__ = [
    "IngestionConfig",
    "DocumentExtractor",
    "PdfExtractor",
    "DocxExtractor",
    "ExtractorRegistry",
    "detect_file_type",
    "extract_pdf_text",
    "extract_docx_text",
    "MAX_FILE_SIZE",
    "SUPPORTED_EXTENSIONS",
]
