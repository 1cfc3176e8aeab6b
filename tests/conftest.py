"""Shared fixtures for resume_context tests."""

from pathlib import Path
from typing import Iterable, List

import pytest

from builders import RESUME_LINES, build_docx_bytes, build_pdf_bytes


@pytest.fixture
def resume_lines() -> List[str]:
    return list(RESUME_LINES)


@pytest.fixture
def write_pdf(tmp_path: Path):
    def _write(lines: Iterable[str], name: str = "resume.pdf") -> Path:
        path = tmp_path / name
        path.write_bytes(build_pdf_bytes(lines))
        return path

    return _write


@pytest.fixture
def write_docx(tmp_path: Path):
    def _write(paragraphs: Iterable[str], name: str = "resume.docx", table=None) -> Path:
        path = tmp_path / name
        path.write_bytes(build_docx_bytes(paragraphs, table))
        return path

    return _write
