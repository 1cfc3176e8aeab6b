import pytest

from resume_context.errors import ContentTooShort, FileInvalid
from resume_context.ingestion import IngestionConfig
from resume_context.validation import check_resume_file, ensure_min_length, validate_resume_file
from builders import MemoryStorage

TEN_MIB = 10 * 1024 * 1024


def test_valid_file_passes():
    storage = MemoryStorage(files={"cv.pdf": b"%PDF"}, sizes={"cv.pdf": TEN_MIB})
    result = validate_resume_file("cv.pdf", storage)
    assert result.valid is True
    assert result.error is None
    assert "read_file" not in storage.calls


def test_oversized_file_is_rejected():
    storage = MemoryStorage(files={"cv.docx": b""}, sizes={"cv.docx": TEN_MIB + 1})
    result = validate_resume_file("cv.docx", storage)
    assert result.valid is False
    assert result.error == "File size exceeds 10MB limit"


def test_missing_file_is_rejected():
    result = validate_resume_file("missing.pdf", MemoryStorage())
    assert result.to_dict() == {"valid": False, "error": "File not found or inaccessible"}


@pytest.mark.parametrize("name", ["cv.doc", "cv.txt", "cv"])
def test_unsupported_extension_is_rejected(name):
    storage = MemoryStorage(files={name: b"data"})
    result = validate_resume_file(name, storage)
    assert result.valid is False
    assert result.error == "Only PDF and DOCX files are supported"


def test_stat_errors_become_file_invalid():
    class _BrokenStorage(MemoryStorage):
        def stat(self, path):
            raise PermissionError("denied")

    storage = _BrokenStorage(files={"cv.pdf": b"%PDF"})
    with pytest.raises(FileInvalid) as excinfo:
        check_resume_file("cv.pdf", storage)
    assert isinstance(excinfo.value.cause, PermissionError)


def test_local_files_are_checked_on_disk(tmp_path):
    path = tmp_path / "cv.pdf"
    path.write_bytes(b"%PDF-1.4")
    assert validate_resume_file(path).valid is True
    assert validate_resume_file(tmp_path / "absent.pdf").valid is False
    assert validate_resume_file(tmp_path).valid is False


def test_custom_size_limit():
    config = IngestionConfig(max_file_size=1024)
    storage = MemoryStorage(files={"cv.pdf": b"x" * 2048})
    result = validate_resume_file("cv.pdf", storage, config)
    assert result.valid is False
    assert result.error.startswith("File size exceeds")


def test_ensure_min_length_boundary():
    assert ensure_min_length("x" * 50) == "x" * 50
    with pytest.raises(ContentTooShort) as excinfo:
        ensure_min_length("  " + "x" * 49 + "  ")
    assert excinfo.value.length == 49
    assert excinfo.value.minimum == 50
    assert "too short" in excinfo.value.message
