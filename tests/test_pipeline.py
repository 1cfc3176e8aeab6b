import re

import pytest

from resume_context import (
    ContentTooShort,
    DecodeFailure,
    EmptyContent,
    FileInvalid,
    ResumeParser,
    UnsupportedFormat,
    build_interview_context,
    get_resume_metadata,
    parse_resume,
)
from resume_context import ingestion
from resume_context.ingestion import IngestionConfig
from builders import MemoryStorage, build_docx_bytes

SCENARIO = "Developed scalable systems using Python and AWS for 5 years experience"


def _assert_normalized(text: str) -> None:
    assert len(text) >= 50
    assert "\n\n\n" not in text
    assert "  " not in text
    assert all(run == "\n\n" for run in re.findall(r"\s{2,}", text))


def test_parse_pdf_resume(write_pdf, resume_lines):
    text = parse_resume(write_pdf(resume_lines))
    _assert_normalized(text)
    assert "jane.doe@example.com" in text
    assert "Bachelor of Science in Computer Science" in text


def test_parse_docx_resume(write_docx, resume_lines):
    text = parse_resume(write_docx(["  Jane   Doe  ", "", "", *resume_lines[1:]]))
    _assert_normalized(text)
    assert text.startswith("Jane Doe\n\nlinkedin.com/in/jane-doe")


@pytest.mark.parametrize("name", ["resume.doc", "resume.txt", "resume.rtf"])
def test_unsupported_format_fails_before_reading(name):
    storage = MemoryStorage(files={name: b"irrelevant"})
    with pytest.raises(UnsupportedFormat):
        ResumeParser(storage=storage).parse(name)
    assert storage.calls == []


def test_oversized_file_is_rejected_before_reading():
    storage = MemoryStorage(files={"cv.pdf": b"%PDF"}, sizes={"cv.pdf": 10 * 1024 * 1024 + 1})
    with pytest.raises(FileInvalid):
        ResumeParser(storage=storage).parse("cv.pdf")
    assert "read_file" not in storage.calls


def test_corrupted_pdf_is_decode_failure(tmp_path):
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"%PDF-1.4 garbage")
    with pytest.raises(DecodeFailure):
        parse_resume(path)


def test_image_only_pdf_is_empty_content(write_pdf):
    with pytest.raises(EmptyContent):
        parse_resume(write_pdf([]))


def test_short_docx_is_content_too_short(write_docx):
    with pytest.raises(ContentTooShort) as excinfo:
        parse_resume(write_docx(["Jane Doe", "Engineer"]))
    assert excinfo.value.length < 50


def test_min_text_length_is_configurable():
    storage = MemoryStorage(files={"cv.docx": build_docx_bytes(["Jane Doe", "Engineer"])})
    parser = ResumeParser(IngestionConfig(min_text_length=10), storage=storage)
    assert parser.parse("cv.docx") == "Jane Doe\n\nEngineer"
    assert storage.calls == ["exists", "stat", "read_file"]


def test_metadata_word_boundary():
    assert get_resume_metadata("word " * 49).has_content is False
    metadata = get_resume_metadata("word " * 50)
    assert metadata.has_content is True
    assert metadata.word_count == 50
    assert metadata.raw_text == " ".join(["word"] * 50)


def test_metadata_of_empty_text():
    metadata = get_resume_metadata("   ")
    assert metadata.to_dict() == {"raw_text": "", "word_count": 0, "has_content": False}


def test_scenario_docx_context(write_docx):
    context = build_interview_context(write_docx([SCENARIO]), "Jane Doe")
    assert context.resume_text == SCENARIO
    assert context.sections.skills == ["Python", "AWS"]
    assert "5 years experience" in context.sections.experience
    assert "CANDIDATE NAME: Jane Doe" in context.prompt
    assert context.metadata.word_count == 11
    assert context.to_dict()["candidate_name"] == "Jane Doe"


def test_interview_context_collects_contact(write_docx, resume_lines):
    context = ResumeParser().interview_context(write_docx(resume_lines))
    assert context.contact.emails == ["jane.doe@example.com"]
    assert context.contact.phones == ["(555) 123-4567"]
    assert context.contact.linkedin == "linkedin.com/in/jane-doe"
    assert context.sections.education == ["Bachelor", "University", "Computer Science"]
    assert "CANDIDATE NAME" not in context.prompt


def test_configured_extensions_restrict_parsing():
    storage = MemoryStorage(files={"cv.docx": build_docx_bytes(["x" * 60])})
    parser = ResumeParser(IngestionConfig(supported_extensions=(".pdf",)), storage=storage)
    with pytest.raises(FileInvalid):
        parser.parse("cv.docx")
    assert "read_file" not in storage.calls


def test_default_policy_follows_registered_formats():
    class _TextExtractor(ingestion.DocumentExtractor):
        extensions = (".txt",)
        name = "txt"

        def extract(self, data: bytes) -> str:
            return data.decode("utf-8")

    registry = ingestion.ExtractorRegistry()
    registry.register(_TextExtractor())
    storage = MemoryStorage(files={"cv.txt": b"plain text resume " * 4})
    parser = ResumeParser(storage=storage, registry=registry)
    assert parser.ingestion_config.supported_extensions == (".pdf", ".docx", ".txt")
    assert parser.parse("cv.txt") == ("plain text resume " * 4).strip()
