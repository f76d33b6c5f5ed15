import pytest

from parsers.extract import (
    DocumentExtractor, UploadRejected, MAX_UPLOAD_BYTES,
    PDF, DOC, DOCX, TXT, SHORT_TEXT_PLACEHOLDER, DOC_PLACEHOLDER, PDF_PLACEHOLDER,
)
from parsers import pdf as pdf_module
from parsers.pdf import scrape_pdf_text, MIN_HEURISTIC_CHARS

TEXT = "Experienced engineer with Python and SQL skills across data platforms."


@pytest.fixture
def extractor():
    return DocumentExtractor(use_parsers=False)


@pytest.mark.parametrize("mime", ["image/png", "application/zip", "text/html", ""])
def test_rejects_types_outside_allow_list(extractor, mime):
    with pytest.raises(UploadRejected, match="Invalid file type"):
        extractor.parse(TEXT.encode(), mime, "resume.bin")


def test_rejects_files_over_5_mib(extractor):
    data = b"a" * (MAX_UPLOAD_BYTES + 1)
    with pytest.raises(UploadRejected, match="File too large") as exc:
        extractor.parse(data, TXT, "big.txt")
    assert exc.value.status_code == 413


def test_accepts_exactly_5_mib(extractor):
    doc = extractor.parse(b"a" * MAX_UPLOAD_BYTES, TXT, "edge.txt")
    assert doc.size_bytes == MAX_UPLOAD_BYTES


def test_plain_text_is_returned_verbatim(extractor):
    doc = extractor.parse(TEXT.encode("utf-8"), TXT, "resume.txt")
    assert doc.extracted_text == TEXT
    assert doc.file_name == "resume.txt"
    assert doc.mime_type == TXT


def test_short_text_gets_templated_sentence(extractor):
    doc = extractor.parse(b"Python, SQL", TXT, "short.txt")
    assert doc.extracted_text == SHORT_TEXT_PLACEHOLDER.format(name="short.txt")
    assert "Python, SQL" not in doc.extracted_text


def test_doc_gets_placeholder(extractor):
    doc = extractor.parse(b"\xd0\xcf\x11\xe0 binary", DOC, "cv.doc")
    assert doc.extracted_text == DOC_PLACEHOLDER.format(name="cv.doc")


def test_unreadable_docx_gets_placeholder():
    doc = DocumentExtractor(use_parsers=True).parse(b"not a zip archive", DOCX, "cv.docx")
    assert doc.extracted_text == DOC_PLACEHOLDER.format(name="cv.docx")


def test_pdf_parenthesis_heuristic(extractor):
    words = " ".join(f"({w})" for w in ["Senior", "Python", "developer", "with", "AWS"] * 6)
    raw = f"%PDF-1.4\nBT {words} Tj ET\n".encode()
    text = extractor.parse(raw, PDF, "cv.pdf").extracted_text
    assert "Senior Python developer with AWS" in text
    assert "(" not in text and ")" not in text


def test_pdf_printable_fallback_when_no_text_objects(extractor):
    raw = b"%PDF-1.4\n" + b"\x00\x01".join([b"Kubernetes operator engineering experience"] * 4)
    text = extractor.parse(raw, PDF, "cv.pdf").extracted_text
    assert "Kubernetes operator engineering experience" in text
    assert "\x00" not in text


def test_scrape_uses_text_arrays_when_no_parenthesis_tokens():
    body = "/Text [" + "Distributed systems engineer " * 8 + "]"
    text = scrape_pdf_text(body.encode())
    assert "Distributed systems engineer" in text
    assert "/Text" not in text
    assert "[" not in text and "]" not in text


def test_pdf_extraction_error_downgrades_to_placeholder(extractor, monkeypatch):
    def boom(data):
        raise RuntimeError("corrupt")
    monkeypatch.setattr("parsers.extract.scrape_pdf_text", boom)
    text = extractor.parse(b"%PDF-1.4", PDF, "cv.pdf").extracted_text
    assert text == PDF_PLACEHOLDER.format(name="cv.pdf")


def test_real_parser_result_wins_when_long_enough(monkeypatch):
    parsed = "Parsed with PyMuPDF. " * 10
    monkeypatch.setattr("parsers.extract.pdf_to_text", lambda data: parsed)
    text = DocumentExtractor(use_parsers=True).parse(b"%PDF-1.4", PDF, "cv.pdf").extracted_text
    assert text == parsed


def test_pdf_to_text_returns_empty_for_garbage():
    assert pdf_module.pdf_to_text(b"definitely not a pdf") == ""


def test_parenthesis_result_at_threshold_stops_escalation():
    token = "a" * (MIN_HEURISTIC_CHARS - 2)
    text = scrape_pdf_text(f"({token}) trailing printable words".encode())
    assert text == f" {token} "
    assert len(text) == MIN_HEURISTIC_CHARS


def test_parenthesis_result_below_threshold_falls_through():
    token = "a" * (MIN_HEURISTIC_CHARS - 3)
    text = scrape_pdf_text(f"({token}) trailing printable words".encode())
    assert "trailing printable words" in text


def test_short_parenthesis_result_gives_way_to_text_arrays():
    body = "(Hi) /Text [" + "Distributed systems engineer " * 8 + "]"
    text = scrape_pdf_text(body.encode())
    assert len(text) >= MIN_HEURISTIC_CHARS
    assert text.startswith("Distributed systems engineer")
    assert "Hi" not in text
