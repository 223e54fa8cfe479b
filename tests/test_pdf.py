import io

import pytest

from parsers.pdf import PdfExtractionError, pdf_to_text


def test_extracts_from_bytes(pdf_bytes):
    text = pdf_to_text(pdf_bytes)
    assert "jane.doe@example.com" in text
    assert text == text.strip()


def test_extracts_from_file_like(pdf_bytes):
    assert "Python developer" in pdf_to_text(io.BytesIO(pdf_bytes))


def test_extracts_from_path(pdf_bytes, tmp_path):
    path = tmp_path / "resume.pdf"
    path.write_bytes(pdf_bytes)
    assert "Jane Doe" in pdf_to_text(str(path))


def test_garbage_raises():
    with pytest.raises(PdfExtractionError):
        pdf_to_text(b"this is not a pdf")


def test_pdf_without_text_raises(pdf_factory):
    with pytest.raises(PdfExtractionError):
        pdf_to_text(pdf_factory(""))
