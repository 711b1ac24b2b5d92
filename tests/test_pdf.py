"""
Unit tests for PDF text extraction.
"""
import io

from parsers.pdf import pdf_to_text


def test_extracts_text_from_bytes(cv_pdf):
    text = pdf_to_text(cv_pdf)
    assert "Carol Jones" in text
    assert text == text.strip()


def test_extracts_text_from_path(tmp_path, cv_pdf):
    path = tmp_path / "carol.pdf"
    path.write_bytes(cv_pdf)
    assert "Kubernetes" in pdf_to_text(str(path))


def test_extracts_text_from_file_object(cv_pdf):
    assert "PostgreSQL" in pdf_to_text(io.BytesIO(cv_pdf))


def test_corrupt_pdf_returns_empty_text():
    assert pdf_to_text(b"%PDF-1.5\nthis is not really a pdf") == ""


def test_empty_input_returns_empty_text():
    assert pdf_to_text(b"") == ""


def test_missing_file_returns_empty_text(tmp_path):
    assert pdf_to_text(str(tmp_path / "missing.pdf")) == ""
