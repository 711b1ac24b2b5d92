import io
import logging

import fitz  # PyMuPDF
from PyPDF2 import PdfReader

logger = logging.getLogger(__name__)


def _read_bytes(source) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if isinstance(source, str):
        with open(source, "rb") as f:
            return f.read()
    # file-like object (Streamlit / FastAPI uploads)
    return source.read()


def _pymupdf_text(data: bytes) -> str:
    with fitz.open(stream=data, filetype="pdf") as doc:
        return "\n".join(page.get_text("text") for page in doc)


def _pypdf2_text(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def pdf_to_text(source) -> str:
    """
    Extract text from a PDF.
    Accepts raw bytes, a file path, or a file-like object.
    Returns an empty string when no text could be extracted.
    """
    try:
        data = _read_bytes(source)
    except OSError as e:
        logger.warning(f"[WARN] Could not read PDF source: {e}")
        return ""
    if not data:
        return ""

    # ---------- Attempt 1: PyMuPDF ----------
    try:
        text = _pymupdf_text(data).strip()
        if text:
            return text
    except Exception as e:
        logger.warning(f"[WARN] PyMuPDF extraction failed: {e}")

    # ---------- Attempt 2: PyPDF2 (fallback) ----------
    try:
        text = _pypdf2_text(data).strip()
        if text:
            logger.info(f"[INFO] Extracted {len(text)} characters via PyPDF2 fallback")
            return text
    except Exception as e:
        logger.warning(f"[WARN] PyPDF2 extraction failed: {e}")

    return ""
