# app/services/parse_service.py
from __future__ import annotations

from io import BytesIO

from app.core.log import get_logger
from app.utils.pdf import extract_pdf_text
from app.utils.word import extract_docx_text

log = get_logger(__name__)

PDF = "application/pdf"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PLAIN = "text/plain"

SUPPORTED_TYPES = (PDF, DOCX, PLAIN)


class UnsupportedDocumentType(ValueError):
    pass


class DocumentExtractionError(RuntimeError):
    pass


def extract_text(content: bytes, content_type: str | None) -> str:
    """Best-effort plain text for a PDF, DOCX or text upload."""
    ctype = (content_type or "").split(";")[0].strip().lower()
    if ctype not in SUPPORTED_TYPES:
        raise UnsupportedDocumentType(f"Unsupported file type: {content_type!r}")

    try:
        if ctype == PDF:
            text, pages, skipped = extract_pdf_text(content)
            log.info("extracted %d chars from %d-page PDF (%d skipped)", len(text), pages, len(skipped))
        elif ctype == DOCX:
            text, chars = extract_docx_text(BytesIO(content))
            log.info("extracted %d chars from DOCX", chars)
        else:
            text = content.decode("utf-8", "ignore")
    except Exception as exc:
        raise DocumentExtractionError(f"Failed to parse {ctype} document: {exc}") from exc

    return text.strip()
