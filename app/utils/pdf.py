from io import BytesIO
from typing import List, Tuple

from pypdf import PdfReader

from app.core.log import get_logger

log = get_logger(__name__)


def extract_pdf_text(content: bytes) -> Tuple[str, int, List[int]]:
    """Page texts joined by newlines, the page count and the pages that could not be read.

    An unreadable page contributes an empty string instead of failing the document.
    """
    reader = PdfReader(BytesIO(content))
    texts: List[str] = []
    skipped: List[int] = []
    for number, page in enumerate(reader.pages, start=1):
        try:
            texts.append(page.extract_text() or "")
        except Exception as exc:
            log.warning("skipping unreadable PDF page %d: %s", number, exc)
            skipped.append(number)
            texts.append("")
    return "\n".join(texts), len(texts), skipped
