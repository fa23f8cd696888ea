from typing import BinaryIO

from docx import Document


def extract_docx_text(file: BinaryIO) -> tuple[str, int]:
    doc = Document(file)
    paragraphs = [p.text for p in doc.paragraphs]
    # table cells hold most of the content in two-column templates
    for table in doc.tables:
        for row in table.rows:
            paragraphs.extend(cell.text for cell in row.cells)
    joined = "\n".join(paragraphs)
    return joined, len(joined)
