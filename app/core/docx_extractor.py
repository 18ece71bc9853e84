from io import BytesIO
from typing import Iterator, List

from docx import Document
from docx.table import Table
from docx.text.paragraph import Paragraph

from app.core.errors import DocumentExtractionError


def _table_paragraphs(table: Table) -> Iterator[Paragraph]:
    """Cell paragraphs row by row; a merged cell is visited once."""
    seen = set()
    for row in table.rows:
        for cell in row.cells:
            if cell._tc in seen:
                continue
            seen.add(cell._tc)
            yield from cell.paragraphs


def extract_docx_text(docx_bytes: bytes) -> str:
    """
    Non-empty paragraph text from a DOCX, newline-joined, in document order.

    Table cells (resume templates often put contact details or whole sections
    in tables) appear where the table sits, not after the body.
    """
    try:
        doc = Document(BytesIO(docx_bytes))
    except Exception as e:
        raise DocumentExtractionError(f"Could not read DOCX: {e}") from e

    out: List[str] = []
    for block in doc.iter_inner_content():
        paragraphs = _table_paragraphs(block) if isinstance(block, Table) else [block]
        for p in paragraphs:
            t = (p.text or "").strip()
            if t:
                out.append(t)

    return "\n".join(out)
