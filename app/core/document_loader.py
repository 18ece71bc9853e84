"""
Container-format detection and dispatch to the PDF/DOCX text extractors.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from app.core.docx_extractor import extract_docx_text
from app.core.errors import DocumentExtractionError, UnsupportedFormatError
from app.core.line_reconstructor import assemble_text
from app.core.pdf_extractor import extract_pdf_fragments
from app.core.schemas import TextFragment

logger = logging.getLogger(__name__)


PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class DocumentFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"


@dataclass
class ExtractedDocument:
    format: DocumentFormat
    text: str
    pages: List[List[TextFragment]] = field(default_factory=list)  # PDF only


def detect_format(filename: Optional[str], content_type: Optional[str]) -> DocumentFormat:
    """
    PDF or DOCX, by filename suffix or MIME type.

    Raises:
        UnsupportedFormatError: anything else.
    """
    name = (filename or "").lower()
    ctype = (content_type or "").lower()

    if name.endswith(".pdf") or ctype == PDF_MIME:
        return DocumentFormat.PDF
    if name.endswith(".docx") or ctype == DOCX_MIME:
        return DocumentFormat.DOCX
    raise UnsupportedFormatError(f"Unsupported file type: {content_type or filename or 'unknown'}")


def load_document(data: bytes, filename: Optional[str] = None, content_type: Optional[str] = None) -> ExtractedDocument:
    """
    Extract text (and, for PDFs, positioned fragments) from an uploaded file.

    Raises:
        UnsupportedFormatError: the file is neither PDF nor DOCX.
        DocumentExtractionError: the file is empty or the library cannot read it.
    """
    fmt = detect_format(filename, content_type)
    if not data:
        raise DocumentExtractionError("Empty file")

    if fmt is DocumentFormat.PDF:
        pages = extract_pdf_fragments(data)
        text = assemble_text(pages)
        logger.debug(f"PDF {filename!r}: {len(pages)} page(s), {len(text)} chars")
        return ExtractedDocument(format=fmt, text=text, pages=pages)

    text = extract_docx_text(data)
    logger.debug(f"DOCX {filename!r}: {len(text)} chars")
    return ExtractedDocument(format=fmt, text=text)
