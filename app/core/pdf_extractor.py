from io import BytesIO
from typing import Any, List
import logging

import pdfplumber

from app.core.errors import DocumentExtractionError
from app.core.schemas import TextFragment

logger = logging.getLogger(__name__)


def _page_fragments(page: Any) -> List[TextFragment]:
    """
    Word-level fragments of one page in content-stream order.

    pdfplumber reports ``bottom`` from the top of the page; the baseline is
    flipped into PDF space (Y grows upward) so line ordering matches the
    positions a PDF content stream would give.
    """
    words = page.extract_words(
        x_tolerance=3,
        y_tolerance=2,
        keep_blank_chars=False,
        use_text_flow=True,
        extra_attrs=["size"],
    )
    height = float(page.height)
    return [
        TextFragment(
            text=w["text"],
            baseline_y=height - float(w["bottom"]),
            font_size=float(w.get("size", 0.0)),
        )
        for w in words
    ]


def extract_pdf_fragments(pdf_bytes: bytes) -> List[List[TextFragment]]:
    """
    Positioned text fragments for every page of a PDF, in page order.

    Raises:
        DocumentExtractionError: the bytes are not a readable PDF.
    """
    pages: List[List[TextFragment]] = []
    try:
        with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
            for page in pdf.pages:
                pages.append(_page_fragments(page))
    except Exception as e:
        raise DocumentExtractionError(f"Could not read PDF: {e}") from e

    logger.debug(f"Extracted {sum(len(p) for p in pages)} fragments from {len(pages)} PDF page(s)")
    return pages
