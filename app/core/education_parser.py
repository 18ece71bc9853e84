"""
Education extraction.

Lines are kept verbatim when they mention an institution or a degree
(University, Bachelor, B.Sc, Universitas, Sarjana, S1/S2/S3, ...).

The full-text scanner enters on an education/academic/pendidikan line and,
unlike the experience scanner, keeps collecting until the end of the document
unless ``education_scan_stops_at_sections`` is enabled. Trailing sections such
as certifications can therefore contribute lines when they name an institute.
"""

import re
import logging
from typing import List, Optional, Sequence

from app.core.config import get_config
from app.core.section_detector import match_section_header
from app.core.vocabulary import EDUCATION_LEVEL_RE, EDUCATION_LINE_RE

logger = logging.getLogger(__name__)


ENTER_KEYWORDS = ("education", "academic", "pendidikan")
# Sibling headers that end the scan when stopping at sections is enabled
EXTRA_EXIT_HEADER_RE = re.compile(r"^(certifications?|awards?|licenses?|publications?)\b", re.IGNORECASE)


def looks_like_education_line(line: str) -> bool:
    return bool(EDUCATION_LINE_RE.search(line) or EDUCATION_LEVEL_RE.search(line))


def parse_education_section(lines: Sequence[str]) -> List[str]:
    """Institution/degree lines from an education section body."""
    return [line for line in lines if looks_like_education_line(line)]


def _is_sibling_header(line: str) -> bool:
    kind = match_section_header(line)
    if kind is not None and kind != "education":
        return True
    return bool(EXTRA_EXIT_HEADER_RE.match(line))


def extract_education(text: str, stop_at_sections: Optional[bool] = None) -> List[str]:
    """Institution/degree lines found after an education header in the full text."""
    if stop_at_sections is None:
        stop_at_sections = get_config().education_scan_stops_at_sections

    education: List[str] = []
    inside = False

    for raw in text.split("\n"):
        line = raw.strip()
        lower = line.lower()

        if any(k in lower for k in ENTER_KEYWORDS):
            inside = True
            continue

        if not inside:
            continue

        if stop_at_sections and _is_sibling_header(line):
            logger.debug(f"Education scan stopped at {line!r}")
            inside = False
            continue

        if looks_like_education_line(line):
            education.append(line)

    return education
