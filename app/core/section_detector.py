"""
Locate resume sections by their header lines.

Each detected kind maps to a contiguous line range that runs from its header
to the line before the next detected header (or the end of the document).
"""

import re
import logging
from typing import Dict, List, Sequence, Tuple

from app.core.schemas import SectionKind, SectionRange

logger = logging.getLogger(__name__)


# Ordered: a line is attributed to the first kind whose header matches
SECTION_HEADER_PATTERNS: Tuple[Tuple[SectionKind, "re.Pattern[str]"], ...] = (
    ("skills", re.compile(r"^(top\s+skills|skill(?:s|set)?|technical\s+skills?|keahlian)\b", re.IGNORECASE)),
    ("experience", re.compile(
        r"^(experiences?|work\s+experiences?|work\s+history|employment|professional\s+experiences?|pengalaman)\b",
        re.IGNORECASE,
    )),
    ("education", re.compile(r"^(education(?:al)?|academic|pendidikan)\b", re.IGNORECASE)),
    ("projects", re.compile(r"^(projects?|portfolio|proyek)\b", re.IGNORECASE)),
    ("contact", re.compile(r"^(contacts?|kontak)\b", re.IGNORECASE)),
)


def match_section_header(line: str) -> SectionKind | None:
    for kind, pattern in SECTION_HEADER_PATTERNS:
        if pattern.match(line):
            return kind
    return None


def detect_sections(lines: Sequence[str]) -> Dict[SectionKind, SectionRange]:
    """
    Map each detected section kind to its line range.

    The first header line of a kind wins; later repeats of the same header are
    treated as ordinary content of whatever section they fall in. Kinds with
    no header are absent from the result.
    """
    starts: Dict[SectionKind, int] = {}
    for idx, line in enumerate(lines):
        kind = match_section_header(line.strip())
        if kind is not None and kind not in starts:
            starts[kind] = idx

    ordered = sorted(starts.values())
    ranges: Dict[SectionKind, SectionRange] = {}
    for kind, start in starts.items():
        following = [s for s in ordered if s > start]
        end = following[0] - 1 if following else len(lines) - 1
        ranges[kind] = SectionRange(kind=kind, start_line=start, end_line=end)

    logger.debug(f"Detected sections: { {k: (r.start_line, r.end_line) for k, r in ranges.items()} }")
    return ranges


def section_lines(lines: Sequence[str], section: SectionRange) -> List[str]:
    """Body lines of a section (header line excluded)."""
    return list(lines[section.start_line + 1:section.end_line + 1])
