"""
Text normalization utilities for extracted resume text.

Two views of the same document:
- split_raw_lines(): trimmed, non-empty lines, glyphs untouched (used by the
  name/title/contact heuristics)
- normalize_ats_lines(): whitespace-collapsed lines with bullet glyphs folded
  to "-" and pipe separators padded (used by section detection)
"""

import re
from typing import List

from app.core.vocabulary import BULLET_PREFIXES, BULLET_STRIP_RE


# •, ‣, ◦, ▪, ▫ and bare asterisks all become a plain hyphen marker
BULLET_GLYPH_RE = re.compile(r"[*•‣◦▪▫]")
# Broken bar and pipe separators ("Python | Django")
PIPE_RE = re.compile(r"[¦|]")
LINE_BREAK_RE = re.compile(r"[\r\f]")
WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub(" ", text).strip()


def split_raw_lines(text: str) -> List[str]:
    """Trimmed, non-empty lines of the raw text."""
    return [ln.strip() for ln in text.split("\n") if ln.strip()]


def normalize_ats_lines(text: str) -> List[str]:
    """
    Normalize raw text into the line sequence used for section detection.

    Examples:
    - "• Python"          -> "- Python"
    - "React|Vue"         -> "React | Vue"
    - "  Jane   Doe  "    -> "Jane Doe"
    - blank lines         -> dropped
    """
    text = LINE_BREAK_RE.sub("\n", text)
    text = BULLET_GLYPH_RE.sub("-", text)
    text = PIPE_RE.sub(" | ", text)

    lines = [collapse_whitespace(ln) for ln in text.split("\n")]
    return [ln for ln in lines if ln]


def is_bullet_line(line: str) -> bool:
    return line.startswith(BULLET_PREFIXES)


def strip_bullet(line: str) -> str:
    """Remove one leading bullet marker: "- Built APIs" -> "Built APIs"."""
    return BULLET_STRIP_RE.sub("", line).strip()
