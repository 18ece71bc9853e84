"""
Heuristics for the résumé banner: candidate name, job title and summary.

All three work on the raw trimmed lines (glyphs untouched), since banners are
usually the first few lines and rarely carry bullets.
"""

import re
import logging
from typing import List, Optional, Sequence

from app.core.config import get_config
from app.core.strategies import first_match
from app.core.text_normalization import collapse_whitespace
from app.core.vocabulary import (
    JOB_TITLE_KEYWORDS,
    JOB_TITLE_WORDS_LOWER,
    NAME_BLOCKING_WORDS,
    NAME_SECTION_WORDS,
)

logger = logging.getLogger(__name__)


NAME_TOKEN_RE = re.compile(r"^[A-Za-z'.-]+$")
NAME_FORBIDDEN_CHARS_RE = re.compile(r"[,:|]")

TITLE_HEADER_RE = re.compile(r"summary|experience|education|skills|contact", re.IGNORECASE)
TITLE_FALLBACK_EXCLUDE_RE = re.compile(r"phone|email|summary|experience|education|skills", re.IGNORECASE)

# Company suffixes stripped from a title: " at Acme", " - Acme", " | Acme", " @ Acme"
TITLE_SUFFIX_RES = (
    re.compile(r"\s+at\s+.*$", re.IGNORECASE),
    re.compile(r"\s+[—–-]\s+.*$"),
    re.compile(r"\s*\|\s*.*$"),
    re.compile(r"\s*@\s*.*$"),
)

SUMMARY_HEADER_WORDS = ("summary", "objective", "profile", "about")


# ===== NAME =====

def is_section_like(line: str) -> bool:
    lower = line.lower()
    return any(word in lower for word in NAME_SECTION_WORDS)


def looks_like_name(text: Optional[str]) -> bool:
    """
    Validity predicate shared by every name strategy.

    A name is 1-5 plain words (letters, apostrophes, periods, hyphens) with no
    digits, contact details, separators, section words or job-title words.
    """
    if not text:
        return False
    s = text.strip()
    if not s or len(s) > 50:
        return False
    if "@" in s or "http" in s:
        return False
    if any(c.isdigit() for c in s):
        return False
    if NAME_FORBIDDEN_CHARS_RE.search(s):
        return False
    if is_section_like(s):
        return False

    words = s.split()
    if not 1 <= len(words) <= 5:
        return False
    if any(w.lower() in NAME_BLOCKING_WORDS for w in words):
        return False
    return all(NAME_TOKEN_RE.match(w) for w in words)


def _first_name_in(candidates: Sequence[str]) -> Optional[str]:
    for cand in candidates:
        cand = cand.strip()
        if looks_like_name(cand):
            return cand
    return None


def extract_name(
    lines: List[str],
    name_hint: Optional[str] = None,
    job_index: int = -1,
    contact_index: int = -1,
) -> str:
    """
    Pick the candidate's name.

    Priority (first hit wins):
    1) up to 3 lines right above the job-title line
    2) up to 3 lines right above the first contact line, closest first
    3) the font-size name hint, if it passes the same checks
    4) first 5 lines
    5) first 20 lines
    """
    def near_job_title() -> Optional[str]:
        if job_index < 0:
            return None
        return _first_name_in(lines[max(0, job_index - 3):job_index])

    def near_contact() -> Optional[str]:
        if contact_index <= 0:
            return None
        window = lines[max(0, contact_index - 3):contact_index]
        return _first_name_in(reversed(window))

    def from_hint() -> Optional[str]:
        return name_hint.strip() if looks_like_name(name_hint) else None

    def top_of_document() -> Optional[str]:
        return _first_name_in(lines[:5])

    def top_twenty() -> Optional[str]:
        return _first_name_in(lines[:20])

    name = first_match((near_job_title, near_contact, from_hint, top_of_document, top_twenty))
    if name is None:
        logger.debug("No name candidate passed validation")
        return get_config().default_name
    return name


# ===== JOB TITLE =====

def _earliest_keyword_index(line: str, keywords: Sequence[str]) -> int:
    lower = line.lower()
    positions = [lower.find(k.lower()) for k in keywords]
    positions = [p for p in positions if p >= 0]
    return min(positions) if positions else -1


def _clean_title(title: str) -> str:
    for suffix_re in TITLE_SUFFIX_RES:
        title = suffix_re.sub("", title)
    return collapse_whitespace(title)


def _title_from_banner(lines: Sequence[str]) -> Optional[str]:
    for line in lines[:10]:
        line = line.strip()
        if not line or TITLE_HEADER_RE.search(line):
            continue
        idx = _earliest_keyword_index(line, JOB_TITLE_KEYWORDS)
        if idx < 0:
            continue
        title = _clean_title(line[idx:])
        if 3 <= len(title) <= 80:
            return title
    return None


def _title_from_loose_scan(lines: Sequence[str]) -> Optional[str]:
    for line in lines[:15]:
        line = line.strip()
        if not (5 < len(line) < 100):
            continue
        if re.search(r"[\d@]", line) or re.search(r"http", line, re.IGNORECASE):
            continue
        if TITLE_FALLBACK_EXCLUDE_RE.search(line):
            continue
        idx = _earliest_keyword_index(line, JOB_TITLE_WORDS_LOWER)
        if idx < 0:
            continue
        title = _clean_title(line[idx:])
        if title:
            return title
    return None


def extract_job_title(lines: Sequence[str]) -> str:
    """Job title from the banner lines, else a looser scan, else the configured default."""
    title = first_match((_title_from_banner, _title_from_loose_scan), lines)
    return title if title is not None else get_config().default_job_title


def find_line_index(lines: Sequence[str], needle: str) -> int:
    for idx, line in enumerate(lines):
        if needle in line:
            return idx
    return -1


# ===== SUMMARY =====

def extract_summary(text: str) -> Optional[str]:
    """
    Lines following a summary/objective/profile/about marker.

    Takes the next three lines and keeps those longer than 10 characters. If a
    marker is followed by nothing usable, the search continues.
    """
    lines = [ln.strip() for ln in text.split("\n")]
    for i, line in enumerate(lines):
        lower = line.lower()
        if not any(word in lower for word in SUMMARY_HEADER_WORDS):
            continue
        summary_lines = [ln for ln in lines[i + 1:i + 4] if len(ln) > 10]
        if summary_lines:
            return " ".join(summary_lines)
    return None
