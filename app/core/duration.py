"""
Turn free-text date ranges into month counts, and derive total experience.

Recognized shapes, in priority order:
  "Jan 2020 - Mar 2022", "March 2019 - present", "Jan 2020 - 2021"
  "2018 - 2021", "2019 - current"
  "3 years"
"present"/"current" resolve against ``today`` (defaults to the current date).
"""

import re
import logging
from datetime import date
from typing import Iterable, List, Optional

from app.core.schemas import WorkExperience
from app.core.strategies import first_match
from app.core.vocabulary import (
    MONTH_ABBREVIATIONS,
    MONTH_INDEX,
    MONTH_RANGE_RE,
    YEAR_RANGE_RE,
    YEARS_PHRASE_RE,
)

logger = logging.getLogger(__name__)

OPEN_ENDED = {"present", "current"}

# Explicit total-experience statements, most specific first
STATED_EXPERIENCE_PATTERNS = (
    re.compile(r"(\d+)\+?\s*years?\s*(?:of\s*)?(?:total\s*)?experience", re.IGNORECASE),
    re.compile(r"experience:\s*(\d+)\+?\s*years?", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*years?\s*in\s*(?:software\s*)?development", re.IGNORECASE),
)
YEAR_MENTION_RE = re.compile(r"(\d+)\+?\s*years?", re.IGNORECASE)


def _month_index(name: Optional[str]) -> int:
    if not name:
        return 0
    return MONTH_INDEX.get(name.lower(), 0)


def _end_year(token: str, today: date) -> int:
    return today.year if token.lower() in OPEN_ENDED else int(token)


def months_between(start_month: Optional[str], start_year: int, end_month: Optional[str], end_year: int) -> int:
    return (end_year - start_year) * 12 + (_month_index(end_month) - _month_index(start_month))


def _from_month_range(text: str, today: date) -> Optional[int]:
    m = MONTH_RANGE_RE.search(text)
    if not m:
        return None
    start_month, start_year, end_month, end_token = m.groups()
    if not end_month:
        end_month = MONTH_ABBREVIATIONS[today.month - 1]
    months = months_between(start_month, int(start_year), end_month, _end_year(end_token, today))
    return max(0, months)


def _from_year_range(text: str, today: date) -> Optional[int]:
    m = YEAR_RANGE_RE.search(text)
    if not m:
        return None
    start_year, end_token = m.groups()
    return max(0, (_end_year(end_token, today) - int(start_year)) * 12)


def _from_years_phrase(text: str, today: date) -> Optional[int]:
    m = YEARS_PHRASE_RE.search(text)
    if not m:
        return None
    return int(m.group(1)) * 12


DURATION_STRATEGIES = (_from_month_range, _from_year_range, _from_years_phrase)


def to_months(duration: Optional[str], today: Optional[date] = None) -> Optional[int]:
    """
    Parse a duration string into a whole number of months.

    Returns None when no recognized shape is present.
    """
    if not duration:
        return None
    return first_match(DURATION_STRATEGIES, duration, today or date.today())


def total_months(entries: Iterable[WorkExperience], today: Optional[date] = None) -> int:
    """Sum of every entry's months; entries whose duration does not parse count as 0."""
    total = 0
    for entry in entries:
        months = to_months(entry.duration, today)
        if months is not None:
            total += months
    return total


def stated_experience_years(text: str) -> Optional[int]:
    """An explicit figure such as "5 years of experience" or "Experience: 7 years"."""
    for pattern in STATED_EXPERIENCE_PATTERNS:
        m = pattern.search(text)
        if m:
            return int(m.group(1))
    return None


def max_year_mention(text: str) -> Optional[int]:
    """Largest standalone "N years" mention anywhere in the text."""
    mentions: List[int] = [int(m.group(1)) for m in YEAR_MENTION_RE.finditer(text)]
    return max(mentions) if mentions else None


def calculate_total_experience(text: str, experience: List[WorkExperience], today: Optional[date] = None) -> float:
    """
    Total years of experience.

    Order of precedence:
    1) explicit statement in the text
    2) summed work-experience durations (months / 12, one decimal)
    3) largest "N years" mention
    4) two years per parsed work-experience entry (rough estimate)
    5) 0
    """
    stated = stated_experience_years(text)
    if stated:
        return float(stated)

    months = total_months(experience, today)
    if months > 0:
        return round(months / 12, 1)

    mentioned = max_year_mention(text)
    if mentioned:
        return float(mentioned)

    if experience:
        logger.debug(f"No dated experience; estimating from {len(experience)} entries")
        return float(len(experience) * 2)

    return 0.0
