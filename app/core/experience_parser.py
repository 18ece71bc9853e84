"""
Work-experience extraction.

Both modes share one scanner:
- section mode: the scanner starts inside, fed the experience section body
- full-text mode: the scanner starts outside and switches on header keywords
  (enters on experience/employment/work history, leaves on education/skills/
  projects/certifications/awards)

Inside, each line either opens a new entry (a recognized header shape) or
updates the pending entry (duration, description bullet). An entry is only
ever emitted once it has both a company and a position.
"""

import re
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from app.core.schemas import WorkExperience
from app.core.strategies import first_match
from app.core.text_normalization import is_bullet_line, strip_bullet
from app.core.vocabulary import EXPERIENCE_JOB_WORDS, MONTH_RANGE_RE, YEAR_RANGE_RE

logger = logging.getLogger(__name__)


ENTER_KEYWORDS = ("experience", "employment", "work history", "professional experience")
EXIT_KEYWORDS = ("education", "skills", "projects", "certifications", "awards")

# "Acme Corp — Senior Engineer"
DASH_HEADER_RE = re.compile(r"^(.+?)\s+(?:—|–|-)\s+(.+)$")
# "Software Engineer - Acme Corp (Jan 2020 - present)"
PAREN_HEADER_RE = re.compile(r"^(.+?)\s+(?:-|–)\s+(.+?)\s*\(([^)]+)\)", re.IGNORECASE)
# "Backend Developer at Acme", "Analyst @ Acme", "Designer | Acme"
ROLE_COMPANY_RE = re.compile(r"^(.+?)\s+(?:at|@|-|\|)\s+(.+)$", re.IGNORECASE)
TRAILING_PAREN_RE = re.compile(r"\s*\(([^)]+)\).*")
PAREN_DURATION_RE = re.compile(r"\(([^)]+\d{4}[^)]*)\)")
FOUR_DIGIT_YEAR_RE = re.compile(r"\d{4}")


class ScanState(Enum):
    OUTSIDE = "outside"
    INSIDE = "inside"


@dataclass
class PendingEntry:
    company: Optional[str] = None
    position: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.company) and bool(self.position)

    def to_experience(self) -> WorkExperience:
        return WorkExperience(
            company=self.company,
            position=self.position,
            duration=self.duration,
            description=self.description,
        )


def _has_job_word(text: str) -> bool:
    lower = text.lower()
    return any(w in lower for w in EXPERIENCE_JOB_WORDS)


# ===== DURATION SHAPES =====

def _month_range_duration(line: str) -> Optional[str]:
    m = MONTH_RANGE_RE.search(line)
    if not m:
        return None
    start_month, start_year, end_month, end_year = m.groups()
    end = f"{end_month} {end_year}" if end_month else end_year
    return f"{start_month} {start_year} - {end}"


def _year_range_duration(line: str) -> Optional[str]:
    m = YEAR_RANGE_RE.search(line)
    return f"{m.group(1)} - {m.group(2)}" if m else None


def _paren_duration(line: str) -> Optional[str]:
    m = PAREN_DURATION_RE.search(line)
    return m.group(1).strip() if m else None


DURATION_STRATEGIES = (_month_range_duration, _year_range_duration, _paren_duration)


def extract_duration(line: str) -> Optional[str]:
    return first_match(DURATION_STRATEGIES, line)


def _date_range_span(text: str) -> Optional[Tuple[int, int]]:
    for rx in (MONTH_RANGE_RE, YEAR_RANGE_RE):
        m = rx.search(text)
        if m:
            return m.span()
    return None


# ===== HEADER SHAPES =====

def _company_dash_position(line: str) -> Optional[PendingEntry]:
    """"Company — Position", accepted only when the job word is on the right."""
    m = DASH_HEADER_RE.match(line)
    if not m:
        return None
    left, right = m.group(1).strip(), m.group(2).strip()
    if _has_job_word(right) and not _has_job_word(left):
        return PendingEntry(company=left, position=right)
    return None


def _position_company_paren(line: str) -> Optional[PendingEntry]:
    """"Position - Company (Duration)"."""
    m = PAREN_HEADER_RE.match(line)
    if not m:
        return None
    return PendingEntry(
        position=m.group(1).strip(),
        company=m.group(2).strip(),
        duration=m.group(3).strip(),
    )


def _role_at_company(line: str) -> Optional[PendingEntry]:
    """"Position at|@|-|| Company", with a trailing "(...)" dropped from the company."""
    m = ROLE_COMPANY_RE.match(line)
    if not m:
        return None
    position = m.group(1).strip()
    if FOUR_DIGIT_YEAR_RE.search(position):
        # "Jan 2020 - Mar 2022" is a date line, not a role
        return None

    company = TRAILING_PAREN_RE.sub("", m.group(2).strip())
    duration = None
    span = _date_range_span(company)
    if span:
        duration = extract_duration(company)
        company = company[:span[0]].rstrip(" ,;|-–—")
    if not company:
        return None
    return PendingEntry(company=company, position=position, duration=duration)


HEADER_STRATEGIES: Tuple[Callable[[str], Optional[PendingEntry]], ...] = (
    _company_dash_position,
    _position_company_paren,
    _role_at_company,
)


def match_entry_header(line: str) -> Optional[PendingEntry]:
    """A new entry if the line has a recognized header shape; bullets never do."""
    if is_bullet_line(line):
        return None
    return first_match(HEADER_STRATEGIES, line)


# ===== SCANNER =====

class ExperienceScanner:
    """
    Finite-state accumulator over résumé lines.

    ``state`` is OUTSIDE or INSIDE the experience section; ``pending`` is the
    entry being built. With ``track_headers`` off the scanner never changes
    state, which is how a pre-sliced section body is scanned.
    """

    def __init__(self, state: ScanState = ScanState.OUTSIDE, track_headers: bool = True):
        self.state = state
        self.track_headers = track_headers
        self.pending = PendingEntry()
        self.entries: List[WorkExperience] = []

    def commit(self) -> None:
        """Emit the pending entry if complete, then start a fresh one."""
        if self.pending.is_complete:
            self.entries.append(self.pending.to_experience())
        elif self.pending.company or self.pending.position:
            logger.debug(f"Dropping incomplete experience entry: {self.pending}")
        self.pending = PendingEntry()

    def feed(self, line: str) -> None:
        line = line.strip()
        lower = line.lower()

        if self.track_headers:
            if any(k in lower for k in ENTER_KEYWORDS):
                self.state = ScanState.INSIDE
                return
            if self.state is ScanState.INSIDE and any(k in lower for k in EXIT_KEYWORDS):
                self.commit()
                self.state = ScanState.OUTSIDE
                return

        if self.state is not ScanState.INSIDE or not line:
            return

        header = match_entry_header(line)
        if header is not None:
            self.commit()
            self.pending = header
            return

        self._update_pending(line)

    def _update_pending(self, line: str) -> None:
        duration = extract_duration(line)
        if duration:
            self.pending.duration = duration
            return

        if (
            is_bullet_line(line)
            and len(line) > 20
            and "@" not in line
            and not FOUR_DIGIT_YEAR_RE.search(line)
        ):
            clean = strip_bullet(line)
            if len(clean) > 10:
                self.pending.description = (self.pending.description or "") + clean + " "

    def finish(self) -> List[WorkExperience]:
        self.commit()
        return self.entries


def parse_experience_section(lines: Sequence[str]) -> List[WorkExperience]:
    """Entries from an experience section body (header line excluded)."""
    scanner = ExperienceScanner(state=ScanState.INSIDE, track_headers=False)
    for line in lines:
        scanner.feed(line)
    return scanner.finish()


def extract_work_experience(text: str) -> List[WorkExperience]:
    """Entries from the full text, using header keywords to find the section."""
    scanner = ExperienceScanner()
    for line in text.split("\n"):
        scanner.feed(line)
    return scanner.finish()
