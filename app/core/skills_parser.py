"""
Skill extraction.

Two modes:
- extract_skills(): keyword scan over free text (used when there is no skills
  section), sorted by confidence and capped
- parse_skills_section(): the same scan over a skills section body, plus
  explicit "<name>: N years" lines, not capped
"""

import re
import logging
from typing import Dict, Iterable, List, Optional

from app.core.config import get_config
from app.core.confidence_calculator import ConfidenceCalculator
from app.core.schemas import Skill
from app.core.vocabulary import CATEGORY_LABELS, SKILL_KEYWORDS

logger = logging.getLogger(__name__)


# "Python: 5 years", "Node.js - 3 years", "Languages: Go - 2 years" (takes "Go")
EXPLICIT_SKILL_YEARS_RE = re.compile(
    r"([A-Za-z0-9.+#][A-Za-z0-9.+#\-\s/]*?)\s*[:\-]\s*(\d+)\s*years?",
    re.IGNORECASE,
)


def dedupe_skills(skills: Iterable[Skill]) -> List[Skill]:
    """Keep the first skill for each case-insensitive name."""
    seen = set()
    out: List[Skill] = []
    for skill in skills:
        key = skill.name.lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(skill)
    return out


def scan_skill_keywords(text: str) -> List[Skill]:
    """Every vocabulary keyword present in the text, scored, deduplicated, best first."""
    lower = text.lower()
    found: List[Skill] = []
    for category, keywords in SKILL_KEYWORDS.items():
        for keyword in keywords:
            if keyword.lower() not in lower:
                continue
            found.append(Skill(
                name=keyword,
                category=category,
                years_of_experience=ConfidenceCalculator.skill_years(text, keyword),
                confidence=ConfidenceCalculator.skill_confidence(text, keyword),
            ))

    unique = dedupe_skills(found)
    unique.sort(key=lambda s: s.confidence, reverse=True)
    return unique


def extract_skills(text: str, limit: Optional[int] = None) -> List[Skill]:
    """Full-text fallback: keyword scan capped at ``limit`` (configured default 15)."""
    if limit is None:
        limit = get_config().max_fulltext_skills
    return scan_skill_keywords(text)[:limit]


def parse_skills_section(lines: List[str]) -> List[Skill]:
    """
    Skills from a skills section body.

    Keyword hits are scored over the section text. A line stating
    "<name>: N years" then raises a known skill's years (never lowers them) and
    nudges its confidence by 0.2, or adds the name as a new "tools" skill.
    """
    skills = scan_skill_keywords("\n".join(lines))
    by_name: Dict[str, Skill] = {s.name.lower(): s for s in skills}

    for line in lines:
        m = EXPLICIT_SKILL_YEARS_RE.search(line)
        if not m:
            continue
        name = m.group(1).strip()
        years = int(m.group(2))
        key = name.lower()
        found = by_name.get(key)
        if found:
            found.years_of_experience = max(found.years_of_experience, years)
            found.confidence = ConfidenceCalculator.boost(found.confidence)
        else:
            logger.debug(f"Adding unlisted skill from section: {name!r} ({years} years)")
            skill = Skill(name=name, category="tools", years_of_experience=years, confidence=0.6)
            skills.append(skill)
            by_name[key] = skill

    return skills


def group_skills_by_category(skills: Iterable[Skill]) -> Dict[str, List[Skill]]:
    """Skills bucketed by category; every category is present, possibly empty."""
    groups: Dict[str, List[Skill]] = {category: [] for category in CATEGORY_LABELS}
    for skill in skills:
        groups[skill.category].append(skill)
    return groups


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, category)


def skills_by_label(skills: Iterable[Skill]) -> Dict[str, List[Skill]]:
    """Grouped skills keyed by display label ("Backend Skills", ...)."""
    return {category_label(category): group for category, group in group_skills_by_category(skills).items()}
