"""
Confidence and years-of-experience scoring for skill claims.

These are empirical scores, not calibrated probabilities. They reward explicit
phrasing ("expert in React", "Python: 5 years") and repeated mentions.

Confidence Scale:
  1.0   = Strongly claimed (expert/proficient phrasing plus repeated mentions)
  0.8   = Claimed with context or mentioned several times
  0.6   = Mentioned once
  0.5   = Baseline for any keyword hit
"""

import re
from typing import Optional, Tuple


BASE_CONFIDENCE = 0.5
MAX_FREQUENCY_BONUS = 0.3

# (phrase template, bonus); bonuses are additive, not exclusive
CONTEXT_BONUSES: Tuple[Tuple[str, float], ...] = (
    ("{skill} experience", 0.2),
    ("proficient in {skill}", 0.2),
    ("expert in {skill}", 0.3),
    ("skilled in {skill}", 0.1),
)

# Years patterns, tried in order; "{skill}" is replaced by the escaped skill name
YEARS_PATTERN_TEMPLATES: Tuple[str, ...] = (
    r"(\d+)\s*years?\s*(?:of\s*)?{skill}",         # "3 years of react"
    r"{skill}\s*\((\d+)\s*years?\)",                # "react (3 years)"
    r"{skill}\s*(?:for\s*)?(\d+)\s*years?",         # "react for 3 years"
    r"{skill}\s*[:\-]\s*(\d+)\s*years?",            # "node.js: 6 years"
    r"[•\-]\s*{skill}\s*:?\s*(\d+)\s*years?",       # "• node.js: 6 years"
)


class ConfidenceCalculator:
    """Central place for skill scoring logic."""

    @staticmethod
    def occurrences(text: str, skill: str) -> int:
        """Case-insensitive, non-overlapping substring count."""
        return text.lower().count(skill.lower())

    @staticmethod
    def explicit_years(text: str, skill: str) -> Optional[int]:
        """Years stated next to the skill name, if any."""
        escaped = re.escape(skill.lower())
        lower = text.lower()
        for template in YEARS_PATTERN_TEMPLATES:
            m = re.search(template.replace("{skill}", escaped), lower)
            if m:
                return int(m.group(1))
        return None

    @staticmethod
    def skill_years(text: str, skill: str) -> int:
        """
        Years of experience with a skill.

        Uses an explicit statement when one exists. Otherwise falls back to how
        often the skill is mentioned: 3+ mentions -> 3 years, 2 -> 2, else 1.
        """
        years = ConfidenceCalculator.explicit_years(text, skill)
        if years is not None:
            return years

        frequency = ConfidenceCalculator.occurrences(text, skill)
        if frequency >= 3:
            return 3
        if frequency >= 2:
            return 2
        return 1

    @staticmethod
    def skill_confidence(text: str, skill: str) -> float:
        """
        Confidence that the candidate actually has a skill.

        Factors:
          + "<skill> experience"       +0.2
          + "proficient in <skill>"    +0.2
          + "expert in <skill>"        +0.3
          + "skilled in <skill>"       +0.1
          + 0.1 per mention, at most +0.3
        """
        lower = text.lower()
        skill_lower = skill.lower()

        confidence = BASE_CONFIDENCE
        for template, bonus in CONTEXT_BONUSES:
            if template.format(skill=skill_lower) in lower:
                confidence += bonus

        frequency = ConfidenceCalculator.occurrences(text, skill)
        confidence += min(frequency * 0.1, MAX_FREQUENCY_BONUS)

        return round(min(confidence, 1.0), 2)

    @staticmethod
    def boost(confidence: float, amount: float = 0.2) -> float:
        """Raise a confidence, capped at 1.0."""
        return round(min(1.0, confidence + amount), 2)
