"""
Score parsed candidates against a job's skill requirements.

Each requirement is worth weight * 10 points:
  - matching skill with enough years  -> full points
  - matching skill, fewer years       -> points scaled by years / minimum
  - required skill missing            -> minus weight * 5
The sum is normalized to 0-100.
"""

from typing import List, Optional

from app.core.schemas import Candidate, Job, JobRequirement, MatchResult, Skill


def find_matching_skill(candidate: Candidate, requirement: JobRequirement) -> Optional[Skill]:
    """First skill whose lowercase name equals or contains the requirement name."""
    wanted = requirement.skill_name.lower()
    for skill in candidate.skills:
        name = skill.name.lower()
        if name == wanted or wanted in name:
            return skill
    return None


def _requirement_points(candidate: Candidate, requirement: JobRequirement) -> float:
    full = requirement.weight * 10
    skill = find_matching_skill(candidate, requirement)
    if skill is None:
        return -requirement.weight * 5 if requirement.is_required else 0.0
    if skill.years_of_experience >= requirement.minimum_years:
        return float(full)
    return full * (skill.years_of_experience / requirement.minimum_years)


def calculate_match_score(candidate: Candidate, job: Job) -> float:
    if not job.requirements:
        return 0.0

    total_score = sum(_requirement_points(candidate, r) for r in job.requirements)
    total_weight = sum(r.weight * 10 for r in job.requirements)
    return max(0.0, min(100.0, total_score / total_weight * 100))


def rank_candidates(candidates: List[Candidate], job: Job) -> List[MatchResult]:
    """Candidates paired with their score, best match first (ties keep input order)."""
    results = [MatchResult(candidate=c, match_score=calculate_match_score(c, job)) for c in candidates]
    results.sort(key=lambda r: r.match_score, reverse=True)
    return results
