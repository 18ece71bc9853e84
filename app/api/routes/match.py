from typing import List

from fastapi import APIRouter

from app.core.job_match import rank_candidates
from app.core.schemas import MatchRequest, MatchResult

router = APIRouter(tags=["match"])


@router.post(
    "/match",
    response_model=List[MatchResult],
    summary="Rank Candidates",
    description="Score candidates against a job's skill requirements (0-100) and return them best match first.",
)
def match_candidates(request: MatchRequest):
    return rank_candidates(request.candidates, request.job)
