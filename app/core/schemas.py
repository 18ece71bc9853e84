from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field


SkillCategory = Literal["frontend", "backend", "tools", "soft", "database", "cloud"]
SectionKind = Literal["skills", "experience", "education", "projects", "contact"]
CandidateStatus = Literal["active", "not-to-forward", "archived"]


@dataclass(frozen=True)
class TextFragment:
    """One positioned run of text from a PDF page (baseline Y grows upward)."""
    text: str
    baseline_y: float
    font_size: float


@dataclass(frozen=True)
class ReconstructedLine:
    text: str
    max_font_size: float


class SectionRange(BaseModel):
    kind: SectionKind
    start_line: int = Field(..., ge=0, description="Index of the header line")
    end_line: int = Field(..., ge=0, description="Index of the last line in the section (inclusive)")


class Skill(BaseModel):
    name: str
    category: SkillCategory
    years_of_experience: int = Field(default=1, ge=0)
    confidence: float = Field(default=0.5, ge=0.0, le=1.0, description="Heuristic certainty, not a calibrated probability")


class WorkExperience(BaseModel):
    company: str
    position: str
    duration: Optional[str] = None  # "Jan 2020 - present", "2018 - 2021", ...
    description: Optional[str] = None


class Candidate(BaseModel):
    id: str
    name: str
    job_title: str
    total_experience: float = Field(default=0.0, ge=0.0, description="Years, one decimal when derived from durations")
    skills: List[Skill] = Field(default_factory=list)
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    summary: Optional[str] = None
    education: List[str] = Field(default_factory=list)
    experience: List[WorkExperience] = Field(default_factory=list)
    uploaded_at: datetime = Field(default_factory=datetime.now)
    status: CandidateStatus = "active"
    source_filename: Optional[str] = None


class ParseResponse(BaseModel):
    candidate: Candidate
    used_fallback: bool = Field(default=False, description="True when the file could not be read and a placeholder record was returned")
    warnings: List[str] = Field(default_factory=list)
    skills_by_category: Dict[str, List[Skill]] = Field(default_factory=dict, description="Candidate skills grouped under display labels; every label is present")


class BatchParseResponse(BaseModel):
    candidates: List[Candidate] = Field(default_factory=list)
    failed: List[str] = Field(default_factory=list, description="Filenames that produced no candidate record")


class JobRequirement(BaseModel):
    skill_name: str
    category: SkillCategory
    minimum_years: float = Field(default=0, ge=0)
    is_required: bool = False
    weight: int = Field(default=5, ge=1, le=10, description="1-10, how much this skill matters")


class Job(BaseModel):
    id: str
    title: str
    description: str = ""
    requirements: List[JobRequirement] = Field(default_factory=list)
    location: Optional[str] = None
    status: Literal["active", "closed"] = "active"


class MatchRequest(BaseModel):
    candidates: List[Candidate]
    job: Job


class MatchResult(BaseModel):
    candidate: Candidate
    match_score: float = Field(..., ge=0.0, le=100.0)
