"""
Parse orchestration: file bytes -> Candidate.

Sequence for one file:
1) load the document (PDF fragments or DOCX text)
2) take a font-size name hint from PDF page 1
3) run the banner heuristics (job title, contact details, name) on raw lines
4) detect sections on normalized lines; use section-scoped extractors where a
   section exists and full-text fallbacks otherwise
5) reconcile total experience and assemble the record

A file that cannot be read yields a placeholder record (single parse) or is
skipped (batch); heuristic misses simply leave fields at their defaults.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from app.core.config import get_config
from app.core.contact_parser import extract_email, extract_location, extract_phone, find_contact_index
from app.core.document_loader import ExtractedDocument, DocumentFormat, load_document
from app.core.duration import calculate_total_experience
from app.core.education_parser import extract_education, parse_education_section
from app.core.errors import ResumeParseError
from app.core.experience_parser import extract_work_experience, parse_experience_section
from app.core.header_parser import extract_job_title, extract_name, extract_summary, find_line_index
from app.core.line_reconstructor import extract_name_hint
from app.core.schemas import Candidate, Skill
from app.core.section_detector import detect_sections, section_lines
from app.core.skills_parser import extract_skills, parse_skills_section
from app.core.text_normalization import normalize_ats_lines, split_raw_lines

logger = logging.getLogger(__name__)


FALLBACK_WARNING = "Processing failed for this file; a placeholder record was returned."


@dataclass
class ParseOutcome:
    candidate: Candidate
    used_fallback: bool = False
    warnings: List[str] = field(default_factory=list)


@dataclass
class BatchResult:
    candidates: List[Candidate] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


def _new_candidate_id() -> str:
    return uuid.uuid4().hex


def parse_fields(text: str, name_hint: Optional[str] = None) -> Dict[str, Any]:
    """
    Every heuristic field of a Candidate, computed from text alone.

    Deterministic for a given input (apart from "present" date resolution).
    """
    lines = split_raw_lines(text)

    job_title = extract_job_title(lines)
    email = extract_email(text)
    phone = extract_phone(text)
    location = extract_location(lines)

    job_index = find_line_index(lines, job_title)
    contact_index = find_contact_index(lines, email, phone)
    name = extract_name(lines, name_hint, job_index=job_index, contact_index=contact_index)

    normalized = normalize_ats_lines(text)
    sections = detect_sections(normalized)

    if "skills" in sections:
        skills = parse_skills_section(section_lines(normalized, sections["skills"]))
    else:
        skills = extract_skills(text)

    if "experience" in sections:
        experience = parse_experience_section(section_lines(normalized, sections["experience"]))
    else:
        experience = extract_work_experience(text)

    if "education" in sections:
        education = parse_education_section(section_lines(normalized, sections["education"]))
    else:
        education = extract_education(text)

    logger.debug(
        f"Parsed fields: name={name!r} title={job_title!r} skills={len(skills)} "
        f"experience={len(experience)} education={len(education)} sections={sorted(sections)}"
    )

    return {
        "name": name,
        "job_title": job_title,
        "total_experience": calculate_total_experience(text, experience),
        "skills": skills,
        "email": email,
        "phone": phone,
        "location": location,
        "summary": extract_summary(text),
        "education": education,
        "experience": experience,
    }


def parse_resume_text(text: str, name_hint: Optional[str] = None, source_filename: Optional[str] = None) -> Candidate:
    """Build a Candidate from already-extracted text."""
    fields = parse_fields(text, name_hint)
    return Candidate(
        id=_new_candidate_id(),
        uploaded_at=datetime.now(),
        source_filename=source_filename,
        **fields,
    )


def parse_document(document: ExtractedDocument, source_filename: Optional[str] = None) -> Candidate:
    name_hint = extract_name_hint(document.pages) if document.format is DocumentFormat.PDF else None
    return parse_resume_text(document.text, name_hint=name_hint, source_filename=source_filename)


def create_fallback_candidate(source_filename: Optional[str] = None) -> Candidate:
    """Placeholder record for a file whose text could not be extracted."""
    config = get_config()
    return Candidate(
        id=_new_candidate_id(),
        name=config.default_name,
        job_title=config.default_job_title,
        total_experience=0.0,
        skills=[
            Skill(name="Problem Solving", category="soft", years_of_experience=1, confidence=0.5),
            Skill(name="Communication", category="soft", years_of_experience=1, confidence=0.5),
        ],
        uploaded_at=datetime.now(),
        source_filename=source_filename,
    )


def parse_resume(data: bytes, filename: Optional[str] = None, content_type: Optional[str] = None) -> ParseOutcome:
    """
    Parse one uploaded file.

    Never raises for unreadable input: unsupported or corrupt files produce the
    placeholder record with ``used_fallback`` set.
    """
    try:
        document = load_document(data, filename, content_type)
    except ResumeParseError as e:
        logger.warning(f"Falling back to placeholder record for {filename!r}: {e}", exc_info=True)
        return ParseOutcome(
            candidate=create_fallback_candidate(filename),
            used_fallback=True,
            warnings=[FALLBACK_WARNING],
        )

    candidate = parse_document(document, source_filename=filename)
    logger.info(f"Parsed {filename!r}: {candidate.name!r}, {len(candidate.skills)} skills")
    return ParseOutcome(candidate=candidate)


def parse_resume_batch(uploads: Iterable[Tuple[bytes, Optional[str], Optional[str]]]) -> BatchResult:
    """
    Parse (data, filename, content_type) uploads strictly one at a time, in order.

    A file that cannot be read is logged and left out; the others are unaffected.
    """
    result = BatchResult()
    for index, (data, filename, content_type) in enumerate(uploads):
        try:
            document = load_document(data, filename, content_type)
        except ResumeParseError as e:
            logger.warning(f"Skipping file {index} ({filename!r}) in batch: {e}", exc_info=True)
            result.failed.append(filename or f"file-{index}")
            continue
        result.candidates.append(parse_document(document, source_filename=filename))

    logger.info(f"Batch parsed: {len(result.candidates)} ok, {len(result.failed)} failed")
    return result
