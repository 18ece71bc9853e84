from typing import List

from fastapi import APIRouter, UploadFile, File, HTTPException

from app.core.resume_parser import parse_resume, parse_resume_batch
from app.core.schemas import BatchParseResponse, ParseResponse
from app.core.skills_parser import skills_by_label

router = APIRouter(tags=["parse"])


@router.post(
    "/parse",
    response_model=ParseResponse,
    summary="Parse Resume",
    description="Extract a structured candidate record from a resume file (PDF or DOCX). Files that cannot be read return a placeholder record with used_fallback set.",
    responses={
        200: {
            "description": "Parsed resume (or placeholder record)",
            "content": {
                "application/json": {
                    "example": {
                        "candidate": {
                            "id": "3f2b8c0e9a4d4b6f8e1c2d3a4b5c6d7e",
                            "name": "Jane Doe",
                            "job_title": "Senior Backend Engineer",
                            "total_experience": 4.5,
                            "skills": [
                                {"name": "Python", "category": "backend", "years_of_experience": 5, "confidence": 0.8}
                            ],
                            "email": "jane@example.com",
                            "phone": "+1 555 123 4567",
                            "location": "Austin, TX",
                            "summary": "Backend engineer focused on data-heavy APIs.",
                            "education": ["B.Sc Computer Science, State University"],
                            "experience": [
                                {
                                    "company": "Acme Corp",
                                    "position": "Software Engineer",
                                    "duration": "Jan 2020 - present",
                                    "description": "Built scalable APIs "
                                }
                            ],
                            "uploaded_at": "2024-05-01T10:00:00",
                            "status": "active",
                            "source_filename": "jane_doe.pdf"
                        },
                        "used_fallback": False,
                        "warnings": [],
                        "skills_by_category": {
                            "Frontend Skills": [],
                            "Backend Skills": [
                                {"name": "Python", "category": "backend", "years_of_experience": 5, "confidence": 0.8}
                            ],
                            "Development Tools": [],
                            "Soft Skills": [],
                            "Database Skills": [],
                            "Cloud Platforms": []
                        }
                    }
                }
            }
        },
        400: {"description": "Empty file uploaded"},
    }
)
async def parse_resume_file(
    file: UploadFile = File(..., description="Resume file (PDF or DOCX)")
):
    """
    Parse a resume file and extract candidate information.

    **Supported formats:**
    - PDF (.pdf) - text-layer extraction only, OCR not supported
    - DOCX (.docx)

    **Returns:**
    - **candidate**: name, job title, contact details, skills, experience, education, total experience
    - **used_fallback**: true when the file could not be read
    - **warnings**: any warnings raised while parsing
    - **skills_by_category**: the candidate skills grouped by category label
    """
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")

    outcome = parse_resume(raw, filename=file.filename, content_type=file.content_type)
    return ParseResponse(
        candidate=outcome.candidate,
        used_fallback=outcome.used_fallback,
        warnings=outcome.warnings,
        skills_by_category=skills_by_label(outcome.candidate.skills),
    )


@router.post(
    "/parse/batch",
    response_model=BatchParseResponse,
    summary="Parse Resumes",
    description="Parse several resume files one after another. Files that cannot be read are listed in `failed` and produce no record.",
)
async def parse_resume_files(
    files: List[UploadFile] = File(..., description="Resume files (PDF or DOCX)")
):
    uploads = []
    for f in files:
        uploads.append((await f.read(), f.filename, f.content_type))

    result = parse_resume_batch(uploads)
    return BatchParseResponse(candidates=result.candidates, failed=result.failed)
