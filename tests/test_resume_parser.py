"""
Tests for the parse orchestrator: text -> Candidate, file -> outcome, batches.
"""

from io import BytesIO

from docx import Document

from app.core.document_loader import DOCX_MIME, DocumentFormat, ExtractedDocument
from app.core.resume_parser import (
    create_fallback_candidate,
    parse_document,
    parse_resume,
    parse_resume_batch,
    parse_resume_text,
)
from app.core.schemas import TextFragment


RESUME_TEXT = """Jane Doe
Senior Backend Engineer
jane.doe@example.com | +1 555 123 4567
Austin, TX
Summary
Backend engineer focused on reliable, data-heavy APIs.
Skills
Python: 5 years
PostgreSQL, Docker, Git
Experience
Software Engineer - Acme Corp (Jan 2020 - Mar 2022)
• Built scalable APIs for billing
Data Analyst at Initech
2017 - 2019
Education
B.Sc Computer Science, State University
"""


def make_docx(*paragraphs):
    doc = Document()
    for p in paragraphs:
        doc.add_paragraph(p)
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


# ===== TEXT PARSING =====

def test_parse_resume_text_fields():
    candidate = parse_resume_text(RESUME_TEXT, source_filename="jane.pdf")

    assert candidate.name == "Jane Doe"
    assert candidate.job_title == "Senior Backend Engineer"
    assert candidate.email == "jane.doe@example.com"
    assert candidate.phone == "+1 555 123 4567"
    assert candidate.location == "Austin, TX"
    assert candidate.summary.startswith("Backend engineer focused")
    assert candidate.education == ["B.Sc Computer Science, State University"]
    assert candidate.source_filename == "jane.pdf"
    assert candidate.status == "active"


def test_parse_resume_text_sections():
    candidate = parse_resume_text(RESUME_TEXT)

    skills = {s.name: s for s in candidate.skills}
    assert {"Python", "PostgreSQL", "Docker", "Git"} <= set(skills)
    assert skills["Python"].years_of_experience == 5

    assert [(e.position, e.company, e.duration) for e in candidate.experience] == [
        ("Software Engineer", "Acme Corp", "Jan 2020 - Mar 2022"),
        ("Data Analyst", "Initech", "2017 - 2019"),
    ]
    assert candidate.experience[0].description == "Built scalable APIs for billing "

    # (26 + 24) months
    assert candidate.total_experience == 4.2


def test_plural_experience_header_ends_skills_section():
    """Lines under "Experiences" are not read as skills."""
    candidate = parse_resume_text("Skills\nPython\nExperiences\nSenior Engineer at Acme\nGo: 4 years")

    names = [s.name for s in candidate.skills]
    assert "Python" in names
    assert "Go" not in names


def test_parse_is_deterministic_apart_from_identity():
    first = parse_resume_text(RESUME_TEXT)
    second = parse_resume_text(RESUME_TEXT)

    assert first.id != second.id
    exclude = {"id", "uploaded_at"}
    assert first.model_dump(exclude=exclude) == second.model_dump(exclude=exclude)


def test_parse_without_sections_uses_full_text_fallbacks():
    text = "Sam Lee\nDesigner\nsam@lee.io\nWorked with Figma and Figma prototypes\n"
    candidate = parse_resume_text(text)

    assert candidate.name == "Sam Lee"
    assert "Figma" in [s.name for s in candidate.skills]
    assert candidate.experience == []
    assert candidate.education == []
    assert candidate.total_experience == 0.0


def test_parse_empty_text_gives_defaults():
    candidate = parse_resume_text("")

    assert candidate.name == "Unknown Candidate"
    assert candidate.job_title == "Software Developer"
    assert candidate.skills == []
    assert candidate.email is None


def test_parse_document_uses_pdf_name_hint():
    pages = [[
        TextFragment(text="Maria", baseline_y=750, font_size=24),
        TextFragment(text="Garcia", baseline_y=750, font_size=24),
        TextFragment(text="Resume 2024", baseline_y=720, font_size=10),
    ]]
    document = ExtractedDocument(format=DocumentFormat.PDF, text="Resume 2024\nmaria@x.com\n", pages=pages)

    candidate = parse_document(document, source_filename="maria.pdf")
    assert candidate.name == "Maria Garcia"
    assert candidate.email == "maria@x.com"


# ===== FILE PARSING =====

def test_parse_resume_docx():
    data = make_docx("Jane Doe", "Senior Backend Engineer", "jane@x.com")
    outcome = parse_resume(data, filename="jane.docx", content_type=DOCX_MIME)

    assert not outcome.used_fallback
    assert outcome.warnings == []
    assert outcome.candidate.name == "Jane Doe"
    assert outcome.candidate.source_filename == "jane.docx"


def test_unsupported_file_gives_fallback():
    outcome = parse_resume(b"plain text resume", filename="resume.txt", content_type="text/plain")

    assert outcome.used_fallback
    assert outcome.warnings
    assert outcome.candidate.name == "Unknown Candidate"
    assert [s.name for s in outcome.candidate.skills] == ["Problem Solving", "Communication"]


def test_corrupt_docx_gives_fallback():
    outcome = parse_resume(b"not a zip archive", filename="broken.docx", content_type=DOCX_MIME)

    assert outcome.used_fallback
    assert outcome.candidate.source_filename == "broken.docx"


def test_empty_file_gives_fallback():
    assert parse_resume(b"", filename="empty.docx").used_fallback


def test_fallback_candidate_shape():
    candidate = create_fallback_candidate("x.pdf")

    assert candidate.total_experience == 0.0
    assert all(s.category == "soft" for s in candidate.skills)
    assert all(s.years_of_experience == 1 and s.confidence == 0.5 for s in candidate.skills)


# ===== BATCH =====

def test_batch_skips_failures_and_keeps_order():
    uploads = [
        (make_docx("Alice Smith", "Data Analyst"), "alice.docx", DOCX_MIME),
        (b"junk", "notes.txt", "text/plain"),
        (make_docx("Bob Jones", "Product Manager"), "bob.docx", DOCX_MIME),
    ]
    result = parse_resume_batch(uploads)

    assert [c.name for c in result.candidates] == ["Alice Smith", "Bob Jones"]
    assert result.failed == ["notes.txt"]


def test_empty_batch():
    result = parse_resume_batch([])
    assert result.candidates == []
    assert result.failed == []
