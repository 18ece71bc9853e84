from io import BytesIO
from docx import Document
from fastapi.testclient import TestClient
from app.core.docx_extractor import extract_docx_text
from app.main import app

client = TestClient(app)

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def save(doc):
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


def docx_bytes(paragraphs, table_rows=None):
    doc = Document()
    for p in paragraphs:
        doc.add_paragraph(p)
    if table_rows:
        table = doc.add_table(rows=len(table_rows), cols=len(table_rows[0]))
        for r, row in enumerate(table_rows):
            for c, value in enumerate(row):
                table.cell(r, c).text = value
    return save(doc)


def test_parse_docx_extracts_candidate():
    data = docx_bytes([
        "Jane Doe",
        "Senior Backend Engineer",
        "jane.doe@example.com",
        "Skills",
        "Python: 5 years, FastAPI",
        "Experience",
        "Software Engineer - Acme Corp (Jan 2020 - present)",
        "- Built scalable APIs for partners",
        "Education",
        "B.Sc Computer Science, State University",
    ])

    files = {"file": ("resume.docx", data, DOCX_MIME)}
    r = client.post("/parse", files=files)
    assert r.status_code == 200
    body = r.json()

    assert body["used_fallback"] is False
    candidate = body["candidate"]
    assert candidate["name"] == "Jane Doe"
    assert candidate["job_title"] == "Senior Backend Engineer"
    assert candidate["email"] == "jane.doe@example.com"
    assert candidate["education"] == ["B.Sc Computer Science, State University"]
    assert candidate["experience"][0]["company"] == "Acme Corp"
    assert candidate["experience"][0]["duration"] == "Jan 2020 - present"
    assert candidate["source_filename"] == "resume.docx"


def test_parse_docx_reads_table_cells():
    data = docx_bytes(["Jane Doe", "Data Engineer"], table_rows=[["jane@x.com", "Austin, TX"]])

    r = client.post("/parse", files={"file": ("resume.docx", data, DOCX_MIME)})
    candidate = r.json()["candidate"]

    assert candidate["email"] == "jane@x.com"
    assert candidate["location"] == "Austin, TX"



# ===== DOCUMENT ORDER =====

def table_between_sections():
    doc = Document()
    doc.add_paragraph("Jane Doe")
    doc.add_paragraph("Experience")
    table = doc.add_table(rows=1, cols=1)
    table.cell(0, 0).text = "Software Engineer - Acme Corp (Jan 2020 - present)"
    doc.add_paragraph("Education")
    doc.add_paragraph("B.Sc Computer Science, State University")
    return save(doc)


def test_table_text_stays_where_the_table_sits():
    assert extract_docx_text(table_between_sections()).splitlines() == [
        "Jane Doe",
        "Experience",
        "Software Engineer - Acme Corp (Jan 2020 - present)",
        "Education",
        "B.Sc Computer Science, State University",
    ]


def test_table_inside_experience_section_is_parsed():
    r = client.post("/parse", files={"file": ("resume.docx", table_between_sections(), DOCX_MIME)})
    candidate = r.json()["candidate"]

    assert [(e["position"], e["company"]) for e in candidate["experience"]] == [("Software Engineer", "Acme Corp")]
    assert candidate["education"] == ["B.Sc Computer Science, State University"]


def test_merged_cell_text_emitted_once():
    doc = Document()
    table = doc.add_table(rows=1, cols=2)
    merged = table.cell(0, 0).merge(table.cell(0, 1))
    merged.text = "Jane Doe"

    assert extract_docx_text(save(doc)) == "Jane Doe"


# ===== SKILL GROUPS =====

def test_parse_response_groups_skills_by_label():
    data = docx_bytes(["Jane Doe", "Backend Engineer", "Skills", "Python: 5 years", "Docker"])

    body = client.post("/parse", files={"file": ("resume.docx", data, DOCX_MIME)}).json()
    groups = body["skills_by_category"]

    assert set(groups) == {
        "Frontend Skills", "Backend Skills", "Development Tools",
        "Soft Skills", "Database Skills", "Cloud Platforms",
    }
    assert [s["name"] for s in groups["Backend Skills"]] == ["Python"]
    assert groups["Frontend Skills"] == []


def test_placeholder_record_groups_soft_skills():
    r = client.post("/parse", files={"file": ("resume.txt", b"Jane Doe", "text/plain")})
    groups = r.json()["skills_by_category"]

    assert [s["name"] for s in groups["Soft Skills"]] == ["Problem Solving", "Communication"]

def test_empty_upload_rejected():
    r = client.post("/parse", files={"file": ("resume.docx", b"", DOCX_MIME)})
    assert r.status_code == 400


def test_unsupported_upload_returns_placeholder():
    r = client.post("/parse", files={"file": ("resume.txt", b"Jane Doe", "text/plain")})
    assert r.status_code == 200
    body = r.json()

    assert body["used_fallback"] is True
    assert body["warnings"]
    assert body["candidate"]["name"] == "Unknown Candidate"


def test_batch_endpoint():
    files = [
        ("files", ("a.docx", docx_bytes(["Alice Smith", "Data Analyst"]), DOCX_MIME)),
        ("files", ("b.txt", b"not a resume", "text/plain")),
    ]
    r = client.post("/parse/batch", files=files)
    assert r.status_code == 200
    body = r.json()

    assert [c["name"] for c in body["candidates"]] == ["Alice Smith"]
    assert body["failed"] == ["b.txt"]


def test_health():
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/").json()["status"] == "running"
