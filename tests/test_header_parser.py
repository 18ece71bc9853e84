"""
Tests for the banner heuristics: name, job title and summary.
"""

import pytest
from app.core.header_parser import (
    extract_job_title,
    extract_name,
    extract_summary,
    find_line_index,
    looks_like_name,
)


# ===== NAME VALIDATION =====

@pytest.mark.parametrize("text", ["Jane Doe", "Mary-Jane O'Neil", "J. R. Smith", "Cher"])
def test_plausible_names(text):
    assert looks_like_name(text)


@pytest.mark.parametrize("text", [
    "Software Engineer",
    "jane@x.com",
    "Experience",
    "John Smith 3",
    "Doe, Jane",
    "https://example.com",
    "One Two Three Four Five Six",
    "",
    None,
])
def test_implausible_names(text):
    assert not looks_like_name(text)


# ===== NAME EXTRACTION =====

def test_name_and_title_from_banner():
    """Name sits above the job title, which sits above the contact line."""
    lines = ["Jane Doe", "Senior Backend Engineer", "jane@x.com"]

    title = extract_job_title(lines)
    assert title == "Senior Backend Engineer"

    name = extract_name(lines, job_index=find_line_index(lines, title), contact_index=2)
    assert name == "Jane Doe"


def test_name_near_contact_prefers_closest_line():
    lines = ["Resume", "John Smith", "john@x.com"]
    assert extract_name(lines, contact_index=2) == "John Smith"


def test_name_near_job_title_beats_hint():
    lines = ["Jane Doe", "Data Analyst"]
    assert extract_name(lines, name_hint="Someone Else", job_index=1) == "Jane Doe"


def test_name_hint_used_when_lines_fail():
    lines = ["12345", "Curriculum Vitae 2024"]
    assert extract_name(lines, name_hint="Maria Garcia") == "Maria Garcia"


def test_invalid_hint_is_ignored():
    lines = ["Curriculum Vitae 2024", "Sam Lee"]
    assert extract_name(lines, name_hint="SKILLS SUMMARY") == "Sam Lee"


def test_name_found_further_down():
    lines = ["Page 1", "2024", "#1", "***", "x@y.com", "Contact: 555", "Alex Kim"]
    assert extract_name(lines) == "Alex Kim"


def test_name_default_when_nothing_qualifies():
    assert extract_name(["12345", "jane@x.com"]) == "Unknown Candidate"


# ===== JOB TITLE =====

def test_title_strips_company_suffix():
    assert extract_job_title(["Jane Doe", "Senior Data Analyst - Acme Corp"]) == "Senior Data Analyst"
    assert extract_job_title(["Jane Doe", "Senior Developer at Globex"]) == "Senior Developer"
    assert extract_job_title(["Jane Doe", "Lead Designer | Initech"]) == "Lead Designer"


def test_title_starts_at_earliest_keyword():
    assert extract_job_title(["Jane Doe", "Accomplished Senior Product Manager"]) == "Senior Product Manager"


def test_title_skips_section_header_lines():
    lines = ["Jane Doe", "Skills: Team Lead", "Staff Engineer"]
    assert extract_job_title(lines) == "Staff Engineer"


def test_title_loose_scan_beyond_banner():
    lines = ["Jane Doe"] + [f"line {c}" for c in "abcdefghi"] + ["Lead Engineer"]
    assert extract_job_title(lines) == "Lead Engineer"


def test_title_default():
    assert extract_job_title(["Jane Doe", "jane@x.com"]) == "Software Developer"


def test_find_line_index():
    assert find_line_index(["a", "Senior Engineer"], "Engineer") == 1
    assert find_line_index(["a"], "Engineer") == -1


# ===== SUMMARY =====

def test_summary_joins_following_long_lines():
    text = "Jane\nSummary\nBackend engineer with an APIs focus\nshort\nLoves distributed systems work\nExperience"
    assert extract_summary(text) == "Backend engineer with an APIs focus Loves distributed systems work"


def test_summary_search_continues_past_empty_marker():
    text = "Profile\nA\nB\nC\nSummary\nSeasoned engineer building APIs"
    assert extract_summary(text) == "Seasoned engineer building APIs"


def test_summary_missing():
    assert extract_summary("Jane Doe\nExperience\nDeveloper at Acme") is None
