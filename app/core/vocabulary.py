"""
Read-only keyword tables and regexes shared by the field extractors.

English and Indonesian synonyms are covered where resumes commonly use both.
"""

import re
from typing import Dict, Tuple


# Job-title vocabulary, in the order used for earliest-keyword matching
JOB_TITLE_KEYWORDS: Tuple[str, ...] = (
    "Developer", "Engineer", "Manager", "Analyst", "Designer", "Consultant",
    "Specialist", "Lead", "Senior", "Junior", "Associate", "Principal", "Staff",
    "Architect", "Coordinator", "Administrator", "Executive", "Officer",
    "Representative", "Assistant", "Intern", "Trainee",
)
JOB_TITLE_WORDS_LOWER: Tuple[str, ...] = tuple(k.lower() for k in JOB_TITLE_KEYWORDS)

# Words that mark a company/position split as "the position side"
EXPERIENCE_JOB_WORDS: Tuple[str, ...] = (
    "developer", "engineer", "manager", "analyst", "designer", "consultant",
    "specialist", "lead", "senior", "junior", "associate", "principal", "staff",
    "architect", "coordinator", "administrator", "executive", "officer",
)

# Tokens that disqualify a line from being a person's name
NAME_BLOCKING_WORDS = frozenset({
    "software", "developer", "engineer", "manager", "analyst", "consultant",
    "specialist", "lead", "senior", "junior", "architect", "designer",
})

# Substrings that make a line look like a section header rather than a name
NAME_SECTION_WORDS: Tuple[str, ...] = ("summary", "experience", "education", "skills", "projects", "contact")
HINT_SECTION_WORDS: Tuple[str, ...] = ("summary", "experience", "education", "skills", "contact")

SKILL_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "frontend": (
        "React", "Vue", "Angular", "JavaScript", "TypeScript", "HTML", "CSS", "SASS",
        "SCSS", "Next.js", "Nuxt.js", "jQuery", "Bootstrap", "Tailwind",
    ),
    "backend": (
        "Node.js", "Python", "Java", "C#", "PHP", "Ruby", "Go", "Rust", "Django",
        "Flask", "Express", "Spring", "Laravel", "Rails", "ASP.NET",
    ),
    "database": (
        "MySQL", "PostgreSQL", "MongoDB", "Redis", "SQLite", "Oracle", "SQL Server",
        "DynamoDB", "Cassandra", "Elasticsearch", "SQL",
    ),
    "cloud": (
        "AWS", "Azure", "GCP", "Google Cloud", "Docker", "Kubernetes", "Terraform",
        "CloudFormation", "Heroku", "Vercel", "Netlify",
    ),
    "tools": (
        "Git", "GitHub", "GitLab", "Jenkins", "CI/CD", "Docker", "Kubernetes",
        "Terraform", "Ansible", "Jira", "Confluence", "Slack", "VS Code", "IntelliJ",
        "Power BI", "Tableau", "Excel", "HRIS", "Figma", "Design System",
        "Prototyping", "A/B Testing", "Usability Testing",
    ),
    "soft": (
        "Leadership", "Communication", "Teamwork", "Problem Solving",
        "Project Management", "Agile", "Scrum", "Mentoring", "Public Speaking",
        "Recruitment & Selection", "Recruitment", "Selection", "Employee Relations",
        "Talent Acquisition", "People & Culture", "Onboarding", "Employer Branding",
        "User Research",
    ),
}

CATEGORY_LABELS: Dict[str, str] = {
    "frontend": "Frontend Skills",
    "backend": "Backend Skills",
    "tools": "Development Tools",
    "soft": "Soft Skills",
    "database": "Database Skills",
    "cloud": "Cloud Platforms",
}

MONTH_INDEX: Dict[str, int] = {
    "jan": 0, "january": 0,
    "feb": 1, "february": 1,
    "mar": 2, "march": 2,
    "apr": 3, "april": 3,
    "may": 4,
    "jun": 5, "june": 5,
    "jul": 6, "july": 6,
    "aug": 7, "august": 7,
    "sep": 8, "sept": 8, "september": 8,
    "oct": 9, "october": 9,
    "nov": 10, "november": 10,
    "dec": 11, "december": 11,
}
MONTH_ABBREVIATIONS: Tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

MONTH_PATTERN = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|Jul(?:y)?"
    r"|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
RANGE_DASH = r"[-–—]"

# "Jan 2020 - Mar 2022", "March 2019 - present", "Jan 2020 - 2021"
MONTH_RANGE_RE = re.compile(
    rf"({MONTH_PATTERN})\s+(\d{{4}})\s*{RANGE_DASH}\s*(?:({MONTH_PATTERN})\s+)?(\d{{4}}|present|current)",
    re.IGNORECASE,
)
# "2018 - 2021", "2019 - present"
YEAR_RANGE_RE = re.compile(rf"(\d{{4}})\s*{RANGE_DASH}\s*(\d{{4}}|present|current)", re.IGNORECASE)
YEARS_PHRASE_RE = re.compile(r"(\d+)\s+years?", re.IGNORECASE)

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

BULLET_PREFIXES: Tuple[str, ...] = ("-", "•", "*", "◦", "▪", "▫")
BULLET_STRIP_RE = re.compile(r"^[-•*◦▪▫]\s*")

# Institution / degree vocabulary used by both education extractors
EDUCATION_LINE_RE = re.compile(
    r"University|College|Institute|Bachelor|Master|PhD|Degree|Diploma"
    r"|B\.?Sc\.?|M\.?Sc\.?|Universitas|Sarjana",
    re.IGNORECASE,
)
EDUCATION_LEVEL_RE = re.compile(r"\bS[123]\b")
