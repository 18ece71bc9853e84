import re
from typing import List, Optional, Sequence

from app.core.strategies import first_match
from app.core.vocabulary import EMAIL_RE


# Separators are spaces, tabs or hyphens only, so a match never spans lines
# e.g. "+62 812 9988 7766", "+1 (555) 123 4567"
INTERNATIONAL_PHONE_RE = re.compile(r"\+?\d{1,3}[ \t-]?\(?\d{1,4}\)?(?:[ \t-]?\d{3,4}){2,4}")
# "Phone: (555) 123-4567"
LABELLED_PHONE_RE = re.compile(r"phone[: \t]*([+()0-9 \t-]{7,})", re.IGNORECASE)
# Local formats with a trunk prefix: "0812-9988-7766", "021 555 1234"
LOCAL_PHONE_RE = re.compile(r"\b0\d{2,3}[ \t-]?\d{3,4}[ \t-]?\d{3,4}\b")

LOCATION_WORDS = ("City", "State", "Country")
REGION_CODE_RE = re.compile(r"\b[A-Z]{2}\b")


def extract_email(text: str) -> Optional[str]:
    m = EMAIL_RE.search(text)
    return m.group(0) if m else None


def _international_phone(text: str) -> Optional[str]:
    m = INTERNATIONAL_PHONE_RE.search(text)
    return m.group(0).strip() if m else None


def _labelled_phone(text: str) -> Optional[str]:
    m = LABELLED_PHONE_RE.search(text)
    return m.group(1).strip() if m else None


def _local_phone(text: str) -> Optional[str]:
    m = LOCAL_PHONE_RE.search(text)
    return m.group(0).strip() if m else None


PHONE_STRATEGIES = (_international_phone, _labelled_phone, _local_phone)


def extract_phone(text: str) -> Optional[str]:
    """First phone number found by the international, labelled, then local patterns."""
    return first_match(PHONE_STRATEGIES, text)


def extract_location(lines: Sequence[str]) -> Optional[str]:
    """
    First line that looks like "City, Region".

    A line qualifies when it has a comma and either names City/State/Country
    or carries a two-letter uppercase region code ("Austin, TX").
    """
    for line in lines:
        if "," not in line:
            continue
        if any(word in line for word in LOCATION_WORDS) or REGION_CODE_RE.search(line):
            return line
    return None


def find_contact_index(lines: List[str], email: Optional[str], phone: Optional[str]) -> int:
    """
    Index of the first line carrying the email or phone (or their labels), -1 if none.
    """
    def _index_of(value: Optional[str], label: str) -> int:
        if not value:
            return -1
        for idx, line in enumerate(lines):
            if value in line or label in line.lower():
                return idx
        return -1

    email_idx = _index_of(email, "email")
    phone_idx = _index_of(phone, "phone")
    if email_idx >= 0 and phone_idx >= 0:
        return min(email_idx, phone_idx)
    return email_idx if email_idx >= 0 else phone_idx
