"""
Exceptions raised while turning an uploaded file into text.

Heuristic misses are not errors: every field extractor has a default.
"""


class ResumeParseError(Exception):
    """Base exception for a file that cannot be parsed at all."""
    pass


class UnsupportedFormatError(ResumeParseError):
    """Raised when the file is neither PDF nor DOCX."""
    pass


class DocumentExtractionError(ResumeParseError):
    """Raised when the container library fails on corrupt or empty input."""
    pass
