"""
Letter grade extraction from a grading response.

The grading prompt asks the model to start with `GRADE: <token>`; nothing
enforces it, so a missing or reformatted line yields `N/A`.
"""
import re

from app.models.student import DEFAULT_GRADE

GRADE_PATTERN = re.compile(r"GRADE:\s*([A-F][+-]?)", re.IGNORECASE)


def extract_grade(response_text: str) -> str:
    """
    First `GRADE:` token in the text, or `N/A`.

    The match is case-insensitive but the token is returned upper-cased
    (`grade: b+` -> `B+`), so stored grades stay in the letter-grade set
    instead of keeping the model's casing.
    """
    if not response_text:
        return DEFAULT_GRADE
    match = GRADE_PATTERN.search(response_text)
    if match is None:
        return DEFAULT_GRADE
    return match.group(1).upper()
