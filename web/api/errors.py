"""API errors and validation helpers."""

import re
from datetime import date


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


JOURNAL_KEY_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")
MAX_SUBJECT_AREA_LENGTH = 255


def validate_journal_key(journal: str) -> None:
    """Validate a journal key such as 'PLoSONE'."""
    if not JOURNAL_KEY_RE.match(journal or ""):
        raise ValidationError(f"Invalid journal key: {journal!r}")


def validate_subject_area(subject_area: str) -> None:
    """Validate a subject area name."""
    if not subject_area or not subject_area.strip():
        raise ValidationError("Subject area is required")
    if len(subject_area) > MAX_SUBJECT_AREA_LENGTH:
        raise ValidationError(f"Subject area longer than {MAX_SUBJECT_AREA_LENGTH} characters")


def validate_id(name: str, value: int) -> None:
    """Validate a database id is a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"Invalid {name}: {value!r}. Must be a positive integer")


def validate_date(name: str, value: str | None) -> None:
    """Validate an optional ISO date. Empty strings are allowed (no bound)."""
    if not value:
        return
    try:
        date.fromisoformat(value)
    except ValueError as e:
        raise ValidationError(f"Invalid {name}: {value!r}. Expected YYYY-MM-DD") from e
