# brandforge/validation.py
from .errors import ValidationError


def validate_idea(raw) -> str:
    """
    Returns the trimmed idea text.
    Raises ValidationError for non-strings and empty / whitespace-only text.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError()
    return raw.strip()
