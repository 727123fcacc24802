"""
Custom validators
"""
from app.db.models import SectionType
from app.utils.exceptions import BadRequestError

MAX_NAME_LENGTH = 100


def validate_length(value: str, field: str, max_length: int = MAX_NAME_LENGTH) -> str:
    """
    Validate a required short text field (case title, section name).
    Expected: 1..max_length characters
    """
    if value is None or not 1 <= len(value) <= max_length:
        raise BadRequestError(f"{field} must be between 1 and {max_length} characters")
    return value


def validate_section_type(value) -> SectionType:
    """Accepts a SectionType or its string value"""
    try:
        return SectionType(value)
    except ValueError:
        allowed = ", ".join(t.value for t in SectionType)
        raise BadRequestError(f"Invalid section type '{value}'. Expected one of: {allowed}")
