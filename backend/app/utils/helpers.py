"""
Utility helper functions
"""
import uuid


def generate_uuid() -> str:
    """Generate UUID v4"""
    return str(uuid.uuid4())


def truncate_text(text: str, length: int = 100) -> str:
    """Truncate text to specified length"""
    if len(text) <= length:
        return text
    return text[:length] + "..."
