"""
Input format checks shared by the services.
"""
from pydantic import EmailStr, TypeAdapter, ValidationError

_email_adapter = TypeAdapter(EmailStr)


def normalize_email(value: str | None) -> str | None:
    """
    Canonical form of a bare email address, or None if it is not one.

    EmailStr also accepts ``Name <addr>`` and surrounding whitespace; both
    are refused here so the stored address is exactly what was checked.
    The domain comes back lowercased.
    """
    if not value or "<" in value or value != value.strip():
        return None
    try:
        return _email_adapter.validate_python(value)
    except ValidationError:
        return None


def is_valid_email(value: str | None) -> bool:
    """Return True if value is a syntactically valid email address."""
    return normalize_email(value) is not None
