"""
Input checks run by the services before any store access.

Request bodies are already validated by the Pydantic schemas; these checks
cover direct service calls (scripts, tests) with the same error kind.
"""

from bookshop.exceptions import ValidationError


def require_fields(**fields: object) -> None:
    """
    Raise ValidationError naming every missing or blank field.

    Example:
        >>> require_fields(isbn="X1", rating=None)
        Traceback (most recent call last):
        ...
        bookshop.exceptions.ValidationError: Missing required field(s): rating
    """
    missing = [
        name
        for name, value in fields.items()
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise ValidationError(f"Missing required field(s): {', '.join(missing)}")
