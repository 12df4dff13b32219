"""Reusable field validators for request schemas and path parameters."""

from typing import Annotated

from pydantic import AfterValidator, StringConstraints

from app.core.constants import EMAIL_PATTERN
from app.core.exceptions import ValidationError


def normalize_email(value: str) -> str:
    """Trim, lower-case and check ``local-part@domain.tld``.

    Raises:
        ValueError: if the value does not look like an email address.
    """
    email = value.strip().lower()
    if not EMAIL_PATTERN.match(email):
        raise ValueError("El formato del correo electrónico no es válido")
    return email


def parse_email_param(value: str) -> str:
    """Normalize an email taken from a URL path.

    Raises:
        ValidationError: if the value does not look like an email address.
    """
    try:
        return normalize_email(value)
    except ValueError as e:
        raise ValidationError(str(e), field="email") from e


EmailAddress = Annotated[str, AfterValidator(normalize_email)]

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
