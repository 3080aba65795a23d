"""Base service class for domain services."""

from typing import Any

from uniflow.domain.error import MissingFieldsError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def require_fields(**fields: Any) -> None:
    """Fail with MissingFieldsError unless every field is present and non-empty.

    Field order is kept so the error lists required fields the way the
    caller declared them.

    Raises:
        MissingFieldsError: If any value is None or an empty string
    """
    missing = [
        name
        for name, value in fields.items()
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise MissingFieldsError(required=list(fields), missing=missing)
