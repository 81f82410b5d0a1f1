"""
Field rules for user records.

Each rule is a constrained pydantic type, so request models that declare
name, age, dateOfBirth, password, gender and about in that order are
validated in that order. Only the first failure is reported, as a
ValidationError naming the field.
"""

# Standard library imports
from datetime import date, datetime, timezone as dt_timezone
from typing import Annotated, Any, Mapping, Optional, Sequence, Union

# External package imports
from pydantic import AfterValidator, Field

# Local application imports
from ..exceptions import ValidationError
from ...utils.datetime_utils import ensure_utc


NAME_MIN_LENGTH = 2
AGE_MIN = 0
AGE_MAX = 120
PASSWORD_MIN_LENGTH = 10
ABOUT_MAX_LENGTH = 5000

PASSWORD_RULE_MESSAGE = "Password must be alphanumeric and at least 10 characters long"
INVALID_DATE_MESSAGE = "Invalid date format"


def _check_password(value: str) -> str:
    if not any(char.isascii() and char.isalpha() for char in value) or not any(
        char.isascii() and char.isdigit() for char in value
    ):
        raise ValueError(PASSWORD_RULE_MESSAGE)
    return value


def _to_utc_datetime(value: Union[datetime, date]) -> datetime:
    """Dates mean UTC midnight; naive datetimes mean UTC."""
    if not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day, tzinfo=dt_timezone.utc)
    try:
        return ensure_utc(value)
    except OverflowError:
        # e.g. 0001-01-01T00:00:00+01:00 has no UTC equivalent
        raise ValueError(INVALID_DATE_MESSAGE)


Name = Annotated[str, Field(min_length=NAME_MIN_LENGTH)]
Age = Annotated[int, Field(ge=AGE_MIN, le=AGE_MAX)]
DateOfBirth = Annotated[
    Union[datetime, date], Field(union_mode="left_to_right"), AfterValidator(_to_utc_datetime)
]
Password = Annotated[str, Field(min_length=PASSWORD_MIN_LENGTH), AfterValidator(_check_password)]
About = Annotated[str, Field(max_length=ABOUT_MAX_LENGTH)]


def _error_field(location: Sequence[Any]) -> Optional[str]:
    # FastAPI prefixes body errors with "body"; a bare "body" means the body itself
    parts = [part for part in location if part != "body"]
    if parts and isinstance(parts[0], str):
        return parts[0]
    return None


def _error_detail(error: Mapping[str, Any]) -> str:
    context = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in context:
        return str(context["error"])
    return error.get("msg", "Invalid request")


def first_validation_error(errors: Sequence[Mapping[str, Any]]) -> ValidationError:
    """
    Turn pydantic error details into a single ValidationError.

    Pydantic lists errors in field declaration order, so the first entry is
    the first failing rule.

    Args:
        errors: ``exc.errors()`` from a pydantic or FastAPI validation error

    Returns:
        ValidationError for the first error (field is None when the body
        itself is unusable, e.g. malformed JSON)
    """
    if not errors:
        return ValidationError(None, "Invalid request")
    error = errors[0]
    return ValidationError(_error_field(error.get("loc", ())), _error_detail(error))
