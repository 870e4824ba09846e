"""
Reusable field types for record schemas.

Drafts arrive as raw form input (mostly strings), so these types accept
strings and normalise them. Optional fields treat an empty string as
"not provided".
"""

import re
from datetime import date, datetime
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, Field, StringConstraints

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[A-Za-z]{2,}$")
URL_RE = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)
LETTERS_RE = re.compile(r"^[A-Za-z ]+$")
PHONE_RE = re.compile(r"^[0-9]{10}$")
PAN_RE = re.compile(r"^[A-Z]{5}[0-9]{4}[A-Z]$")
AADHAR_RE = re.compile(r"^\d{4}\s\d{4}\s\d{4}$")


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _to_date(value: Any) -> Any:
    """Accept "YYYY-MM-DD" as well as full ISO timestamps from date pickers."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            return value
    return value


def _check(pattern: re.Pattern, message: str):
    def validator(value: str) -> str:
        if not pattern.match(value):
            raise ValueError(message)
        return value

    return validator


def _not_future(value: date) -> date:
    if value > date.today():
        raise ValueError("Date must not be in the future")
    return value


RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
OptionalStr = Annotated[Optional[str], BeforeValidator(_blank_to_none)]

Email = Annotated[RequiredStr, AfterValidator(_check(EMAIL_RE, "Invalid email"))]
OptionalEmail = Annotated[Optional[Email], BeforeValidator(_blank_to_none)]

Url = Annotated[RequiredStr, AfterValidator(_check(URL_RE, "Enter a valid URL"))]

Letters = Annotated[RequiredStr, AfterValidator(_check(LETTERS_RE, "Must only contain letters and spaces"))]

Phone = Annotated[RequiredStr, AfterValidator(_check(PHONE_RE, "Must be exactly 10 digits"))]
OptionalPhone = Annotated[Optional[Phone], BeforeValidator(_blank_to_none)]

PanCard = Annotated[RequiredStr, AfterValidator(_check(PAN_RE, "Pancard format is invalid (e.g., ABCDE1234F)"))]
AadharCard = Annotated[
    RequiredStr,
    AfterValidator(_check(AADHAR_RE, "Aadhar card must be a 12-digit number with spaces every 4 digits")),
]

Pincode = Annotated[int, Field(ge=100000, le=999999)]

Amount = Annotated[float, Field(ge=0)]
PositiveAmount = Annotated[float, Field(gt=0)]

RecordDate = Annotated[date, BeforeValidator(_to_date)]
OptionalDate = Annotated[Optional[RecordDate], BeforeValidator(_blank_to_none)]
PastDate = Annotated[RecordDate, AfterValidator(_not_future)]


class RecordSchema(BaseModel):
    """
    Base for every store schema.
    Fields the schema does not declare are kept on the record unchanged.
    """

    class Config:
        extra = "allow"
        populate_by_name = True
