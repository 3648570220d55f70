"""Reusable annotated field types and their user-facing messages."""
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import AfterValidator, BeforeValidator, Field
from pydantic_core import PydanticCustomError

PHONE_PATTERN = r"^[0-9+()\-\s]*$"

Phone = Annotated[str, Field(min_length=7, max_length=20, pattern=PHONE_PATTERN)]
PHONE_MESSAGES = {
    "string_too_short": "Enter a valid phone number",
    "string_too_long": "Phone number cannot exceed 20 characters",
    "string_pattern_mismatch": "Only numbers and + ( ) - are allowed",
}

EMAIL_MESSAGES = {
    "value_error": "Enter a valid email address",
    "missing": "Enter a valid email address",
}

# File identifier (name) of an uploaded photo
FileId = Annotated[str, Field(min_length=1, max_length=255)]

Money = Annotated[Decimal, Field(ge=0)]


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


def _none_to_false(v):
    return False if v is None else v


def _require_true(v: bool) -> bool:
    if v is not True:
        raise PydanticCustomError("terms_not_accepted", "You must agree before submitting")
    return v


OptionalText = Annotated[Optional[str], BeforeValidator(_blank_to_none)]
OptionalPositiveInt = Annotated[Optional[Annotated[int, Field(gt=0)]], BeforeValidator(_blank_to_none)]
Flag = Annotated[bool, BeforeValidator(_none_to_false)]

AcceptedTerms = Annotated[bool, AfterValidator(_require_true)]
