"""Module B: Booking inquiry schemas."""
from datetime import date, datetime
from typing import ClassVar, Optional

from pydantic import AliasChoices, EmailStr, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from staybook.models.inquiry import ContactMethod
from staybook.schemas.base import BaseSchema
from staybook.schemas.fields import EMAIL_MESSAGES, PHONE_MESSAGES, OptionalPositiveInt, Phone

DATES_INCOMPLETE = "Please select your check-in and check-out dates"


class DateRange(BaseSchema):
    """Check-in / check-out pair picked on the calendar. Either end may still be empty."""

    check_in: Optional[date] = Field(default=None, validation_alias=AliasChoices("check_in", "checkIn", "from"))
    check_out: Optional[date] = Field(default=None, validation_alias=AliasChoices("check_out", "checkOut", "to"))

    @model_validator(mode="before")
    @classmethod
    def accept_pair(cls, data):
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise PydanticCustomError("date_range_shape", "Date range needs a check-in and a check-out date")
            return {"check_in": data[0], "check_out": data[1]}
        return data

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def calendar_day(cls, v):
        # calendar widgets hand back midnight datetimes
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def both_ends_selected(self):
        if self.check_in is None or self.check_out is None:
            raise PydanticCustomError("date_range_incomplete", DATES_INCOMPLETE)
        return self


class BookingInquiry(BaseSchema):
    full_name: str = Field(..., min_length=2)
    email: EmailStr
    phone: Phone
    destination: str = Field(..., min_length=2)
    guests: int = Field(..., ge=1, le=20)
    dates: DateRange
    preferred_contact: ContactMethod
    message: str = Field(..., min_length=10)
    budget: OptionalPositiveInt = None  # nightly budget

    error_messages: ClassVar[dict[str, dict[str, str]]] = {
        "full_name": {"string_too_short": "Please enter your full name", "missing": "Please enter your full name"},
        "email": EMAIL_MESSAGES,
        "phone": {**PHONE_MESSAGES, "missing": "Enter a valid phone number"},
        "destination": {
            "string_too_short": "Please enter a destination or property",
            "missing": "Please enter a destination or property",
        },
        "guests": {"greater_than_equal": "At least 1 guest", "less_than_equal": "Max 20 guests"},
        "dates": {"missing": DATES_INCOMPLETE},
        "preferred_contact": {"missing": "Select a contact method", "enum": "Select a contact method"},
        "message": {
            "string_too_short": "Please provide a short message (min 10 chars)",
            "missing": "Please provide a short message (min 10 chars)",
        },
        "budget": {"greater_than": "Enter a positive number"},
    }
