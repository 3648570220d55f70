"""Module G: Validation and submission result schemas."""
from decimal import Decimal
from typing import Iterable, Literal, Optional, Union

from pydantic import Field, computed_field

from staybook.models.submission import SubmissionKind
from staybook.schemas.base import ResultSchema
from staybook.schemas.host import HostListingSubmission
from staybook.schemas.inquiry import BookingInquiry
from staybook.schemas.rating import StayRating


class FieldError(ResultSchema):
    """One violated constraint on one field."""
    field: str
    code: str  # pydantic error type, e.g. string_too_short
    message: str


class CrossFieldError(FieldError):
    """A rule over several fields, reported on one designated field."""
    rule: str
    inputs: tuple[str, ...]


class ValidationResult(ResultSchema):
    errors: tuple[FieldError, ...] = ()
    field_errors: dict[str, list[str]] = Field(default_factory=dict)

    @computed_field  # type: ignore[misc]
    @property
    def is_valid(self) -> bool:
        return not self.field_errors

    @classmethod
    def from_errors(cls, errors: Iterable[FieldError]) -> "ValidationResult":
        errors = tuple(errors)
        field_errors: dict[str, list[str]] = {}
        for err in errors:
            messages = field_errors.setdefault(err.field, [])
            if err.message not in messages:
                messages.append(err.message)
        return cls(errors=errors, field_errors=field_errors)

    def messages_for(self, field: str) -> list[str]:
        return list(self.field_errors.get(field, []))


class DerivedMetrics(ResultSchema):
    """Whichever of the derived values apply to the record kind; the rest stay None."""
    nights: Optional[int] = None
    estimated_payout: Optional[Decimal] = None
    average_rating: Optional[Decimal] = None


class Confirmation(ResultSchema):
    title: str
    description: str


Payload = Union[BookingInquiry, HostListingSubmission, StayRating]


class Accepted(ResultSchema):
    status: Literal["accepted"] = "accepted"
    kind: SubmissionKind
    payload: Payload
    metrics: DerivedMetrics
    confirmation: Confirmation


class Rejected(ResultSchema):
    status: Literal["rejected"] = "rejected"
    kind: SubmissionKind
    field_errors: dict[str, list[str]]


SubmissionOutcome = Union[Accepted, Rejected]
