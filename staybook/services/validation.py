"""Module G: Whole-record validation for the three form kinds."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import BaseModel

from staybook.models.submission import SubmissionKind
from staybook.schemas.base import BaseSchema
from staybook.schemas.host import HostListingSubmission
from staybook.schemas.inquiry import BookingInquiry
from staybook.schemas.rating import StayRating
from staybook.schemas.results import ValidationResult
from staybook.services.cross_field import (
    INQUIRY_RULES,
    LISTING_RULES,
    RATING_RULES,
    CrossFieldRule,
    CrossFieldRuleSet,
)
from staybook.services.field_rules import FieldRuleSet


class UnknownSubmissionKindError(ValueError):
    pass


@dataclass(frozen=True)
class FormDefinition:
    kind: SubmissionKind
    schema: type[BaseSchema]
    field_rules: FieldRuleSet
    cross_field_rules: CrossFieldRuleSet

    @classmethod
    def build(cls, kind: SubmissionKind, schema: type[BaseSchema], rules: tuple[CrossFieldRule, ...]) -> "FormDefinition":
        field_rules = FieldRuleSet(schema)
        return cls(kind=kind, schema=schema, field_rules=field_rules, cross_field_rules=CrossFieldRuleSet(rules, field_rules))


FORMS: dict[SubmissionKind, FormDefinition] = {
    SubmissionKind.inquiry: FormDefinition.build(SubmissionKind.inquiry, BookingInquiry, INQUIRY_RULES),
    SubmissionKind.listing: FormDefinition.build(SubmissionKind.listing, HostListingSubmission, LISTING_RULES),
    SubmissionKind.rating: FormDefinition.build(SubmissionKind.rating, StayRating, RATING_RULES),
}


def get_form(kind: SubmissionKind | str) -> FormDefinition:
    try:
        return FORMS[SubmissionKind(kind)]
    except (ValueError, KeyError):
        raise UnknownSubmissionKindError(f"Unknown submission kind: {kind!r}") from None


def as_raw(record: Mapping[str, Any] | BaseModel) -> Mapping[str, Any]:
    if isinstance(record, BaseModel):
        return {name: getattr(record, name) for name in type(record).model_fields}
    return record


def run_validation(form: FormDefinition, record: Mapping[str, Any] | BaseModel) -> tuple[dict[str, Any], ValidationResult]:
    """Field rules, then cross-field rules over whatever normalized cleanly. Collects every violation."""
    normalized, errors = form.field_rules.check_record(as_raw(record))
    cross_errors = form.cross_field_rules.check(normalized)
    return normalized, ValidationResult.from_errors([*errors, *cross_errors])


def validate(kind: SubmissionKind | str, record: Mapping[str, Any] | BaseModel) -> ValidationResult:
    _, result = run_validation(get_form(kind), record)
    return result
