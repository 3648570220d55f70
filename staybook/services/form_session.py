"""Module H: One in-progress form record, edited field by field."""
from __future__ import annotations

import copy
import logging
from decimal import Decimal
from typing import Any, Mapping

from staybook.models.listing import (
    Amenity,
    CancellationPolicy,
    CheckInWindow,
    CheckOutTime,
    PhotoSlot,
)
from staybook.models.inquiry import ContactMethod
from staybook.models.rating import RatingCriterion
from staybook.models.submission import SubmissionKind
from staybook.schemas.results import Accepted, DerivedMetrics, SubmissionOutcome, ValidationResult
from staybook.services.assembly import PhotoSlots, toggle_amenity
from staybook.services.metrics import compute_derived_metrics
from staybook.services.submission import SubmissionPipeline
from staybook.services.validation import get_form, run_validation

logger = logging.getLogger(__name__)

# Starting values of each form, as first shown to the user
DEFAULTS: dict[SubmissionKind, dict[str, Any]] = {
    SubmissionKind.inquiry: {
        "full_name": "",
        "email": "",
        "phone": "",
        "destination": "",
        "guests": 2,
        "dates": {"check_in": None, "check_out": None},
        "preferred_contact": ContactMethod.email,
        "message": "",
        "budget": None,
    },
    SubmissionKind.listing: {
        "full_name": "",
        "email": "",
        "phone": "",
        "title": "",
        "description": "",
        "property_type": None,
        "country": "",
        "street": "",
        "city": "",
        "state": "",
        "postal_code": "",
        "bedrooms": 1,
        "bathrooms": 1,
        "max_guests": 2,
        "amenities": frozenset(),
        "safety_smoke_detector": True,
        "safety_fire_extinguisher": True,
        "safety_first_aid_kit": False,
        "registration_id": "",
        "price_per_night": Decimal("120"),
        "cleaning_fee": Decimal("30"),
        "min_nights": 1,
        "max_nights": 30,
        "check_in_window": CheckInWindow.afternoon,
        "check_out_time": CheckOutTime.eleven,
        "cancellation_policy": CancellationPolicy.moderate,
        "rules": "No parties. No smoking inside. Respect quiet hours after 10pm.",
        "allow_instant_book": False,
        "agree_to_terms": False,
    },
    SubmissionKind.rating: {c.value: 3 for c in RatingCriterion},
}


class SessionClosedError(RuntimeError):
    """Edit or submit on a session whose record was already accepted."""


class FormSession:
    """
    Owns the record one user is building in one form.

    Field edits are stored raw; nothing is validated until ``validate`` or
    ``submit`` is called, except through ``field_errors`` and ``preview``
    which are meant to run on every change. Photos are never set directly:
    they are the slot-priority projection of the four photo slots.
    """

    def __init__(self, kind: SubmissionKind | str, pipeline: SubmissionPipeline | None = None, initial: Mapping[str, Any] | None = None):
        self.form = get_form(kind)
        self.kind = self.form.kind
        self.pipeline = pipeline or SubmissionPipeline()
        self._initial = dict(initial or {})
        self.reset()

    def reset(self) -> None:
        """Discard the in-progress record (abandon) and start over from the defaults."""
        self._values: dict[str, Any] = copy.deepcopy(DEFAULTS[self.kind])
        self._slots = PhotoSlots()
        self.outcome: SubmissionOutcome | None = None
        for name, raw in self._initial.items():
            self.set_field(name, raw)

    @property
    def closed(self) -> bool:
        return isinstance(self.outcome, Accepted)

    def _ensure_open(self) -> None:
        if self.closed:
            raise SessionClosedError(f"{self.kind.value} form was already submitted")

    def _require_listing(self, what: str) -> None:
        if self.kind is not SubmissionKind.listing:
            raise ValueError(f"{self.kind.value} form has no {what}")

    @property
    def values(self) -> dict[str, Any]:
        """The candidate record as it would be submitted now."""
        values = dict(self._values)
        if self.kind is SubmissionKind.listing:
            values["photos"] = list(self._slots.photos())
        return values

    @property
    def photo_slots(self) -> PhotoSlots:
        return self._slots

    def set_field(self, name: str, raw: Any) -> None:
        self._ensure_open()
        field = self.form.field_rules.field_name(name)
        if field == "photos":
            raise ValueError("photos are assembled from slots; use assign_photo / clear_photo")
        self._values[field] = raw

    def update(self, changes: Mapping[str, Any]) -> None:
        for name, raw in changes.items():
            self.set_field(name, raw)

    def select_dates(self, check_in: Any, check_out: Any) -> None:
        """Calendar range pick; either end may be None while the user is still choosing."""
        self.set_field("dates", {"check_in": check_in, "check_out": check_out})

    def toggle_amenity(self, item: Amenity | str, checked: bool) -> frozenset[Amenity]:
        self._ensure_open()
        self._require_listing("amenity set")
        self._values["amenities"] = toggle_amenity(self._current_amenities(), item, checked)
        return self._values["amenities"]

    def _current_amenities(self) -> frozenset[Amenity]:
        raw = self._values.get("amenities")
        current, errors = self.form.field_rules.check_field("amenities", raw)
        if errors:
            # empty or unreadable; the toggle starts a fresh set
            if raw:
                logger.debug("Replacing unreadable amenity value %r on toggle", raw)
            return frozenset()
        return current

    def assign_photo(self, slot: PhotoSlot | str, file_id: str | None) -> tuple[str, ...]:
        self._ensure_open()
        self._require_listing("photo slots")
        self._slots = self._slots.assign(slot, file_id)
        return self._slots.photos()

    def clear_photo(self, slot: PhotoSlot | str) -> tuple[str, ...]:
        return self.assign_photo(slot, None)

    def field_errors(self, name: str) -> list[str]:
        """Messages for one field on its own (live, per-change feedback)."""
        field = self.form.field_rules.field_name(name)
        _, errors = self.form.field_rules.check_field(field, self.values.get(field))
        return [e.message for e in errors]

    def validate(self) -> ValidationResult:
        _, result = run_validation(self.form, self.values)
        return result

    def preview(self) -> DerivedMetrics:
        return compute_derived_metrics(self.kind, self.values)

    def submit(self) -> SubmissionOutcome:
        self._ensure_open()
        self.outcome = self.pipeline.submit(self.kind, self.values)
        if self.closed:
            logger.debug("%s form session closed after acceptance", self.kind.value)
        return self.outcome
