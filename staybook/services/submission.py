"""Module G: Submission pipeline.

One attempt goes Validating -> Accepted | Rejected. A rejected record never
reaches the metrics calculator or the notification sink.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from pydantic import BaseModel

from staybook.models.submission import SubmissionKind
from staybook.schemas.base import BaseSchema
from staybook.schemas.results import Accepted, Confirmation, DerivedMetrics, Rejected, SubmissionOutcome
from staybook.services.metrics import compute_derived_metrics
from staybook.services.notifications import NotificationSink, get_notification_sink
from staybook.services.validation import get_form, run_validation

logger = logging.getLogger(__name__)


def _inquiry_confirmation(payload, metrics: DerivedMetrics) -> Confirmation:
    return Confirmation(
        title="Thanks! We received your inquiry",
        description=f"{payload.full_name}, we will contact you via {payload.preferred_contact.value} within 24 hours.",
    )


def _listing_confirmation(payload, metrics: DerivedMetrics) -> Confirmation:
    return Confirmation(
        title="Listing submitted for review",
        description=f"{payload.title} • {payload.city}, {payload.country}. We’ll get back to you within 24–48h.",
    )


def _rating_confirmation(payload, metrics: DerivedMetrics) -> Confirmation:
    return Confirmation(
        title="Thanks for your review!",
        description=f"Your average rating is {metrics.average_rating}/5",
    )


CONFIRMATIONS: dict[SubmissionKind, Callable[[BaseSchema, DerivedMetrics], Confirmation]] = {
    SubmissionKind.inquiry: _inquiry_confirmation,
    SubmissionKind.listing: _listing_confirmation,
    SubmissionKind.rating: _rating_confirmation,
}


class SubmissionPipeline:
    def __init__(self, sink: NotificationSink | None = None):
        self.sink = sink if sink is not None else get_notification_sink()

    def submit(self, kind: SubmissionKind | str, record: Mapping[str, Any] | BaseModel) -> SubmissionOutcome:
        form = get_form(kind)
        normalized, result = run_validation(form, record)
        if not result.is_valid:
            # field names only; values may be personal data
            logger.info("Rejected %s submission: %s", form.kind.value, ", ".join(sorted(result.field_errors)))
            return Rejected(kind=form.kind, field_errors=result.field_errors)

        payload = form.schema.model_validate(normalized)
        metrics = compute_derived_metrics(form.kind, payload)
        confirmation = CONFIRMATIONS[form.kind](payload, metrics)
        delivered = self.sink.notify(confirmation.title, confirmation.description)
        if delivered is False:
            logger.warning("Accepted %s submission but the confirmation was not delivered", form.kind.value)
        else:
            logger.info("Accepted %s submission", form.kind.value)
        return Accepted(kind=form.kind, payload=payload, metrics=metrics, confirmation=confirmation)


def submit(
    kind: SubmissionKind | str,
    record: Mapping[str, Any] | BaseModel,
    sink: NotificationSink | None = None,
) -> SubmissionOutcome:
    return SubmissionPipeline(sink).submit(kind, record)
