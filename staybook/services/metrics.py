"""Module F: Derived values shown while a form is being filled in.

All functions are pure and total: missing or malformed inputs are treated
as absent (0) and never raise, so they can run on every field change.
"""
from __future__ import annotations

import math
from datetime import date, datetime, time
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_HALF_UP, Context, Decimal, InvalidOperation, localcontext
from typing import Any, Iterable, Mapping

from pydantic import BaseModel

from staybook.models.rating import RatingCriterion
from staybook.models.submission import SubmissionKind
from staybook.schemas.results import DerivedMetrics
from staybook.services.validation import as_raw, get_form

CENT = Decimal("0.01")
ZERO = Decimal("0.00")
SECONDS_PER_DAY = 24 * 60 * 60

# sums and products of finite amounts are exact and never overflow here
EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def round2(value: Decimal) -> Decimal:
    """Half-up to cents, for amounts of any size."""
    with localcontext() as ctx:
        # room for every integer digit plus two decimals
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _to_decimal(value: Any) -> Decimal:
    if value is None or isinstance(value, bool):
        return Decimal(0)
    try:
        d = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal(0)
    return d if d.is_finite() else Decimal(0)


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time())


def stay_nights(check_in: date | datetime | None, check_out: date | datetime | None) -> int:
    """Whole nights between check-in and check-out; 0 for missing or inverted ranges."""
    if not isinstance(check_in, date) or not isinstance(check_out, date):
        return 0
    start, end = _as_datetime(check_in), _as_datetime(check_out)
    if (start.tzinfo is None) != (end.tzinfo is None):
        start, end = start.replace(tzinfo=None), end.replace(tzinfo=None)
    days = (end - start).total_seconds() / SECONDS_PER_DAY
    # half-days round up, as the calendar does
    return max(0, math.floor(days + 0.5))


def estimated_payout(price_per_night: Any, min_nights: Any, cleaning_fee: Any = None) -> Decimal:
    """Host payout for the shortest allowed stay: price × min nights − cleaning fee, floored at 0.

    A missing or zero minimum stay is previewed as one night.
    """
    nights = max(1, int(_to_decimal(min_nights)))
    with localcontext(EXACT):
        total = _to_decimal(price_per_night) * nights - _to_decimal(cleaning_fee)
        return max(ZERO, round2(total))


def average_rating(scores: Mapping[str, Any] | Iterable[Any]) -> Decimal:
    """Mean over the eight criteria, two decimals. Unscored criteria count as 0."""
    if isinstance(scores, Mapping):
        values = [scores.get(c.value) for c in RatingCriterion]
    else:
        values = list(scores)
    with localcontext(Context(Emax=MAX_EMAX, Emin=MIN_EMIN)):
        total = sum((_to_decimal(v) for v in values), Decimal(0))
        return round2(total / len(RatingCriterion))


def compute_derived_metrics(kind: SubmissionKind | str, record: Mapping[str, Any] | BaseModel) -> DerivedMetrics:
    """Metrics that apply to the record kind, from a raw (possibly invalid) or validated record."""
    form = get_form(kind)
    rules = form.field_rules
    canonical = rules.canonicalize(as_raw(record))

    if form.kind is SubmissionKind.inquiry:
        dates = rules.normalized_or_none(canonical, "dates")
        if dates is None:
            return DerivedMetrics(nights=0)
        return DerivedMetrics(nights=stay_nights(dates.check_in, dates.check_out))

    if form.kind is SubmissionKind.listing:
        return DerivedMetrics(
            estimated_payout=estimated_payout(
                rules.normalized_or_none(canonical, "price_per_night"),
                rules.normalized_or_none(canonical, "min_nights"),
                rules.normalized_or_none(canonical, "cleaning_fee"),
            )
        )

    scores = {c.value: rules.normalized_or_none(canonical, c.value) for c in RatingCriterion}
    return DerivedMetrics(average_rating=average_rating(scores))
