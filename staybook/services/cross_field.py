"""Module D: Rules that inspect two or more fields together."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

from staybook.schemas.results import CrossFieldError
from staybook.services.field_rules import FieldRuleSet


@dataclass(frozen=True)
class CrossFieldRule:
    """Predicate over normalized values, reported on ``field`` when it returns False.

    The rule is skipped unless every field in ``requires`` passed its own
    field rule; an absent or malformed input is that field's error, not this one's.
    """
    name: str
    field: str
    requires: tuple[str, ...]
    predicate: Callable[[Mapping[str, Any]], bool]
    message: str

    def applies(self, normalized: Mapping[str, Any]) -> bool:
        return all(name in normalized for name in self.requires)

    def evaluate(self, normalized: Mapping[str, Any]) -> CrossFieldError | None:
        if not self.applies(normalized) or self.predicate(normalized):
            return None
        return CrossFieldError(
            field=self.field,
            code=self.name,
            message=self.message,
            rule=self.name,
            inputs=self.requires,
        )


class CrossFieldRuleSet:
    def __init__(self, rules: Iterable[CrossFieldRule], field_rules: FieldRuleSet):
        self.rules = tuple(rules)
        # a rule naming a field the record does not have is a bug, not bad input
        for rule in self.rules:
            field_rules.require((rule.field, *rule.requires))

    def check(self, normalized: Mapping[str, Any]) -> list[CrossFieldError]:
        errors = []
        for rule in self.rules:
            err = rule.evaluate(normalized)
            if err is not None:
                errors.append(err)
        return errors


def _check_out_after_check_in(values: Mapping[str, Any]) -> bool:
    dates = values["dates"]
    return dates.check_in < dates.check_out


def _max_nights_covers_min(values: Mapping[str, Any]) -> bool:
    return values["max_nights"] >= values["min_nights"]


INQUIRY_RULES = (
    CrossFieldRule(
        name="date_order",
        field="dates",
        requires=("dates",),
        predicate=_check_out_after_check_in,
        message="Check-out must be after check-in",
    ),
)

LISTING_RULES = (
    CrossFieldRule(
        name="stay_length_bounds",
        field="max_nights",
        requires=("min_nights", "max_nights"),
        predicate=_max_nights_covers_min,
        message="Max nights must be greater than or equal to min nights",
    ),
)

RATING_RULES: tuple[CrossFieldRule, ...] = ()
