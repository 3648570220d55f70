"""Module B: Post-stay rating schema."""
from typing import Annotated, ClassVar

from pydantic import Field

from staybook.models.rating import RATING_MAX, RATING_MIN, RatingCriterion
from staybook.schemas.base import BaseSchema

Score = Annotated[int, Field(ge=RATING_MIN, le=RATING_MAX)]

_SCORE_MESSAGES = {
    "greater_than_equal": f"Rate from {RATING_MIN} to {RATING_MAX}",
    "less_than_equal": f"Rate from {RATING_MIN} to {RATING_MAX}",
    "missing": "Pick a score",
}


class StayRating(BaseSchema):
    # one field per RatingCriterion, same names
    room_quality: Score
    room_readiness: Score
    owner_response: Score
    hygiene: Score
    location_convenience: Score
    amenities: Score
    value_for_money: Score
    overall_satisfaction: Score

    error_messages: ClassVar[dict[str, dict[str, str]]] = {c.value: _SCORE_MESSAGES for c in RatingCriterion}
