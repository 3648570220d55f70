"""Module A: Stay rating criteria."""
import enum

RATING_MIN = 1
RATING_MAX = 5


class RatingCriterion(str, enum.Enum):
    room_quality = "room_quality"
    room_readiness = "room_readiness"
    owner_response = "owner_response"
    hygiene = "hygiene"
    location_convenience = "location_convenience"
    amenities = "amenities"
    value_for_money = "value_for_money"
    overall_satisfaction = "overall_satisfaction"

    @property
    def label(self) -> str:
        return CRITERION_LABELS[self]


CRITERION_LABELS = {
    RatingCriterion.room_quality: "Room quality",
    RatingCriterion.room_readiness: "Room readiness",
    RatingCriterion.owner_response: "Owner response",
    RatingCriterion.hygiene: "Hygiene of the house",
    RatingCriterion.location_convenience: "Location convenience",
    RatingCriterion.amenities: "Amenities",
    RatingCriterion.value_for_money: "Value for money",
    RatingCriterion.overall_satisfaction: "Overall satisfaction",
}
