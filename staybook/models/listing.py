"""Module A: Host listing enumerations (closed sets offered by the host form)."""
import enum


class PropertyType(str, enum.Enum):
    apartment = "Apartment"
    house = "House"
    villa = "Villa"
    cabin = "Cabin"
    cottage = "Cottage"
    loft = "Loft"
    studio = "Studio"


class CancellationPolicy(str, enum.Enum):
    flexible = "flexible"
    moderate = "moderate"
    strict = "strict"

    @property
    def label(self) -> str:
        return CANCELLATION_POLICY_LABELS[self]


CANCELLATION_POLICY_LABELS = {
    CancellationPolicy.flexible: "Flexible (full refund up to 24h before)",
    CancellationPolicy.moderate: "Moderate (full refund up to 5 days before)",
    CancellationPolicy.strict: "Strict (partial refund up to 7 days before)",
}


class CheckInWindow(str, enum.Enum):
    midday = "12:00-15:00"
    afternoon = "15:00-18:00"
    evening = "18:00-21:00"


class CheckOutTime(str, enum.Enum):
    ten = "10:00"
    eleven = "11:00"
    noon = "12:00"


class Amenity(str, enum.Enum):
    wifi = "Wi-Fi"
    air_conditioning = "Air conditioning"
    heating = "Heating"
    kitchen = "Kitchen"
    washer = "Washer"
    dryer = "Dryer"
    free_parking = "Free parking"
    pool = "Pool"
    hot_tub = "Hot tub"
    tv = "TV"
    workspace = "Workspace"
    pets_allowed = "Pets allowed"
    outdoor_area = "Outdoor area"
    bbq_grill = "BBQ grill"

    @classmethod
    def _missing_(cls, value):
        # UI labels use a non-breaking hyphen ("Wi‑Fi") and arbitrary casing
        if not isinstance(value, str):
            return None
        key = value.strip().replace("\u2011", "-").casefold()
        for member in cls:
            if member.value.casefold() == key or member.name == key:
                return member
        return None


class PhotoSlot(str, enum.Enum):
    """Named photo slots, declared in slot-priority order (first is the cover image)."""
    room = "room"
    front = "front"
    backyard = "backyard"
    living = "living"
