"""Module B: Host listing submission schema."""
from decimal import Decimal
from typing import ClassVar

from pydantic import EmailStr, Field

from staybook.models.listing import (
    Amenity,
    CancellationPolicy,
    CheckInWindow,
    CheckOutTime,
    PropertyType,
)
from staybook.schemas.base import BaseSchema
from staybook.schemas.fields import (
    PHONE_MESSAGES,
    AcceptedTerms,
    FileId,
    Flag,
    Money,
    OptionalText,
    Phone,
)

MAX_PHOTOS = 4


class HostListingSubmission(BaseSchema):
    """
    Everything a host enters to list a place.

    Built up field by field while the host edits the form and validated as a
    whole only on submit. ``photos`` is the slot-priority projection of the
    four photo slots, so the first entry is the cover image.
    """

    # Host info
    full_name: str = Field(..., min_length=2)
    email: EmailStr
    phone: Phone

    # Property basics
    title: str = Field(..., min_length=5)
    description: str = Field(..., min_length=20)
    property_type: PropertyType

    # Address
    country: str = Field(..., min_length=2)
    street: str = Field(..., min_length=3)
    city: str = Field(..., min_length=2)
    state: str = Field(..., min_length=2)
    postal_code: str = Field(..., min_length=3)

    # Capacity
    bedrooms: int = Field(..., ge=0, le=20)
    bathrooms: int = Field(..., ge=0, le=20)
    max_guests: int = Field(..., ge=1, le=32)

    amenities: frozenset[Amenity] = Field(..., min_length=1)

    # Safety
    safety_smoke_detector: Flag = False
    safety_fire_extinguisher: Flag = False
    safety_first_aid_kit: Flag = False
    registration_id: OptionalText = None

    # Pricing & availability
    price_per_night: Decimal = Field(..., gt=0)
    cleaning_fee: Money = Decimal("0")
    min_nights: int = Field(..., ge=1, le=30)
    max_nights: int = Field(..., ge=1, le=365)
    check_in_window: CheckInWindow
    check_out_time: CheckOutTime
    cancellation_policy: CancellationPolicy

    # House rules
    rules: str = Field(..., min_length=10)
    allow_instant_book: Flag = False

    photos: tuple[FileId, ...] = Field(..., min_length=1, max_length=MAX_PHOTOS)

    agree_to_terms: AcceptedTerms

    error_messages: ClassVar[dict[str, dict[str, str]]] = {
        "full_name": {"string_too_short": "Enter your full name", "missing": "Enter your full name"},
        "email": {"value_error": "Enter a valid email", "missing": "Enter a valid email"},
        "phone": {**PHONE_MESSAGES, "missing": "Enter a valid phone number"},
        "title": {
            "string_too_short": "Give your listing a descriptive title",
            "missing": "Give your listing a descriptive title",
        },
        "description": {
            "string_too_short": "Describe your place (min 20 characters)",
            "missing": "Describe your place (min 20 characters)",
        },
        "property_type": {"missing": "Select a property type", "enum": "Select a property type"},
        "country": {"string_too_short": "Country is required", "missing": "Country is required"},
        "street": {"string_too_short": "Street address is required", "missing": "Street address is required"},
        "city": {"string_too_short": "City is required", "missing": "City is required"},
        "state": {"string_too_short": "State/Region is required", "missing": "State/Region is required"},
        "postal_code": {"string_too_short": "Postal code is required", "missing": "Postal code is required"},
        "amenities": {"too_short": "Select at least 1 amenity", "missing": "Select at least 1 amenity"},
        "price_per_night": {"greater_than": "Enter a nightly price", "missing": "Enter a nightly price"},
        "cleaning_fee": {"greater_than_equal": "Cleaning fee cannot be negative"},
        "cancellation_policy": {"missing": "Select a policy", "enum": "Select a policy"},
        "rules": {"string_too_short": "Add a few house rules", "missing": "Add a few house rules"},
        "photos": {"too_short": "Add at least 1 photo", "too_long": "Maximum 4 photos", "missing": "Add at least 1 photo"},
        "agree_to_terms": {"missing": "You must agree before submitting"},
    }
