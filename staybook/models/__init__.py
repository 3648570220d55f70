"""
Closed value sets used by the three interactive forms.
Every enum is str-valued so raw form values validate against it directly.
"""
from staybook.models.inquiry import ContactMethod
from staybook.models.listing import (
    Amenity,
    CancellationPolicy,
    CheckInWindow,
    CheckOutTime,
    PhotoSlot,
    PropertyType,
)
from staybook.models.rating import RatingCriterion
from staybook.models.submission import SubmissionKind

__all__ = [
    "ContactMethod",
    "Amenity",
    "CancellationPolicy",
    "CheckInWindow",
    "CheckOutTime",
    "PhotoSlot",
    "PropertyType",
    "RatingCriterion",
    "SubmissionKind",
]
