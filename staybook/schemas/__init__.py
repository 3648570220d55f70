from staybook.schemas.base import BaseSchema, ResultSchema
from staybook.schemas.inquiry import BookingInquiry, DateRange
from staybook.schemas.host import HostListingSubmission
from staybook.schemas.rating import StayRating
from staybook.schemas.catalog import Listing
from staybook.schemas.results import (
    Accepted,
    Confirmation,
    CrossFieldError,
    DerivedMetrics,
    FieldError,
    Rejected,
    SubmissionOutcome,
    ValidationResult,
)
