"""
Run one sample submission of each kind through the pipeline.
Run: python scripts/submit_sample.py
Uses NOTIFICATION_BACKEND from .env (default: log).
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from staybook.config import configure_logging, get_settings
from staybook.models.submission import SubmissionKind
from staybook.schemas.results import Accepted
from staybook.services.submission import SubmissionPipeline

INQUIRY = {
    "fullName": "Jane Doe",
    "email": "jane@x.com",
    "phone": "+12025550123",
    "destination": "Seaside Villa, Tulum",
    "guests": 2,
    "dates": {"from": "2024-06-01", "to": "2024-06-04"},
    "preferredContact": "email",
    "message": "Is the villa available?",
}

LISTING = {
    "fullName": "Sam Host",
    "email": "sam@example.com",
    "phone": "+1 202 555 0123",
    "title": "Cozy seaside cottage",
    "description": "Two bedrooms, five minutes from the beach.",
    "propertyType": "Cottage",
    "country": "UK",
    "street": "1 Harbour Road",
    "city": "St Ives",
    "state": "Cornwall",
    "postalCode": "TR26",
    "bedrooms": 2,
    "bathrooms": 1,
    "maxGuests": 4,
    "amenities": ["Wi-Fi", "Kitchen"],
    "pricePerNight": 150,
    "cleaningFee": 40,
    "minNights": 10,
    "maxNights": 5,
    "checkInWindow": "15:00-18:00",
    "checkOutTime": "11:00",
    "cancellationPolicy": "moderate",
    "rules": "No parties. No smoking inside.",
    "photos": ["front.jpg"],
    "agreeToTerms": True,
}

RATING = {c: 4 for c in (
    "roomQuality", "roomReadiness", "ownerResponse", "hygiene",
    "locationConvenience", "amenities", "valueForMoney", "overallSatisfaction",
)}


def main():
    settings = get_settings()
    configure_logging(settings)
    pipeline = SubmissionPipeline()
    print(f"{settings.app_name} sample submissions (notifications: {settings.notification_backend})\n" + "=" * 50)
    for kind, record in (
        (SubmissionKind.inquiry, INQUIRY),
        (SubmissionKind.listing, LISTING),
        (SubmissionKind.rating, RATING),
    ):
        outcome = pipeline.submit(kind, record)
        if isinstance(outcome, Accepted):
            print(f"  ACCEPTED {kind.value}: {outcome.confirmation.description} {outcome.metrics.model_dump(exclude_none=True)}")
        else:
            print(f"  REJECTED {kind.value}: {outcome.field_errors}")


if __name__ == "__main__":
    main()
