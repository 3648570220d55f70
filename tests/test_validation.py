"""
Unit tests for whole-record validation.
"""

import unittest

from staybook.models.submission import SubmissionKind
from staybook.schemas.inquiry import BookingInquiry
from staybook.services.field_rules import UnknownFieldError
from staybook.services.metrics import compute_derived_metrics
from staybook.services.validation import UnknownSubmissionKindError, get_form, validate

from tests import samples


class TestValidate(unittest.TestCase):
    def test_example_inquiry_is_valid(self):
        record = samples.inquiry()
        result = validate("inquiry", record)
        self.assertTrue(result.is_valid)
        self.assertEqual(result.field_errors, {})
        self.assertEqual(compute_derived_metrics("inquiry", record).nights, 3)

    def test_example_listing_is_valid(self):
        self.assertTrue(validate(SubmissionKind.listing, samples.listing()).is_valid)

    def test_rating_is_valid(self):
        self.assertTrue(validate(SubmissionKind.rating, samples.rating(2)).is_valid)

    def test_every_violation_is_collected(self):
        record = samples.inquiry(fullName="J", email="nope", guests=25, message="short")
        result = validate(SubmissionKind.inquiry, record)
        self.assertFalse(result.is_valid)
        self.assertEqual(set(result.field_errors), {"full_name", "email", "guests", "message"})
        self.assertEqual(result.messages_for("guests"), ["Max 20 guests"])
        self.assertEqual(result.messages_for("destination"), [])

    def test_text_fields_have_no_upper_length_limit(self):
        self.assertTrue(validate("listing", samples.listing(title="T" * 150, rules="r" * 6000, postalCode="9" * 30)).is_valid)
        self.assertTrue(validate("inquiry", samples.inquiry(message="m" * 6000, destination="d" * 300)).is_valid)
        result = validate("inquiry", samples.inquiry(phone="1" * 21))
        self.assertEqual(result.messages_for("phone"), ["Phone number cannot exceed 20 characters"])

    def test_host_and_guest_email_messages(self):
        self.assertEqual(validate("listing", samples.listing(email="nope")).messages_for("email"), ["Enter a valid email"])
        self.assertEqual(validate("inquiry", samples.inquiry(email="nope")).messages_for("email"), ["Enter a valid email address"])

    def test_result_serializes_is_valid(self):
        dumped = validate(SubmissionKind.rating, samples.rating(hygiene=0)).model_dump()
        self.assertFalse(dumped["is_valid"])
        self.assertIn("hygiene", dumped["field_errors"])

    def test_validated_model_can_be_revalidated(self):
        payload = BookingInquiry.model_validate(
            {
                "full_name": "Jane Doe",
                "email": "jane@x.com",
                "phone": "+12025550123",
                "destination": "Tulum",
                "guests": 2,
                "dates": {"check_in": "2024-06-01", "check_out": "2024-06-04"},
                "preferred_contact": "phone",
                "message": "Looking forward to it",
            }
        )
        self.assertTrue(validate(SubmissionKind.inquiry, payload).is_valid)

    def test_unknown_kind(self):
        with self.assertRaises(UnknownSubmissionKindError):
            get_form("review")

    def test_unknown_field(self):
        with self.assertRaises(UnknownFieldError):
            validate(SubmissionKind.rating, samples.rating(cleanliness=4))


if __name__ == "__main__":
    unittest.main()
