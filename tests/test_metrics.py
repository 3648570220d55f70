"""
Unit tests for derived metrics (nights, payout estimate, average rating).
"""

import unittest
from datetime import date, datetime, timezone
from decimal import Decimal

from staybook.models.submission import SubmissionKind
from staybook.services.metrics import (
    average_rating,
    compute_derived_metrics,
    estimated_payout,
    stay_nights,
)

from tests import samples


class TestStayNights(unittest.TestCase):
    def test_exact_day_difference(self):
        self.assertEqual(stay_nights(date(2024, 6, 1), date(2024, 6, 4)), 3)
        self.assertEqual(stay_nights(date(2024, 2, 28), date(2024, 3, 1)), 2)
        self.assertEqual(stay_nights(date(2023, 12, 31), date(2024, 12, 31)), 366)

    def test_empty_or_inverted_ranges(self):
        self.assertEqual(stay_nights(date(2024, 6, 4), date(2024, 6, 4)), 0)
        self.assertEqual(stay_nights(date(2024, 6, 4), date(2024, 6, 1)), 0)
        self.assertEqual(stay_nights(None, date(2024, 6, 1)), 0)
        self.assertEqual(stay_nights(date(2024, 6, 1), None), 0)
        self.assertEqual(stay_nights("2024-06-01", "2024-06-04"), 0)

    def test_datetimes_round_to_nearest_night(self):
        self.assertEqual(stay_nights(datetime(2024, 6, 1, 0), datetime(2024, 6, 3, 12)), 3)
        self.assertEqual(stay_nights(datetime(2024, 6, 1, 0), datetime(2024, 6, 3, 11)), 2)

    def test_mixed_inputs_do_not_raise(self):
        aware = datetime(2024, 6, 4, tzinfo=timezone.utc)
        self.assertEqual(stay_nights(date(2024, 6, 1), aware), 3)


class TestEstimatedPayout(unittest.TestCase):
    def test_price_times_min_nights_minus_fee(self):
        self.assertEqual(estimated_payout(120, 3, 30), Decimal("330.00"))
        self.assertEqual(estimated_payout(Decimal("99.99"), 2, Decimal("10.005")), Decimal("189.98"))

    def test_never_negative(self):
        self.assertEqual(estimated_payout(50, 1, 80), Decimal("0.00"))
        self.assertEqual(estimated_payout(None, None, 30), Decimal("0.00"))
        self.assertEqual(estimated_payout(-10, 5, 0), Decimal("0.00"))

    def test_minimum_one_night_basis(self):
        self.assertEqual(estimated_payout(120, 0, 30), Decimal("90.00"))
        self.assertEqual(estimated_payout(120, None, None), Decimal("120.00"))

    def test_garbage_inputs(self):
        self.assertEqual(estimated_payout("abc", "x", float("nan")), Decimal("0.00"))

    def test_amounts_beyond_default_precision(self):
        self.assertEqual(estimated_payout(Decimal("1e26"), 1, 0), Decimal("100000000000000000000000000.00"))
        self.assertEqual(
            estimated_payout(Decimal("123456789012345678901234567.891"), 3, Decimal("0.004")),
            Decimal("370370367037037036703703703.67"),
        )
        self.assertEqual(estimated_payout("9e999999", 2, 0), Decimal("18e999999"))


class TestAverageRating(unittest.TestCase):
    def test_uniform_scores(self):
        for score, expected in ((1, "1.00"), (3, "3.00"), (5, "5.00")):
            self.assertEqual(average_rating([score] * 8), Decimal(expected))

    def test_rounds_half_up_to_two_places(self):
        # 33 / 8 = 4.125
        self.assertEqual(average_rating([5, 4, 4, 4, 4, 4, 4, 4]), Decimal("4.13"))

    def test_mapping_by_criterion(self):
        scores = {c: 4 for c in (
            "room_quality", "room_readiness", "owner_response", "hygiene",
            "location_convenience", "amenities", "value_for_money", "overall_satisfaction",
        )}
        self.assertEqual(average_rating(scores), Decimal("4.00"))

    def test_unscored_criteria_count_as_zero(self):
        self.assertEqual(average_rating({"hygiene": 4}), Decimal("0.50"))

    def test_huge_scores_do_not_raise(self):
        self.assertEqual(average_rating(["1e40"] * 8), Decimal("1e40"))


class TestComputeDerivedMetrics(unittest.TestCase):
    def test_inquiry(self):
        metrics = compute_derived_metrics(SubmissionKind.inquiry, samples.inquiry())
        self.assertEqual(metrics.nights, 3)
        self.assertIsNone(metrics.estimated_payout)
        self.assertIsNone(metrics.average_rating)

    def test_inquiry_preview_with_incomplete_or_inverted_dates(self):
        partial = compute_derived_metrics("inquiry", samples.inquiry(dates={"from": "2024-06-01"}))
        self.assertEqual(partial.nights, 0)
        inverted = compute_derived_metrics("inquiry", samples.inquiry(dates={"from": "2024-06-04", "to": "2024-06-01"}))
        self.assertEqual(inverted.nights, 0)

    def test_listing(self):
        metrics = compute_derived_metrics(SubmissionKind.listing, samples.listing(pricePerNight="150", minNights="3", cleaningFee=50))
        self.assertEqual(metrics.estimated_payout, Decimal("400.00"))
        self.assertIsNone(metrics.nights)

    def test_listing_preview_with_invalid_price(self):
        metrics = compute_derived_metrics(SubmissionKind.listing, samples.listing(pricePerNight="", cleaningFee=30))
        self.assertEqual(metrics.estimated_payout, Decimal("0.00"))

    def test_rating(self):
        metrics = compute_derived_metrics(SubmissionKind.rating, samples.rating(5))
        self.assertEqual(metrics.average_rating, Decimal("5.00"))

    def test_rating_preview_ignores_out_of_range_scores(self):
        metrics = compute_derived_metrics(SubmissionKind.rating, samples.rating(4, hygiene=9))
        self.assertEqual(metrics.average_rating, Decimal("3.50"))


if __name__ == "__main__":
    unittest.main()
