"""
Unit tests for the static listing catalog.
"""

import unittest
from decimal import Decimal

from staybook.catalog import get_listing, list_listings


class TestCatalog(unittest.TestCase):
    def test_lookup(self):
        listing = get_listing("3")
        self.assertEqual(listing.title, "Woodland Cabin")
        self.assertEqual(listing.price, Decimal("210"))
        self.assertIs(get_listing(3), listing)

    def test_missing(self):
        self.assertIsNone(get_listing("99"))

    def test_all_listings(self):
        listings = list_listings()
        self.assertEqual(len(listings), 8)
        self.assertEqual(len({item.id for item in listings}), 8)


if __name__ == "__main__":
    unittest.main()
