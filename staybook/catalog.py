"""Module J: Static listing catalog (read-only; rendered by the UI, not validated)."""
from decimal import Decimal

from staybook.schemas.catalog import Listing

LISTINGS: tuple[Listing, ...] = (
    Listing(id="1", title="Scandi Nook", location="Copenhagen, Denmark", price=Decimal("180"), rating=4.9, image="listing-1.jpg"),
    Listing(id="2", title="Seaside Villa", location="Tulum, Mexico", price=Decimal("420"), rating=4.8, image="listing-2.jpg"),
    Listing(id="3", title="Woodland Cabin", location="Banff, Canada", price=Decimal("210"), rating=4.95, image="listing-3.jpg"),
    Listing(id="4", title="Industrial Loft", location="New York, USA", price=Decimal("320"), rating=4.7, image="listing-4.jpg"),
    Listing(id="5", title="Desert Retreat", location="Joshua Tree, USA", price=Decimal("240"), rating=4.8, image="listing-1.jpg"),
    Listing(id="6", title="Coastal Cottage", location="Cornwall, UK", price=Decimal("190"), rating=4.7, image="listing-2.jpg"),
    Listing(id="7", title="Mountain Hideaway", location="Queenstown, New Zealand", price=Decimal("260"), rating=4.92, image="listing-3.jpg"),
    Listing(id="8", title="Alpine Chalet", location="Zermatt, Switzerland", price=Decimal("480"), rating=4.93, image="listing-4.jpg"),
)

_BY_ID = {listing.id: listing for listing in LISTINGS}


def list_listings() -> tuple[Listing, ...]:
    return LISTINGS


def get_listing(listing_id: str | int) -> Listing | None:
    return _BY_ID.get(str(listing_id))
