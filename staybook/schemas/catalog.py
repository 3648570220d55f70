"""Read-only listing catalog record."""
from decimal import Decimal

from pydantic import Field

from staybook.schemas.base import BaseSchema


class Listing(BaseSchema):
    id: str
    title: str
    location: str
    price: Decimal = Field(..., gt=0)  # per night
    rating: float = Field(..., ge=0, le=5)
    image: str
