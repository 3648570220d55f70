"""Module E: Amenity set and photo slot assembly from discrete form events."""
from __future__ import annotations

from typing import Iterable, Optional

from staybook.models.listing import Amenity, PhotoSlot
from staybook.schemas.base import ResultSchema


def toggle_amenity(current: Iterable[Amenity | str], item: Amenity | str, checked: bool) -> frozenset[Amenity]:
    """Add ``item`` when checked, remove it otherwise. Idempotent either way."""
    amenities = frozenset(Amenity(a) for a in current)
    amenity = Amenity(item)
    if checked:
        return amenities | {amenity}
    return amenities - {amenity}


class PhotoSlots(ResultSchema):
    """Four named photo slots; each holds an optional file identifier."""
    room: Optional[str] = None
    front: Optional[str] = None
    backyard: Optional[str] = None
    living: Optional[str] = None

    def assign(self, slot: PhotoSlot | str, file_id: Optional[str]) -> "PhotoSlots":
        slot = PhotoSlot(slot)
        if file_id is not None:
            file_id = file_id.strip() or None
        return self.model_copy(update={slot.value: file_id})

    def clear(self, slot: PhotoSlot | str) -> "PhotoSlots":
        return self.assign(slot, None)

    def get(self, slot: PhotoSlot | str) -> Optional[str]:
        return getattr(self, PhotoSlot(slot).value)

    def photos(self) -> tuple[str, ...]:
        """Filled slots in slot-priority order (room, front, backyard, living)."""
        return tuple(v for v in (getattr(self, s.value) for s in PhotoSlot) if v)

    @property
    def cover(self) -> Optional[str]:
        photos = self.photos()
        return photos[0] if photos else None
