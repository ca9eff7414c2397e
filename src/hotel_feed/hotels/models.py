"""Dataclasses for hotel records read from the hotels XML feed."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

ADDRESS_FIELDS: tuple[tuple[str, str], ...] = (
    ("number", "Number"),
    ("street", "Street"),
    ("city", "City"),
    ("state", "State"),
    ("zip", "Zip"),
    ("nearest_airport", "NearestAirport"),
)


@dataclass(slots=True)
class HotelAddress:
    """Structured address; every part is optional."""

    number: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    nearest_airport: Optional[str] = None

    def to_dict(self) -> dict[str, str]:
        payload: dict[str, str] = {}
        for attr, key in ADDRESS_FIELDS:
            value = getattr(self, attr)
            if value:
                payload[key] = value
        return payload

    def is_empty(self) -> bool:
        return not self.to_dict()


@dataclass(slots=True)
class HotelRecord:
    """One ``Hotel`` element, already trimmed and filtered."""

    name: str = ""
    phones: List[str] = field(default_factory=list)
    address: Optional[HotelAddress] = None
    rating: Optional[str] = None

    def to_dict(self) -> dict[str, object]:
        # key order is part of the output shape
        payload: dict[str, object] = {"Name": self.name}
        if self.phones:
            payload["Phone"] = list(self.phones)
        if self.address is not None and not self.address.is_empty():
            payload["Address"] = self.address.to_dict()
        if self.rating:
            payload["_Rating"] = self.rating
        return payload
