"""Utilities to turn parsed ``Hotels`` documents into hotel records."""
from __future__ import annotations

from typing import List, Optional

from lxml import etree

from .models import ADDRESS_FIELDS, HotelAddress, HotelRecord

ROOT_TAG = "Hotels"
HOTEL_TAG = "Hotel"


def _text(element: Optional[etree._Element]) -> Optional[str]:
    """Trimmed string-value of ``element``; ``None`` when missing or blank."""
    if element is None:
        return None
    text = str(element.xpath("string()")).strip()
    return text or None


def _extract_phones(hotel: etree._Element) -> List[str]:
    phones: List[str] = []
    for phone in hotel.findall("Phone"):
        value = _text(phone)
        if value:
            phones.append(value)
    return phones


def _extract_address(hotel: etree._Element) -> Optional[HotelAddress]:
    node = hotel.find("Address")
    if node is None:
        return None
    parts = {attr: _text(node.find(tag)) for attr, tag in ADDRESS_FIELDS}
    address = HotelAddress(**parts)
    if address.is_empty():
        return None
    return address


def _extract_rating(hotel: etree._Element) -> Optional[str]:
    raw = hotel.get("Rating")
    if raw is None:
        return None
    return raw.strip() or None


def build_hotel_record(hotel: etree._Element) -> HotelRecord:
    return HotelRecord(
        name=_text(hotel.find("Name")) or "",
        phones=_extract_phones(hotel),
        address=_extract_address(hotel),
        rating=_extract_rating(hotel),
    )


def build_hotel_records(tree: etree._ElementTree) -> List[HotelRecord]:
    """Records for every ``/Hotels/Hotel`` element, in document order."""
    root = tree.getroot()
    if root.tag != ROOT_TAG:
        return []
    return [build_hotel_record(hotel) for hotel in root.findall(HOTEL_TAG)]
