"""Hotel domain models and XML-to-JSON conversion helpers."""

from .json_export import dumps, hotels_to_dict, hotels_to_json, to_json
from .models import HotelAddress, HotelRecord
from .normalizer import build_hotel_record, build_hotel_records

__all__ = [
    "HotelAddress",
    "HotelRecord",
    "build_hotel_record",
    "build_hotel_records",
    "dumps",
    "hotels_to_dict",
    "hotels_to_json",
    "to_json",
]
