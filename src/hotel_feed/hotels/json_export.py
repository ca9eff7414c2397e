"""Render hotel records in the ``{"Hotels":{"Hotel":[...]}}`` JSON shape."""
from __future__ import annotations

import json
import logging
from typing import Iterable, Optional

from hotel_feed.core.xml import parse_document
from hotel_feed.services.document_client import DocumentClient

from .models import HotelRecord
from .normalizer import build_hotel_records

logger = logging.getLogger(__name__)


def hotels_to_dict(records: Iterable[HotelRecord]) -> dict[str, object]:
    return {"Hotels": {"Hotel": [record.to_dict() for record in records]}}


def dumps(payload: object) -> str:
    """Compact JSON; only quotes, backslashes and control characters are escaped."""
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def hotels_to_json(document_location: str, *, client: Optional[DocumentClient] = None) -> str:
    """Fetch and convert a hotels document.

    Fetch and parse failures propagate unchanged; there is no partial output.
    """
    owns_client = client is None
    active = client or DocumentClient()
    try:
        data = active.fetch(document_location)
    finally:
        if owns_client:
            active.close()

    records = build_hotel_records(parse_document(data, location=document_location))
    logger.debug("Converted %s hotel(s) from %s", len(records), document_location)
    return dumps(hotels_to_dict(records))


to_json = hotels_to_json
