"""Utilities for transforming Google Maps responses into venue records."""

import logging
from typing import Any, Dict, Optional

from src.core.models import NOT_AVAILABLE, Coordinates, FoodVenueRecord

logger = logging.getLogger(__name__)


def to_coordinates(result: Dict[str, Any]) -> Coordinates:
    location = result.get("geometry", {}).get("location", {})
    return Coordinates(latitude=float(location["lat"]), longitude=float(location["lng"]))


def _text_or_na(value: Any) -> str:
    if value is None:
        return NOT_AVAILABLE
    text = str(value).strip()
    return text or NOT_AVAILABLE


def extract_phone(details: Dict[str, Any]) -> Optional[str]:
    phone = details.get("formatted_phone_number")
    if phone is None:
        return None
    phone = str(phone).strip()
    return phone or None


def to_venue_record(details: Dict[str, Any]) -> Optional[FoodVenueRecord]:
    """Build a record from a Place Details result, or ``None`` if it has no phone."""
    phone = extract_phone(details or {})
    if phone is None:
        return None

    rating = details.get("rating")
    return FoodVenueRecord(
        name=_text_or_na(details.get("name")),
        address=_text_or_na(details.get("formatted_address")),
        phone=phone,
        rating=float(rating) if rating is not None else NOT_AVAILABLE,
    )
