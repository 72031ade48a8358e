"""Data models shared by the restaurant collection job."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

NOT_AVAILABLE = "N/A"
COLUMNS: Tuple[str, ...] = ("name", "address", "phone", "rating")


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(slots=True)
class FoodVenueRecord:
    """A nearby venue that returned a phone number from Place Details."""

    name: str
    address: str
    phone: str
    rating: Union[float, str] = NOT_AVAILABLE

    def as_row(self) -> Tuple[Union[float, str], ...]:
        return tuple(getattr(self, column) for column in COLUMNS)
