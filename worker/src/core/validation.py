"""Precondition checks for the values a collection run is started with."""

from pathlib import Path
from typing import Any


class InvalidInputError(ValueError):
    """Raised when an address, radius or output filename is unusable."""


def validate_address(value: Any) -> str:
    address = str(value or "").strip()
    if not address:
        raise InvalidInputError("Address is required.")
    return address


def parse_radius(value: Any) -> int:
    """Return the search radius in meters as a positive integer.

    Accepts an ``int`` or a string holding one. Floats, booleans and other
    non-integer text are rejected rather than truncated.
    """
    if isinstance(value, bool):
        raise InvalidInputError("Invalid radius. Please enter a positive number.")
    if isinstance(value, int):
        radius = value
    else:
        text = str(value or "").strip()
        try:
            radius = int(text)
        except ValueError as exc:
            raise InvalidInputError("Invalid radius. Please enter a positive number.") from exc
    if radius <= 0:
        raise InvalidInputError("Invalid radius. Please enter a positive number.")
    return radius


def validate_filename(value: Any) -> str:
    filename = str(value or "").strip()
    if not filename:
        raise InvalidInputError("Excel filename is required.")
    if Path(filename).name in ("", ".."):
        raise InvalidInputError(f"Excel filename must name a file, got {filename!r}.")
    return filename
