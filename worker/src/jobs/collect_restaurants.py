"""CLI job to collect nearby restaurants with phone numbers into a spreadsheet."""

import argparse
import logging
import time
from pathlib import Path
from typing import Callable, List, Optional, Union

import requests

from src.core.config import ConfigError, get_settings
from src.core.models import FoodVenueRecord
from src.core.validation import InvalidInputError, parse_radius, validate_address, validate_filename
from src.etl.export import export_to_excel
from src.etl.transform import to_coordinates, to_venue_record
from src.vendors import google_places

logger = logging.getLogger(__name__)

ADDRESS_PROMPT = "Enter the address: "
RADIUS_PROMPT = "Enter the search radius in meters (e.g., 1000): "
FILENAME_PROMPT = "Enter the Excel filename (e.g., 'restaurants.xlsx'): "


class LocationNotFoundError(LookupError):
    """Raised when the address does not geocode to any location."""


def collect_food_venues(
    *,
    address: str,
    radius: int,
    api_key: str,
    keyword: str = "restaurant",
    page_delay: float = 2.0,
    timeout: Optional[float] = None,
) -> List[FoodVenueRecord]:
    """Geocode ``address`` and gather every nearby venue that lists a phone number.

    Pages are followed until the search stops returning ``next_page_token``,
    sleeping ``page_delay`` seconds before each follow-up request because the
    token takes a moment to become valid. Any upstream error propagates and
    nothing collected so far is returned.
    """
    address = validate_address(address)
    radius = parse_radius(radius)

    results = google_places.geocode(address, api_key=api_key, timeout=timeout)
    if not results:
        raise LocationNotFoundError(f"Address not found: {address!r}. Please check the input.")

    coords = to_coordinates(results[0])
    logger.info("Coordinates: %s, %s", coords.latitude, coords.longitude)

    venues: List[FoodVenueRecord] = []
    page_token = None
    page = 0

    while True:
        response = google_places.nearby_search(
            coords.latitude,
            coords.longitude,
            radius,
            api_key=api_key,
            keyword=keyword,
            pagetoken=page_token,
            timeout=timeout,
        )
        page += 1
        candidates = response.get("results", [])
        logger.info("Fetched %d candidates on page %d", len(candidates), page)

        for candidate in candidates:
            place_id = candidate.get("place_id")
            if not place_id:
                logger.debug("Skipping result without place_id: %s", candidate)
                continue

            details = google_places.place_details(place_id, api_key=api_key, timeout=timeout)
            record = to_venue_record(details)
            if record is None:
                logger.debug("Skipping %s without a phone number", place_id)
                continue
            venues.append(record)

        page_token = response.get("next_page_token")
        if not page_token:
            break
        logger.info("Fetching next page of results...")
        time.sleep(page_delay)

    logger.info("Completed run: pages=%d venues=%d", page, len(venues))
    return venues


def run_collect_job(
    *,
    address: str,
    radius: Union[int, str],
    output: str,
    keyword: Optional[str] = None,
) -> Optional[Path]:
    """Collect venues and export them. Returns the workbook path, or ``None`` when nothing matched."""
    address = validate_address(address)
    radius = parse_radius(radius)
    output = validate_filename(output)

    settings = get_settings()
    if not settings.google_api_key:
        raise ConfigError("GOOGLE_API_KEY is required")

    venues = collect_food_venues(
        address=address,
        radius=radius,
        api_key=settings.google_api_key,
        keyword=keyword or settings.search_keyword,
        page_delay=settings.page_delay_seconds,
        timeout=settings.request_timeout,
    )

    if not venues:
        logger.info("No restaurants with phone numbers found in the specified radius.")
        return None

    path = export_to_excel(venues, output)
    logger.info("Excel file saved at %s", path)
    return path


def prompt_missing(args: argparse.Namespace, read: Callable[[str], str] = input) -> argparse.Namespace:
    """Ask for any input not given on the command line, validating each answer as it arrives."""
    if args.address is None:
        args.address = read(ADDRESS_PROMPT)
    args.address = validate_address(args.address)

    if args.radius is None:
        args.radius = read(RADIUS_PROMPT)
    args.radius = parse_radius(args.radius)

    if args.output is None:
        args.output = read(FILENAME_PROMPT)
    args.output = validate_filename(args.output)
    return args


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Collect nearby restaurants with phone numbers into an Excel file")
    parser.add_argument("address", nargs="?", help="Street address to search around")
    parser.add_argument("--radius", dest="radius", help="Search radius in meters")
    parser.add_argument("-o", "--output", dest="output", help="Excel filename; .xlsx is appended when missing")
    parser.add_argument("--keyword", dest="keyword", help="Places keyword (defaults to PLACES_SEARCH_KEYWORD)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args = prompt_missing(args)
        run_collect_job(address=args.address, radius=args.radius, output=args.output, keyword=args.keyword)
    except (ConfigError, InvalidInputError) as exc:
        logger.error("%s", exc)
        return 2
    except LocationNotFoundError as exc:
        logger.error("%s", exc)
        return 1
    except (google_places.GooglePlacesError, requests.RequestException) as exc:
        logger.error("Error: %s", exc)
        return 1
    except Exception as exc:  # pragma: no cover - CLI fallback
        logger.error("Restaurant collection failed: %s", exc, exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
