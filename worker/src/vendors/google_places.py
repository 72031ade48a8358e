"""Client utilities for the Google Geocoding and Places APIs."""

import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_BASE_URL = "https://maps.googleapis.com/maps/api"
DETAIL_FIELDS = "name,formatted_address,formatted_phone_number,rating"


class GooglePlacesError(RuntimeError):
    """Raised when a Google Maps API returns a non-successful response."""


def _get(endpoint: str, params: Dict[str, Any], timeout: Optional[float]) -> Dict[str, Any]:
    response = _SESSION.get(f"{_BASE_URL}/{endpoint}", params=params, timeout=timeout)
    response.raise_for_status()
    return response.json()


def _raise_for_status(operation: str, payload: Dict[str, Any], accepted: set) -> str:
    status = payload.get("status")
    if status not in accepted:
        logger.error("%s failed: status=%s, error_message=%s", operation, status, payload.get("error_message"))
        raise GooglePlacesError(payload.get("error_message") or status)
    return status


def geocode(address: str, api_key: str, timeout: Optional[float] = None) -> List[Dict[str, Any]]:
    params = {"address": address, "key": api_key}
    payload = _get("geocode/json", params, timeout)
    status = _raise_for_status("geocode", payload, {"OK", "ZERO_RESULTS"})
    if status == "ZERO_RESULTS":
        return []
    return payload.get("results") or []


def nearby_search(
    latitude: float,
    longitude: float,
    radius: int,
    api_key: str,
    keyword: str = "restaurant",
    pagetoken: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    params = {
        "location": f"{latitude},{longitude}",
        "radius": radius,
        "keyword": keyword,
        "key": api_key,
    }
    if pagetoken:
        params["pagetoken"] = pagetoken
    payload = _get("place/nearbysearch/json", params, timeout)
    status = payload.get("status")
    if pagetoken and status not in {"OK", "ZERO_RESULTS"}:
        # A follow-up page that fails (usually a token not yet active) ends pagination.
        logger.warning("nearby_search page rejected: status=%s, error_message=%s", status, payload.get("error_message"))
        return {"status": status, "results": []}
    _raise_for_status("nearby_search", payload, {"OK", "ZERO_RESULTS"})
    return payload


def place_details(
    place_id: str,
    api_key: str,
    fields: str = DETAIL_FIELDS,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    params = {"place_id": place_id, "key": api_key, "fields": fields}
    payload = _get("place/details/json", params, timeout)
    status = _raise_for_status("place_details", payload, {"OK", "ZERO_RESULTS", "NOT_FOUND"})
    if status != "OK":
        # Stale ids come back as NOT_FOUND; treat them as a result without details.
        logger.debug("place_details returned %s for %s", status, place_id)
        return {}
    return payload.get("result") or {}
