from __future__ import annotations

import logging

import requests

from .config import DEFAULT_PLACES_CONFIG, PlacesConfig
from .errors import NotFound, UpstreamError
from .models import Coordinates

logger = logging.getLogger(__name__)


def geocode(query: str, config: PlacesConfig = DEFAULT_PLACES_CONFIG) -> Coordinates:
    """
    Resolve a free-text place name to the best Nominatim match.

    Raises ``NotFound`` when Nominatim has no result and ``UpstreamError``
    when the call fails or the answer cannot be parsed.
    """
    try:
        response = requests.get(
            config.nominatim_url,
            params={"q": query, "format": "json", "limit": 1},
            headers={"User-Agent": config.user_agent},
            timeout=config.geocode_timeout,
        )
        response.raise_for_status()
        results = response.json()
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Nominatim lookup failed for %r", query, exc_info=True)
        raise UpstreamError("Geocoding service unavailable.") from exc

    if not results:
        raise NotFound(f"Destination not found: {query}")

    try:
        return Coordinates(lat=float(results[0]["lat"]), lon=float(results[0]["lon"]))
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise UpstreamError("Unexpected geocoding response.") from exc
