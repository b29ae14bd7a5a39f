from __future__ import annotations

import logging
import re

import requests

from .config import DEFAULT_PLACES_CONFIG, PlacesConfig
from .errors import UpstreamError
from .models import Feature

logger = logging.getLogger(__name__)

# One filter per tag family fetched for an area search
AREA_FILTERS: list[str] = [
    '["historic"]',
    '["tourism"~"attraction|museum|viewpoint"]',
    '["amenity"~"restaurant|cafe|ice_cream|fast_food|bar|pub|nightclub"]',
    '["leisure"~"park|garden"]',
]

_REGEX_SPECIAL = re.compile(r"([.^$*+?()\[\]{}|\\])")


def _regex_literal(text: str) -> str:
    """Quote user text for use as a literal regex inside an Overpass string."""
    pattern = _REGEX_SPECIAL.sub(r"\\\1", text)
    return pattern.replace("\\", "\\\\").replace('"', '\\"')


def build_area_query(lat: float, lon: float, radius_m: int, timeout: int) -> str:
    around = f"(around:{radius_m},{lat},{lon})"
    parts = "\n".join(f"  nwr{tag_filter}{around};" for tag_filter in AREA_FILTERS)
    return f"[out:json][timeout:{timeout}];\n(\n{parts}\n);\nout center;"


def build_name_query(name: str, lat: float, lon: float, radius_m: int, timeout: int) -> str:
    around = f"(around:{radius_m},{lat},{lon})"
    return (
        f"[out:json][timeout:{timeout}];\n"
        f'(\n  nwr["name"~"{_regex_literal(name)}",i]{around};\n);\n'
        "out center;"
    )


def _run_query(query: str, http_timeout: float, config: PlacesConfig) -> list[Feature]:
    try:
        response = requests.post(
            config.overpass_url,
            data={"data": query},
            headers={"User-Agent": config.user_agent},
            timeout=http_timeout,
        )
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Overpass query failed", exc_info=True)
        raise UpstreamError("Map data service unavailable.") from exc

    elements = payload.get("elements") if isinstance(payload, dict) else None
    if not isinstance(elements, list):
        raise UpstreamError("Unexpected map data response.")

    return [Feature.from_element(e) for e in elements if isinstance(e, dict)]


def fetch_features(
    lat: float,
    lon: float,
    radius_m: int,
    config: PlacesConfig = DEFAULT_PLACES_CONFIG,
) -> list[Feature]:
    """Every historic, tourism, food/drink and green-space feature within the radius."""
    query = build_area_query(lat, lon, radius_m, config.area_query_timeout)
    return _run_query(query, config.area_http_timeout, config)


def search_by_name(
    name: str,
    lat: float,
    lon: float,
    config: PlacesConfig = DEFAULT_PLACES_CONFIG,
) -> list[Feature]:
    """Features whose name contains ``name`` (case-insensitive) near a point."""
    query = build_name_query(name, lat, lon, config.search_radius_m, config.search_query_timeout)
    return _run_query(query, config.search_http_timeout, config)
