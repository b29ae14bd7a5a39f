from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .categorizer import categorize
from .config import DEFAULT_PLACES_CONFIG, PlacesConfig
from .errors import InvalidInput
from .geocoder import geocode
from .models import (
    CATEGORY_ORDER,
    CATEGORY_QUOTAS,
    Category,
    Coordinates,
    Feature,
    Mood,
    Place,
)
from .overpass import fetch_features, search_by_name
from .scorer import score

logger = logging.getLogger(__name__)

SEARCH_RESULT_SCORE = 2000
SEARCH_RESULT_DESCRIPTION = "Online search result"


@dataclass(frozen=True)
class GenerationResult:
    coords: Coordinates
    places: list[Place]


def select_places(features: Iterable[Feature], mood: Mood | None) -> list[Place]:
    """
    Turn raw features into the balanced shortlist.

    Unnamed, unlocated and repeated-name features are dropped (first name
    wins). The rest are bucketed by category, sorted by score within the
    bucket, cut to the bucket quota and concatenated in ``CATEGORY_ORDER``.
    """
    buckets: dict[Category, list[Place]] = {category: [] for category in CATEGORY_ORDER}
    seen_names: set[str] = set()

    for feature in features:
        name = feature.name
        position = feature.position
        if not name or position is None:
            logger.debug("Skipping feature %s without name or position", feature.id)
            continue
        if name in seen_names:
            continue
        seen_names.add(name)

        category = categorize(feature.tags)
        buckets[category].append(Place(
            id=feature.external_id,
            name=name,
            category=category,
            lat=position[0],
            lng=position[1],
            description=feature.description,
            score=score(feature.tags, mood, category),
        ))

    selection: list[Place] = []
    for category in CATEGORY_ORDER:
        # sorted() is stable, so equal scores keep upstream order
        ranked = sorted(buckets[category], key=lambda p: p.score, reverse=True)
        selection.extend(ranked[:CATEGORY_QUOTAS[category]])
    return selection


def generate(
    destination: str | None,
    mood: Mood | None = None,
    config: PlacesConfig = DEFAULT_PLACES_CONFIG,
) -> GenerationResult:
    """
    Build the candidate place list for a destination.

    All-or-nothing: any ``PlannerError`` raised by a step aborts the run.
    """
    if not destination or not destination.strip():
        raise InvalidInput("Destination is required.")

    logger.info("Searching area for %r (mood=%s)", destination, mood.value if mood else None)
    coords = geocode(destination, config=config)
    features = fetch_features(coords.lat, coords.lon, config.area_radius_m, config=config)
    places = select_places(features, mood)
    logger.info("Selected %d of %d features for %r", len(places), len(features), destination)
    return GenerationResult(coords=coords, places=places)


def search_specific(
    query: str | None,
    lat: float | None,
    lon: float | None,
    config: PlacesConfig = DEFAULT_PLACES_CONFIG,
) -> list[Place]:
    """
    Look up named features near a point, outside the quota/scoring rules.

    Results carry ``SEARCH_RESULT_SCORE`` so they outrank any generated
    place. Missing input yields an empty list; unusable features are skipped.
    """
    if not query or not query.strip() or lat is None or lon is None:
        return []

    logger.info("Specific search for %r near %s,%s", query, lat, lon)
    places: list[Place] = []
    for feature in search_by_name(query.strip(), lat, lon, config=config):
        position = feature.position
        if not feature.name or position is None:
            continue
        places.append(Place(
            id=feature.external_id,
            name=feature.name,
            category=categorize(feature.tags),
            lat=position[0],
            lng=position[1],
            description=SEARCH_RESULT_DESCRIPTION,
            score=SEARCH_RESULT_SCORE,
        ))
    return places
