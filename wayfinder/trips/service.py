from __future__ import annotations

import logging
import uuid
from typing import Any

from ..places.errors import InvalidInput
from .config import DEFAULT_TRIPS_CONFIG, TripsConfig
from .covers import cover_image_url
from .models import Trip
from .store import match_title, update_user_trips

logger = logging.getLogger(__name__)


def _new_trip_id() -> str:
    return uuid.uuid4().hex


def save_trip(
    user_id: str,
    itinerary_data: dict[str, Any],
    overwrite: bool = False,
    config: TripsConfig = DEFAULT_TRIPS_CONFIG,
) -> Trip:
    """
    Create or replace one of the user's trips.

    An existing trip is replaced when ``itinerary_data["id"]`` names it, or,
    only with ``overwrite``, when its title matches. Replaced trips keep
    their id and cover image; anything else becomes a new trip.
    """
    destination = str(itinerary_data.get("destination") or "").strip()
    if not destination:
        raise InvalidInput("Destination is required.")
    title = str(itinerary_data.get("title") or "").strip() or destination

    with update_user_trips(user_id) as trips:
        existing = trips.get(str(itinerary_data.get("id") or ""))
        if existing is None and overwrite:
            existing = match_title(trips.values(), title)

        trip_id = existing.id if existing else _new_trip_id()
        image = existing.image if existing and existing.image else cover_image_url(destination, config)

        trip = Trip(
            id=trip_id,
            title=title,
            destination=destination,
            start_date=itinerary_data.get("startDate"),
            end_date=itinerary_data.get("endDate"),
            mood=itinerary_data.get("mood") or None,
            image=image,
            data={**itinerary_data, "id": trip_id},
        )
        trips[trip_id] = trip

    if existing:
        logger.info("Updated trip %s (%s) for user %s", trip_id, title, user_id)
    else:
        logger.info("Created trip %s (%s) for user %s", trip_id, title, user_id)
    return trip
