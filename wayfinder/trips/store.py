from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from .models import Trip

logger = logging.getLogger(__name__)

_trips: dict[str, dict[str, Trip]] = {}
_locks: dict[str, threading.Lock] = {}
_registry_lock = threading.Lock()


def _user_lock(user_id: str) -> threading.Lock:
    with _registry_lock:
        lock = _locks.get(user_id)
        if lock is None:
            lock = _locks[user_id] = threading.Lock()
        return lock


@contextmanager
def update_user_trips(user_id: str) -> Iterator[dict[str, Trip]]:
    """Hold the user's lock and yield their ``{trip_id: Trip}`` mapping."""
    with _user_lock(user_id):
        yield _trips.setdefault(user_id, {})


def find_trips_by_user(user_id: str) -> list[Trip]:
    """The user's trips in the order they were first saved."""
    with _user_lock(user_id):
        return list(_trips.get(user_id, {}).values())


def get_trip(user_id: str, trip_id: str) -> Trip | None:
    with _user_lock(user_id):
        return _trips.get(user_id, {}).get(trip_id)


def match_title(trips: Iterable[Trip], title: str) -> Trip | None:
    """First trip whose title equals ``title``, ignoring case and padding."""
    wanted = title.strip().lower()
    for trip in trips:
        if trip.title.strip().lower() == wanted:
            return trip
    return None


def find_trip_by_title(user_id: str, title: str) -> Trip | None:
    with _user_lock(user_id):
        return match_title(_trips.get(user_id, {}).values(), title)


def upsert_trip(user_id: str, trip: Trip) -> None:
    """Insert or replace the trip with ``trip.id``; replacing keeps its position."""
    with update_user_trips(user_id) as trips:
        trips[trip.id] = trip


def delete_trip(user_id: str, trip_id: str) -> bool:
    with update_user_trips(user_id) as trips:
        removed = trips.pop(trip_id, None) is not None
    if removed:
        logger.info("Deleted trip %s for user %s", trip_id, user_id)
    return removed


def clear_trips() -> None:
    with _registry_lock:
        _trips.clear()
        _locks.clear()
