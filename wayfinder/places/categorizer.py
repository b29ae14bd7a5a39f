from __future__ import annotations

from collections.abc import Mapping

from .models import Category

_ATTRACTION_TOURISM = {"attraction", "viewpoint", "zoo", "theme_park"}
_FOOD_AMENITY = {"restaurant", "ice_cream", "fast_food", "cafe"}
_PARTY_AMENITY = {"bar", "pub", "nightclub", "biergarten", "casino"}
_RELAX_LEISURE = {"park", "garden", "nature_reserve"}
_RELAX_NATURAL = {"beach", "wood"}


def categorize(tags: Mapping[str, str]) -> Category:
    """Map an OSM tag set to one category. First matching rule wins."""
    tourism = tags.get("tourism")
    amenity = tags.get("amenity")

    if (
        tags.get("historic")
        or tourism in ("museum", "gallery")
        or tags.get("artwork_type")
        or amenity == "arts_centre"
    ):
        return Category.culture
    if tourism in _ATTRACTION_TOURISM:
        return Category.attraction
    if amenity in _FOOD_AMENITY or tags.get("cuisine"):
        return Category.food
    if amenity in _PARTY_AMENITY:
        return Category.party
    if tags.get("leisure") in _RELAX_LEISURE or tags.get("natural") in _RELAX_NATURAL:
        return Category.relax
    return Category.attraction
