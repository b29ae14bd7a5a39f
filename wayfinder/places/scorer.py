from __future__ import annotations

from collections.abc import Mapping

from .curated import CuratedNames, load_curated_names
from .models import MOOD_CATEGORY, Category, Mood

BASE_SCORE = 50
LANDMARK_SCORE = 1000
FAMOUS_VENUE_SCORE = 900
MAX_SCORE = 500
MOOD_BOOST = 100


def _contains_any(name: str, fragments: tuple[str, ...]) -> bool:
    return any(fragment in name for fragment in fragments)


def score(
    tags: Mapping[str, str],
    mood: Mood | None,
    category: Category,
    curated: CuratedNames | None = None,
) -> int:
    """
    Heuristic relevance of a tagged place.

    Curated landmark and venue names return a fixed score straight away.
    Everything else starts at 50, earns points for well-documented data
    (wiki links, website, phone, opening hours), local venue keywords and
    a matching mood, and is capped at 500.
    """
    curated = curated or load_curated_names()
    name = (tags.get("name") or "").lower()

    if name:
        if _contains_any(name, curated.landmarks):
            return LANDMARK_SCORE
        if _contains_any(name, curated.famous_venues):
            return FAMOUS_VENUE_SCORE

    total = BASE_SCORE
    if tags.get("wikipedia") or tags.get("wikidata"):
        total += 40
    if tags.get("website") or tags.get("contact:website"):
        total += 10
    if tags.get("phone") or tags.get("contact:phone"):
        total += 10
    if tags.get("opening_hours"):
        total += 5

    if name and _contains_any(name, curated.local_keywords):
        total += 15

    if mood is not None and MOOD_CATEGORY.get(mood) == category:
        total += MOOD_BOOST

    return min(total, MAX_SCORE)
