from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class Category(str, Enum):
    culture = "Culture"
    attraction = "Attraction"
    food = "Food"
    party = "Party"
    relax = "Relax"


class Mood(str, Enum):
    gastronomico = "gastronomico"
    culturale = "culturale"
    divertimento = "divertimento"
    relax = "relax"


# Fixed output order of the category groups
CATEGORY_ORDER: list[Category] = [
    Category.culture,
    Category.attraction,
    Category.food,
    Category.party,
    Category.relax,
]

CATEGORY_QUOTAS: dict[Category, int] = {
    Category.culture: 150,
    Category.attraction: 100,
    Category.food: 200,
    Category.party: 150,
    Category.relax: 80,
}

MOOD_CATEGORY: dict[Mood, Category] = {
    Mood.gastronomico: Category.food,
    Mood.culturale: Category.culture,
    Mood.divertimento: Category.party,
    Mood.relax: Category.relax,
}


def _coordinate(value: Any) -> float | None:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


@dataclass(frozen=True)
class Feature:
    """One element of an Overpass answer, with its position resolved."""

    id: Any
    tags: dict[str, str] = field(default_factory=dict)
    lat: float | None = None
    lon: float | None = None

    @classmethod
    def from_element(cls, element: dict[str, Any]) -> "Feature":
        # Ways and relations only carry a centroid when queried with "out center"
        center = element.get("center")
        if not isinstance(center, dict):
            center = {}
        lat = element.get("lat")
        lon = element.get("lon")
        tags = element.get("tags")
        if not isinstance(tags, dict):
            tags = {}
        return cls(
            id=element.get("id"),
            tags={k: v for k, v in tags.items() if isinstance(k, str) and isinstance(v, str)},
            lat=_coordinate(center.get("lat") if lat is None else lat),
            lon=_coordinate(center.get("lon") if lon is None else lon),
        )

    @property
    def name(self) -> str | None:
        name = self.tags.get("name")
        return name if isinstance(name, str) and name else None

    @property
    def external_id(self) -> int | str | None:
        return self.id if isinstance(self.id, (int, str)) and not isinstance(self.id, bool) else None

    @property
    def description(self) -> str:
        description = self.tags.get("description")
        return description if isinstance(description, str) else ""

    @property
    def position(self) -> tuple[float, float] | None:
        """``(lat, lon)`` as finite floats, or ``None`` when either is unusable."""
        lat, lon = _coordinate(self.lat), _coordinate(self.lon)
        if lat is None or lon is None:
            return None
        return lat, lon


class Coordinates(BaseModel):
    lat: float
    lon: float


class Place(BaseModel):
    id: int | str | None = None
    name: str
    category: Category
    lat: float
    lng: float
    description: str = ""
    score: int


class GenerateRequest(BaseModel):
    destination: str | None = Field(default=None, description="Free-text destination")
    mood: Mood | None = None

    @field_validator("mood", mode="before")
    @classmethod
    def _unknown_mood_is_unset(cls, value: Any) -> Any:
        if value is None:
            return None
        try:
            return Mood(str(value).strip().lower())
        except ValueError:
            return None


class GenerateResponse(BaseModel):
    success: bool
    destination_coords: Coordinates | None = Field(
        default=None, serialization_alias="destinationCoords"
    )
    places: list[Place] | None = None
    message: str | None = None


class SearchSpecificRequest(BaseModel):
    query: str | None = None
    lat: float | None = None
    lon: float | None = None


class SearchSpecificResponse(BaseModel):
    success: bool
    places: list[Place] | None = None
    message: str | None = None
