from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TripSummary(_CamelModel):
    id: str
    title: str
    destination: str
    start_date: str | None = None
    end_date: str | None = None
    mood: str | None = None
    image: str = ""


class Trip(TripSummary):
    # Itinerary payload (places, schedule, notes) stored as-is
    data: dict[str, Any] = Field(default_factory=dict)

    def summary(self) -> TripSummary:
        return TripSummary(**self.model_dump(exclude={"data"}))


class SaveTripRequest(_CamelModel):
    itinerary_data: dict[str, Any]
    overwrite: bool = False


class SaveTripResponse(_CamelModel):
    success: bool
    trip_id: str | None = None
    message: str | None = None


class TripListResponse(_CamelModel):
    success: bool
    trips: list[TripSummary] = Field(default_factory=list)


class TripDataResponse(_CamelModel):
    success: bool
    data: dict[str, Any] | None = None
    message: str | None = None
