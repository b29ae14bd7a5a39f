from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class PlacesConfig:
    nominatim_url: str = os.getenv(
        "WAYFINDER_NOMINATIM_URL", "https://nominatim.openstreetmap.org/search"
    )
    overpass_url: str = os.getenv(
        "WAYFINDER_OVERPASS_URL", "https://overpass-api.de/api/interpreter"
    )
    user_agent: str = os.getenv("WAYFINDER_USER_AGENT", "WayFinderApp/1.0")
    geocode_timeout: float = 10.0
    # Server-side [timeout:N] for the area query, and the client budget around it
    area_query_timeout: int = 90
    area_http_timeout: float = 100.0
    search_query_timeout: int = 25
    search_http_timeout: float = 35.0
    area_radius_m: int = 8000
    search_radius_m: int = 50000
    curated_names_path: Path = Path(__file__).resolve().parent / "data" / "curated_names.json"


DEFAULT_PLACES_CONFIG = PlacesConfig()
