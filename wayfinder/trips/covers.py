from __future__ import annotations

from urllib.parse import quote

from .config import DEFAULT_TRIPS_CONFIG, TripsConfig


def clean_destination(destination: str) -> str:
    """Keep only the place name: "Rome, Lazio, Italy" -> "Rome"."""
    return destination.split(",")[0].strip()


def cover_image_url(destination: str, config: TripsConfig = DEFAULT_TRIPS_CONFIG) -> str:
    prompt = quote(f"travel photo of {clean_destination(destination)} landmark", safe="")
    return (
        f"{config.cover_image_base_url}{prompt}"
        f"?width={config.cover_width}&height={config.cover_height}&nologo=true"
    )
