from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class TripsConfig:
    cover_image_base_url: str = os.getenv(
        "WAYFINDER_COVER_IMAGE_URL", "https://image.pollinations.ai/prompt/"
    )
    cover_width: int = 800
    cover_height: int = 600


DEFAULT_TRIPS_CONFIG = TripsConfig()
