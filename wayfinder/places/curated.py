from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from .config import DEFAULT_PLACES_CONFIG


@dataclass(frozen=True)
class CuratedNames:
    """Lowercase name fragments that drive the scorer's fixed boosts."""

    landmarks: tuple[str, ...] = ()
    famous_venues: tuple[str, ...] = ()
    local_keywords: tuple[str, ...] = ()


def _fragments(raw: dict, key: str) -> tuple[str, ...]:
    return tuple(str(f).strip().lower() for f in raw.get(key, []) if str(f).strip())


@lru_cache(maxsize=None)
def load_curated_names(path: Path = DEFAULT_PLACES_CONFIG.curated_names_path) -> CuratedNames:
    """Read the allowlist file once per path."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return CuratedNames(
        landmarks=_fragments(raw, "landmarks"),
        famous_venues=_fragments(raw, "famous_venues"),
        local_keywords=_fragments(raw, "local_keywords"),
    )
