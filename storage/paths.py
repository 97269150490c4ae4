from __future__ import annotations

from pathlib import Path

DB_SUFFIX = ".yaml"


def default_world_base() -> Path:
    """``<project>/data/world``, creating ``data/`` so the seed file can be written there."""
    # storage/paths.py -> storage -> project root
    data = Path(__file__).resolve().parents[1] / "data"
    data.mkdir(parents=True, exist_ok=True)
    return data / "world"


def database_path(base: str | Path) -> Path:
    """``world`` -> ``world.yaml``; the suffix is always appended, never replaced."""
    return Path(f"{base}{DB_SUFFIX}")
