from __future__ import annotations

import os
from dataclasses import dataclass

from storage import paths


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Backing file base name; ".yaml" is appended by the store
    world_db: str

    # Logging
    log_level: str

    # Write the world back out once it has loaded
    save_on_exit: bool


def get_settings() -> Settings:
    world_db = os.getenv("WORLD_DB", "").strip()
    if not world_db:
        world_db = str(paths.default_world_base())

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    save_on_exit = _env_bool("SAVE_ON_EXIT", False)

    return Settings(
        world_db=world_db,
        log_level=log_level,
        save_on_exit=save_on_exit,
    )
