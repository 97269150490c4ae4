from __future__ import annotations

import logging

from dotenv import load_dotenv

from settings import Settings, get_settings
from storage import StoreFailed, YamlStore, open_store

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def create_store(settings: Settings | None = None) -> YamlStore:
    """
    Open the world store for this process.

    A store that fails to open stops the process here (``SystemExit(1)``);
    nothing past this point runs without a loaded world.
    """
    if settings is None:
        load_dotenv("local.env")
        settings = get_settings()
    configure_logging(settings.log_level)

    result = open_store(settings.world_db)
    if isinstance(result, StoreFailed):
        logger.critical("WORLD: unable to open %s, refusing to start: %s", settings.world_db, result.error)
        raise SystemExit(1)
    return result.store


def main() -> int:
    load_dotenv("local.env")
    settings = get_settings()
    store = create_store(settings)

    logger.info("WORLD: ready with %d objects (highest id = %s)", len(store), store.high_water_id)
    if settings.save_on_exit:
        store.save()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
