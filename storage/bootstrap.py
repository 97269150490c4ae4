from __future__ import annotations

import contextlib
import logging
from pathlib import Path

from .errors import BootstrapError

logger = logging.getLogger(__name__)

# Seed world written on first run.
MINIMAL_DB = """\
---
type: Room
id: 0
name: Here
desc: This is home.
"""


def build_database(path: Path, *, log: logging.Logger | None = None) -> bool:
    """
    Make sure ``path`` exists, writing ``MINIMAL_DB`` to it if it does not.

    The parent directory must already exist. Returns True when the seed was
    written, False when the file was already there (its contents are not
    checked here).
    """
    log = log or logger
    if path.exists():
        return False

    log.info("WORLD BOOTSTRAP: building minimal world database %s", path)
    try:
        with path.open("w", encoding="utf-8") as f:
            f.write(MINIMAL_DB)
    except OSError as e:
        log.critical("WORLD BOOTSTRAP: unable to find or build database '%s'", path, exc_info=True)
        # a partial seed must never be picked up by the next start
        with contextlib.suppress(OSError):
            path.unlink(missing_ok=True)
        raise BootstrapError(f"unable to build database {path}: {e}") from e
    return True
