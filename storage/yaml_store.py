from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import yaml

from yaml_stream import atomic_write_yaml_stream

from .bootstrap import build_database
from .codec import decode_stream, encode_object
from .errors import StoreError, StoreLoadError
from .interfaces import ObjectStore
from .models import StoredObject
from .paths import database_path
from .result import OpenResult, StoreFailed, StoreOpened

logger = logging.getLogger(__name__)


class YamlStore(ObjectStore):
    """
    In-memory world database backed by a single YAML document stream.

    - ``<base>.yaml`` is created with a seed world if missing, then loaded in full.
    - Construction either loads every document or raises; there is no partial store.
    - ``high_water_id`` is the highest id seen at load time. ``put`` does not
      move it; ``allocate_id`` does.
    - ``save`` streams one document per object to a temp file and replaces the
      backing file, so an interrupted save leaves the previous file intact.
    """

    def __init__(self, base: str | Path, *, log: logging.Logger | None = None):
        self._log = log or logger
        self._path = database_path(base)
        self._db: dict[int, StoredObject] = {}
        self._high_water_id: int | None = None

        build_database(self._path, log=self._log)

        self._log.info("WORLD LOAD: loading world from %s", self._path)
        try:
            raw = self._path.read_bytes()
        except OSError as e:
            self._log.critical("WORLD LOAD: unable to read %s", self._path, exc_info=True)
            raise StoreLoadError(f"unable to read {self._path}: {e}") from e

        try:
            objects = decode_stream(raw)
        except StoreLoadError:
            self._log.critical("WORLD LOAD: error loading database %s", self._path, exc_info=True)
            raise

        for obj in objects:
            if self._high_water_id is None or obj.id > self._high_water_id:
                self._high_water_id = obj.id
            self._db[obj.id] = obj

        self._log.info(
            "WORLD LOAD: database '%s' loaded...%d objects, highest id = %s.",
            self._path,
            len(self._db),
            self._high_water_id,
        )

    @property
    def path(self) -> Path:
        return self._path

    @property
    def high_water_id(self) -> int | None:
        return self._high_water_id

    def allocate_id(self) -> int:
        """Return a fresh id above the high-water mark and advance the mark to it."""
        oid = 0 if self._high_water_id is None else self._high_water_id + 1
        while oid in self._db:
            oid += 1
        self._high_water_id = oid
        return oid

    def put(self, obj: StoredObject) -> StoredObject:
        self._db[obj.id] = obj
        return obj

    def delete(self, oid: int) -> None:
        self._db.pop(oid, None)

    def get(self, oid: int) -> StoredObject | None:
        return self._db.get(oid)

    def check(self, oid: int) -> bool:
        return oid in self._db

    def each(self) -> Iterator[StoredObject]:
        return iter(list(self._db.values()))

    def __len__(self) -> int:
        return len(self._db)

    def __contains__(self, oid: object) -> bool:
        return oid in self._db

    def save(self) -> None:
        try:
            count = atomic_write_yaml_stream(
                self._path, (encode_object(obj) for obj in self._db.values())
            )
        except (OSError, yaml.YAMLError):
            self._log.error("WORLD SAVE: failed to write %s", self._path, exc_info=True)
            raise
        self._log.info("WORLD SAVE: wrote %d objects to %s", count, self._path)


def open_store(base: str | Path, *, log: logging.Logger | None = None) -> OpenResult:
    """
    Build a ``YamlStore`` and report the outcome instead of raising.

    Store errors (bootstrap, read, decode) come back as ``StoreFailed``;
    anything else propagates.
    """
    try:
        return StoreOpened(YamlStore(base, log=log))
    except StoreError as e:
        return StoreFailed(e)
