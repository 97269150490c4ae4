from __future__ import annotations

from typing import Iterator, Protocol

from .models import StoredObject


class ObjectStore(Protocol):
    """
    Keyed access to the loaded world. Absence is never an error:
    ``get`` returns None, ``check`` returns False, ``delete`` does nothing.
    """

    def put(self, obj: StoredObject) -> StoredObject:
        """Insert or replace the entry for ``obj.id``."""
        ...

    def delete(self, oid: int) -> None:
        ...

    def get(self, oid: int) -> StoredObject | None:
        ...

    def check(self, oid: int) -> bool:
        ...

    def each(self) -> Iterator[StoredObject]:
        ...

    def save(self) -> None:
        """Persist every current entry, replacing the backing file."""
        ...
