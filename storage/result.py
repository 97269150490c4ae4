from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Union

from .errors import StoreError

if TYPE_CHECKING:
    from .yaml_store import YamlStore


@dataclass(frozen=True)
class StoreOpened:
    store: YamlStore
    ok: Literal[True] = True

    def unwrap(self) -> YamlStore:
        return self.store


@dataclass(frozen=True)
class StoreFailed:
    """Construction failed; ``error`` carries the cause and no store exists."""

    error: StoreError
    ok: Literal[False] = False

    def unwrap(self) -> YamlStore:
        raise self.error


OpenResult = Union[StoreOpened, StoreFailed]
