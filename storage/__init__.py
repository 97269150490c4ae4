from __future__ import annotations

from .bootstrap import MINIMAL_DB, build_database
from .codec import decode_stream, encode_object
from .errors import (
    AliasRejectedError,
    BootstrapError,
    DecodeError,
    DisallowedTypeError,
    MalformedDocumentError,
    StoreError,
    StoreLoadError,
)
from .interfaces import ObjectStore
from .models import NPC, PERMITTED_TYPES, Command, Exit, Identified, Item, Player, Room, StoredObject
from .result import OpenResult, StoreFailed, StoreOpened
from .yaml_store import YamlStore, open_store

__all__ = [
    "MINIMAL_DB",
    "build_database",
    "decode_stream",
    "encode_object",
    "StoreError",
    "BootstrapError",
    "StoreLoadError",
    "DecodeError",
    "MalformedDocumentError",
    "AliasRejectedError",
    "DisallowedTypeError",
    "ObjectStore",
    "Identified",
    "StoredObject",
    "PERMITTED_TYPES",
    "Exit",
    "Room",
    "Player",
    "Item",
    "NPC",
    "Command",
    "OpenResult",
    "StoreOpened",
    "StoreFailed",
    "YamlStore",
    "open_store",
]
