from __future__ import annotations

from typing import Any


class StoreError(Exception):
    """Base class for every error raised by the world store."""


class BootstrapError(StoreError):
    """The seed database could not be written."""


class StoreLoadError(StoreError):
    """The backing file could not be read or decoded; no store was built."""


class DecodeError(StoreLoadError):
    pass


class MalformedDocumentError(DecodeError):
    pass


class AliasRejectedError(DecodeError):
    pass


class DisallowedTypeError(DecodeError):
    def __init__(self, tag: Any, index: int | None = None):
        self.tag = tag
        self.index = index
        where = f" in document {index}" if index is not None else ""
        if tag is None:
            msg = f"missing type tag{where}"
        else:
            msg = f"type {tag!r} is not permitted{where}"
        super().__init__(msg)
