"""
Decoding and encoding of the world document stream.

Each document in the stream is one YAML mapping describing a single object:

    ---
    type: Room
    id: 0
    name: Here

The ``type`` key selects the entity class and must be one of
``PERMITTED_TYPES``. Anything else, any alias, and any YAML tag outside the
safe schema aborts the whole decode.
"""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError

from yaml_stream import AliasError, iter_yaml_documents

from .errors import AliasRejectedError, DisallowedTypeError, MalformedDocumentError
from .models import PERMITTED_TYPES, StoredObject

_OBJECT_ADAPTER: TypeAdapter[StoredObject] = TypeAdapter(StoredObject)


def decode_document(doc: Any, *, index: int | None = None) -> StoredObject:
    if not isinstance(doc, dict):
        where = f"document {index}" if index is not None else "document"
        raise MalformedDocumentError(f"{where} is a {type(doc).__name__}, expected a mapping")

    tag = doc.get("type")
    if not isinstance(tag, str) or tag not in PERMITTED_TYPES:
        raise DisallowedTypeError(tag, index)

    try:
        return _OBJECT_ADAPTER.validate_python(doc)
    except ValidationError as e:
        raise MalformedDocumentError(f"invalid {tag} in document {index}: {e}") from e


def decode_stream(data: bytes | str) -> list[StoredObject]:
    """
    Decode every document in ``data``, in order.

    Fail-fast: the first bad document raises and nothing is returned.
    Empty documents are skipped.
    """
    objects: list[StoredObject] = []
    try:
        for index, doc in enumerate(iter_yaml_documents(data)):
            if doc is None:
                continue
            objects.append(decode_document(doc, index=index))
    except AliasError as e:
        raise AliasRejectedError(str(e)) from e
    except yaml.YAMLError as e:
        raise MalformedDocumentError(f"invalid YAML: {e}") from e
    except RecursionError as e:
        raise MalformedDocumentError("document nests too deeply to load") from e
    return objects


def encode_object(obj: StoredObject) -> dict[str, Any]:
    # type first so the file reads naturally
    return {"type": obj.type, **obj.model_dump()}
