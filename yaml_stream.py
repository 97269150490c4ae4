from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Iterator

import yaml
from yaml.composer import ComposerError


class AliasError(ComposerError):
    """Raised when a document uses an alias (``*ref``) while aliases are disabled."""


class NoAliasSafeLoader(yaml.SafeLoader):
    """
    Safe loader that refuses to compose alias nodes.

    Anchors on their own are harmless; the first alias that would reuse an
    anchored node (including ``<<: *ref`` merge keys) aborts the load.
    """

    def compose_node(self, parent, index):
        if self.check_event(yaml.AliasEvent):
            event = self.peek_event()
            raise AliasError(
                None,
                None,
                f"found alias *{event.anchor}, but aliases are disabled",
                event.start_mark,
            )
        return super().compose_node(parent, index)


class NoAliasSafeDumper(yaml.SafeDumper):
    """Safe dumper that writes shared objects out in full instead of as anchors."""

    def ignore_aliases(self, data: Any) -> bool:
        return True


def iter_yaml_documents(data: bytes | str) -> Iterator[Any]:
    """
    Lazily yield each document of a YAML stream.

    Parse errors surface as ``yaml.YAMLError`` at the document they occur in.
    """
    return yaml.load_all(data, Loader=NoAliasSafeLoader)


def dump_yaml_document(payload: Any, stream) -> None:
    stream.write("---\n")
    yaml.dump(
        payload,
        stream,
        Dumper=NoAliasSafeDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def atomic_write_yaml_stream(path: Path, documents: Iterable[Any]) -> int:
    """
    Write a YAML document stream to a temp file then replace ``path``.

    Documents are serialized one at a time, so ``documents`` may be a generator.
    On any failure the temp file is removed and ``path`` is left untouched.
    Returns the number of documents written.
    """
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    count = 0
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            for doc in documents:
                dump_yaml_document(doc, f)
                count += 1
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    return count
