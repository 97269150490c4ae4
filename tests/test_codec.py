from __future__ import annotations

import datetime

import pytest

from storage.codec import decode_document, decode_stream, encode_object
from storage.errors import (
    AliasRejectedError,
    DecodeError,
    DisallowedTypeError,
    MalformedDocumentError,
)
from storage.models import NPC, PERMITTED_TYPES, Command, Exit, Item, Player, Room


WORLD = """\
---
type: Room
id: 0
name: Here
exits: [3]
---
type: Player
id: 1
name: alice
location: 0
---
type: Exit
id: 3
name: north
to_room: 7
"""


def test_permitted_types_are_the_six_entity_kinds():
    assert PERMITTED_TYPES == {"Exit", "Room", "Player", "Item", "NPC", "Command"}


def test_decode_stream_yields_typed_objects_in_order():
    objs = decode_stream(WORLD.encode("utf-8"))

    assert [type(o) for o in objs] == [Room, Player, Exit]
    assert [o.id for o in objs] == [0, 1, 3]
    assert objs[0].exits == [3]
    assert objs[1].location == 0
    assert objs[2].to_room == 7


def test_every_permitted_type_decodes():
    text = "".join(f"---\ntype: {tag}\nid: {i}\n" for i, tag in enumerate(sorted(PERMITTED_TYPES)))
    objs = decode_stream(text)
    assert {type(o) for o in objs} == {Exit, Room, Player, Item, NPC, Command}


def test_empty_stream_and_empty_documents():
    assert decode_stream(b"") == []
    assert decode_stream("---\n---\ntype: Item\nid: 4\n---\n") == [Item(id=4)]


def test_unknown_type_fails_whole_decode():
    text = WORLD + "---\ntype: Unknown\nid: 9\n"
    with pytest.raises(DisallowedTypeError) as exc:
        decode_stream(text)
    assert exc.value.tag == "Unknown"
    assert exc.value.index == 3


def test_missing_type_is_disallowed():
    with pytest.raises(DisallowedTypeError, match="missing type tag"):
        decode_stream("---\nid: 1\nname: ghost\n")


def test_non_string_type_is_disallowed():
    with pytest.raises(DisallowedTypeError):
        decode_stream("---\ntype: [Room]\nid: 1\n")


def test_alias_is_rejected():
    text = "---\ntype: Room\nid: 1\nexits: &e [2, 3]\ncontents: *e\n"
    with pytest.raises(AliasRejectedError):
        decode_stream(text)


def test_alias_error_is_a_decode_error():
    with pytest.raises(DecodeError):
        decode_stream("---\ntype: Room\nid: &i 1\nowner: *i\n")


def test_syntax_error_is_malformed():
    with pytest.raises(MalformedDocumentError):
        decode_stream("---\ntype: Room\nid: [1\n")


def test_scalar_document_is_malformed():
    with pytest.raises(MalformedDocumentError, match="expected a mapping"):
        decode_stream("--- just a string\n")


def test_python_object_tag_is_malformed():
    with pytest.raises(MalformedDocumentError):
        decode_stream("--- !!python/object:storage.models.Room\nid: 1\n")


def test_invalid_utf8_is_malformed():
    with pytest.raises(MalformedDocumentError):
        decode_stream(b"---\ntype: Room\nid: 1\nname: \xff\xfe\xfa\n")


@pytest.mark.parametrize("bad_id", ["-1", "'7'", "true", "1.5"])
def test_bad_ids_are_malformed(bad_id):
    with pytest.raises(MalformedDocumentError):
        decode_stream(f"---\ntype: Item\nid: {bad_id}\n")


def test_missing_id_is_malformed():
    with pytest.raises(MalformedDocumentError):
        decode_stream("---\ntype: Item\nname: rock\n")


def test_unknown_fields_round_trip_untouched():
    text = "---\ntype: NPC\nid: 5\nname: orc\nhp: 12\nloot: {gold: 3}\nborn: 2006-01-19\n"
    (npc,) = decode_stream(text)

    doc = encode_object(npc)
    assert doc["hp"] == 12
    assert doc["loot"] == {"gold": 3}
    assert doc["born"] == datetime.date(2006, 1, 19)
    assert decode_document(doc) == npc


def test_encode_object_puts_type_first():
    doc = encode_object(Command(id=2, name="look", cmd="cmd_look"))
    assert list(doc)[0] == "type"
    assert doc["type"] == "Command"
    assert doc["cmd"] == "cmd_look"


def test_decode_document_checks_tag_before_fields():
    with pytest.raises(DisallowedTypeError):
        decode_document({"type": "Dragon"})


def test_deeply_nested_document_is_malformed():
    text = "---\ntype: Room\nid: 1\nx: " + "[" * 5000 + "]" * 5000 + "\n"
    with pytest.raises(MalformedDocumentError, match="nests too deeply"):
        decode_stream(text)


def test_fields_other_than_id_and_type_are_not_validated():
    text = "---\ntype: Room\nid: 1\nname: 42\ndesc: null\n---\ntype: Item\nid: 2\nowner: '7'\ncontents: [2.0]\n"
    room, item = decode_stream(text)

    assert room.name == 42
    assert room.desc is None
    assert item.owner == "7"
    assert item.contents == [2.0]
    assert isinstance(item.contents[0], float)
    assert encode_object(item) == {"type": "Item", "id": 2, "owner": "7", "contents": [2.0]}
