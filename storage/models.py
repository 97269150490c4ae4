from __future__ import annotations

from typing import Annotated, Literal, Protocol, Union

from pydantic import BaseModel, ConfigDict, Field


class Identified(Protocol):
    """Anything the store can key: it only needs an integer ``id``."""

    id: int


class StoredBase(BaseModel):
    """
    Common shape of every stored entity.

    Only ``id`` and ``type`` are interpreted by the store. Every other key is
    kept as an extra field, readable as an attribute (``room.exits``), and
    written back exactly as it was loaded.
    """

    model_config = ConfigDict(extra="allow")

    id: int = Field(ge=0, strict=True)


class Exit(StoredBase):
    type: Literal["Exit"] = "Exit"


class Room(StoredBase):
    type: Literal["Room"] = "Room"


class Player(StoredBase):
    type: Literal["Player"] = "Player"


class Item(StoredBase):
    type: Literal["Item"] = "Item"


class NPC(StoredBase):
    type: Literal["NPC"] = "NPC"


class Command(StoredBase):
    type: Literal["Command"] = "Command"


StoredObject = Annotated[
    Union[Exit, Room, Player, Item, NPC, Command],
    Field(discriminator="type"),
]

ENTITY_TYPES: tuple[type[StoredBase], ...] = (Exit, Room, Player, Item, NPC, Command)

# Type tags the decoder is allowed to instantiate.
PERMITTED_TYPES: frozenset[str] = frozenset(cls.__name__ for cls in ENTITY_TYPES)
