"""Snapshot of the world as seen by the logged-in player."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class WorldEntity:
    """One thing in the world: a creature, a tile, an item or a portal."""

    entity_id: int
    x: int
    y: int
    room_id: int
    species: str | None = None
    command_type: str | None = None
    command_x: int | None = None
    command_y: int | None = None
    hp: int | None = None
    maxhp: int | None = None
    ends: tuple[int, ...] | None = None
    weight: int | None = None


@dataclass(frozen=True)
class Message:
    """A chat line."""

    sender: str
    receiver: str
    message: str


@dataclass
class State:
    """Everything the client knows about the world at one moment."""

    entities: list[WorldEntity] = field(default_factory=list)
    self_entity_id: int | None = None
    chat: list[Message] = field(default_factory=list)

    def self_entity(self) -> WorldEntity | None:
        """The player's own entity, if it is present."""
        if self.self_entity_id is None:
            return None
        return next(
            (e for e in self.entities if e.entity_id == self.self_entity_id), None
        )

    def _carried(self, entity: WorldEntity) -> bool:
        return self.self_entity_id is not None and entity.room_id == self.self_entity_id

    def inventory(self) -> list[WorldEntity]:
        """Entities carried by the player (their room is the player)."""
        return [e for e in self.entities if self._carried(e)]

    def visible_entities(self) -> list[WorldEntity]:
        """Entities lying in the world rather than carried by the player."""
        return [e for e in self.entities if not self._carried(e)]