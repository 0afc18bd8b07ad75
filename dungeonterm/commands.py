"""Requests the client sends to the game server, built from input events."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from dungeonterm.input import Attack, Drop, Move, Pickup, Quit, Say, Travel


@dataclass(frozen=True)
class PlayerCommand:
    """An order for the player's entity, queued on the server."""

    entity_id: int
    command_type: str
    x: int | None = None
    y: int | None = None
    command_target: int | None = None


@dataclass(frozen=True)
class PlayerMessage:
    """A chat line spoken by the player to every creature of a species."""

    speaker: int
    recipient_species: str
    message: str


class ExitResult(enum.Enum):
    """Why the server connection ended on its own."""

    LOGIN_FAILED = "login_failed"


_TARGETED = {
    Attack: "attack",
    Pickup: "pickup",
    Travel: "travel",
    Drop: "drop",
}


def translate(event, self_entity_id: int) -> PlayerCommand | PlayerMessage | None:
    """Turn an input event into the request it asks for.

    Returns None for a quit event, which is handled by the client itself.
    Raises ValueError if a chat line has no space between recipient and text.
    """
    if isinstance(event, Quit):
        return None
    if isinstance(event, Move):
        return PlayerCommand(self_entity_id, "move", x=event.dx, y=event.dy)
    if isinstance(event, Say):
        recipient, sep, message = event.text.partition(" ")
        if not sep:
            raise ValueError(
                f"chat line {event.text!r} needs a recipient and a message"
            )
        return PlayerMessage(self_entity_id, recipient, message)
    command_type = _TARGETED.get(type(event))
    if command_type is None:
        raise TypeError(f"unknown input event: {event!r}")
    return PlayerCommand(self_entity_id, command_type, command_target=event.target)