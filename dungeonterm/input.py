"""Keyboard handling: turns key presses into game events."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from dungeonterm.state import State

BACKSPACE = "backspace"
ENTER = "enter"
ESCAPE = "escape"

_MOVES = {
    "h": (-1, 0),
    "j": (0, 1),
    "k": (0, -1),
    "l": (1, 0),
    "y": (-1, -1),
    "u": (1, -1),
    "b": (-1, 1),
    "n": (1, 1),
}


class InputMode(enum.Enum):
    NORMAL = "normal"
    COMMAND = "command"
    INVENTORY = "inventory"


@dataclass(frozen=True)
class Key:
    """A key press: a single character or a named key such as ``enter``."""

    value: str
    ctrl: bool = False

    @property
    def char(self) -> str | None:
        return self.value if len(self.value) == 1 else None


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Move:
    dx: int
    dy: int


@dataclass(frozen=True)
class Attack:
    target: int


@dataclass(frozen=True)
class Travel:
    target: int


@dataclass(frozen=True)
class Pickup:
    target: int


@dataclass(frozen=True)
class Drop:
    target: int


@dataclass(frozen=True)
class Say:
    text: str


InputEvent = Quit | Move | Attack | Travel | Pickup | Drop | Say


@dataclass
class InputHandler:
    """Keeps the input mode, the command line and the inventory cursor."""

    mode: InputMode = InputMode.NORMAL
    command: str = ""
    selected: int = 0
    _dispatch: dict = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._dispatch = {
            InputMode.NORMAL: self._normal,
            InputMode.COMMAND: self._command,
            InputMode.INVENTORY: self._inventory,
        }

    def handle(self, state: State, key: Key) -> list[InputEvent]:
        """Process one key press and return the events it produces."""
        events: list[InputEvent] = []
        if key.ctrl and key.value == "c":
            events.append(Quit())
        me = state.self_entity()
        if me is None:
            return events
        return self._dispatch[self.mode](state, key, events)

    def _command(self, state, key, events):
        if key.value == BACKSPACE:
            self.command = self.command[:-1]
            return []
        if key.value == ENTER:
            said = [Say(self.command)]
            self.command = ""
            self.mode = InputMode.NORMAL
            return said
        if key.char is not None:
            self.command += key.char
        return []

    def _inventory(self, state, key, events):
        items = state.inventory()
        if key.value == ESCAPE:
            self.mode = InputMode.NORMAL
            self.selected = 0
        elif key.value == "j":
            if items:
                self.selected = (self.selected + 1) % len(items)
        elif key.value == "k":
            if items:
                self.selected = len(items) - 1 if self.selected == 0 else self.selected - 1
        elif key.value == "d":
            if items and self.selected < len(items):
                events.append(Drop(items[self.selected].entity_id))
                self.mode = InputMode.NORMAL
                self.selected = 0
        return events

    def _normal(self, state, key, events):
        me = state.self_entity()
        value = key.value
        if value == "i":
            self.mode = InputMode.INVENTORY
        elif value == ":":
            self.command = ""
            self.mode = InputMode.COMMAND
        elif value == ",":
            target = _find(state, lambda e: e.x == me.x and e.y == me.y and e.weight is not None)
            if target is not None:
                events.append(Pickup(target.entity_id))
        elif value in ("<", ">"):
            target = _find(state, lambda e: e.x == me.x and e.y == me.y and e.ends is not None)
            if target is not None:
                events.append(Travel(target.entity_id))
        elif value in _MOVES:
            dx, dy = _MOVES[value]
            target = _find(
                state,
                lambda e: e.x == me.x + dx
                and e.y == me.y + dy
                and e.hp is not None
                and e.hp > 0,
            )
            events.append(Attack(target.entity_id) if target is not None else Move(dx, dy))
        return events


def _find(state: State, predicate):
    return next((e for e in state.entities if predicate(e)), None)