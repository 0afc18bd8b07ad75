"""Rendering of the game state to glyphs and to the terminal."""

from __future__ import annotations

import contextlib
import enum
import sys
from dataclasses import dataclass

import blessed

from dungeonterm.input import BACKSPACE, ENTER, ESCAPE, InputHandler, InputMode, Key
from dungeonterm.state import State, WorldEntity

HEALTH_BAR_ROW = 30
PANEL_COLUMN = 30

_WALL_CHARS = {
    (True, True, True, True): "╬",
    (True, True, True, False): "╠",
    (True, True, False, True): "╩",
    (True, False, True, True): "╣",
    (False, True, True, True): "╦",
    (True, True, False, False): "╚",
    (True, False, True, False): "║",
    (True, False, False, True): "╝",
    (False, True, True, False): "╔",
    (False, True, False, True): "═",
    (False, False, True, True): "╗",
    (True, False, False, False): "║",
    (False, True, False, False): "═",
    (False, False, True, False): "║",
    (False, False, False, True): "═",
    (False, False, False, False): "■",
}

_SPECIES_CHARS = {
    "human": "@",
    "door": "║",
    "snake": "s",
    "floor": "+",
    "upstair": "<",
    "gold": "$",
}

_ARROWS = {
    (1, 0): "→",
    (0, 1): "↓",
    (-1, 0): "←",
    (0, -1): "↑",
    (-1, -1): "↖",
    (1, -1): "↗",
    (1, 1): "↘",
    (-1, 1): "↙",
}


class Color(enum.Enum):
    WHITE = "white"
    RED = "red"
    CYAN = "cyan"
    GREEN = "green"
    YELLOW = "yellow"


@dataclass(frozen=True)
class Glyph:
    """Text to print at a screen position in a colour."""

    x: int
    y: int
    text: str
    color: Color = Color.WHITE


def wall_char(state: State, entity: WorldEntity) -> str:
    """Box-drawing character joining a wall to its neighbours in the same room."""

    def wall_at(dx: int, dy: int) -> bool:
        return any(
            e.x == entity.x + dx
            and e.y == entity.y + dy
            and e.species == "wall"
            and e.room_id == entity.room_id
            for e in state.entities
        )

    return _WALL_CHARS[(wall_at(0, -1), wall_at(1, 0), wall_at(0, 1), wall_at(-1, 0))]


def _is_dead(entity: WorldEntity) -> bool:
    return entity.hp is not None and entity.hp <= 0


def entity_glyph(state: State, entity: WorldEntity) -> Glyph | None:
    """The glyph for an entity, or None if it has no species or lies off screen."""
    if entity.species is None or entity.x < 0 or entity.y < 0:
        return None
    if _is_dead(entity):
        color = Color.RED
    elif entity.entity_id == state.self_entity_id:
        color = Color.CYAN
    elif entity.species == "snake":
        color = Color.GREEN
    elif entity.species == "gold":
        color = Color.YELLOW
    else:
        color = Color.WHITE
    if _is_dead(entity):
        text = "%"
    elif entity.species == "wall":
        text = wall_char(state, entity)
    else:
        text = _SPECIES_CHARS.get(entity.species, "?")
    return Glyph(entity.x, entity.y, text, color)


def draw_order(state: State) -> list[WorldEntity]:
    """Visible entities, with creatures above tiles and the player on top."""
    return sorted(
        state.visible_entities(),
        key=lambda e: (e.entity_id == state.self_entity_id, e.maxhp is not None),
    )


def _health_fraction(hp: int, maxhp: int) -> float:
    if maxhp:
        return hp / maxhp
    return float("inf") if hp > 0 else float("nan")


def _player_overlay(entity: WorldEntity, rows: int) -> list[Glyph]:
    glyphs = []
    cx, cy = entity.command_x, entity.command_y
    if cx is not None and cy is not None and entity.command_type == "move":
        x, y = entity.x + cx, entity.y + cy
        if x >= 0 and y >= 0:
            glyphs.append(Glyph(x, y, _ARROWS.get((cx, cy), "?"), Color.CYAN))
    if entity.hp is not None and entity.maxhp is not None:
        fraction = _health_fraction(entity.hp, entity.maxhp)
        glyphs.extend(
            Glyph(x, HEALTH_BAR_ROW, "=" if fraction > x / rows else "-")
            for x in range(rows)
        )
    return glyphs


def _chat(state: State) -> list[Glyph]:
    glyphs = []
    for row, msg in enumerate(state.chat):
        prefix = f"{msg.sender}: "
        glyphs.append(Glyph(PANEL_COLUMN, row, prefix, Color.RED))
        glyphs.append(Glyph(PANEL_COLUMN + len(prefix), row, msg.message, Color.WHITE))
    return glyphs


def _inventory(state: State, selected: int) -> list[Glyph]:
    glyphs = [Glyph(PANEL_COLUMN, 0, "Inventory")]
    for i, item in enumerate(state.inventory()):
        chosen = i == selected
        if chosen or item.species == "gold":
            color = Color.YELLOW
        else:
            color = Color.WHITE
        text = ("> " if chosen else "  ") + (item.species or "")
        glyphs.append(Glyph(PANEL_COLUMN + 2, i + 1, text, color))
    return glyphs


def render(state: State, handler: InputHandler, rows: int) -> list[Glyph]:
    """All glyphs of one frame, in drawing order."""
    glyphs: list[Glyph] = []
    for entity in draw_order(state):
        glyph = entity_glyph(state, entity)
        if glyph is not None:
            glyphs.append(glyph)
        if entity.entity_id == state.self_entity_id:
            glyphs.extend(_player_overlay(entity, rows))
    if handler.mode is InputMode.INVENTORY:
        glyphs.extend(_inventory(state, handler.selected))
    else:
        glyphs.extend(_chat(state))
        if handler.mode is InputMode.COMMAND:
            glyphs.append(Glyph(0, 0, f":{handler.command}"))
    return glyphs


_NAMED_KEYS = {
    "KEY_BACKSPACE": BACKSPACE,
    "KEY_DELETE": BACKSPACE,
    "KEY_ENTER": ENTER,
    "KEY_ESCAPE": ESCAPE,
}

_SYNC_BEGIN = "\x1b[?2026h"
_SYNC_END = "\x1b[?2026l"


class Terminal:
    """The player's terminal in raw mode with a hidden cursor."""

    def __init__(self, stream=None) -> None:
        self._term = blessed.Terminal()
        self._stream = stream if stream is not None else sys.stdout
        self._stack = contextlib.ExitStack()

    @property
    def rows(self) -> int:
        return self._term.height

    def __enter__(self) -> Terminal:
        self._stack.enter_context(self._term.raw())
        self._stack.enter_context(self._term.hidden_cursor())
        self._stream.write(self._term.white)
        self._stream.flush()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stream.write(self._term.normal)
        self._stream.flush()
        self._stack.close()

    def read_key(self) -> Key | None:
        """The next pending key press, or None if none is waiting."""
        keystroke = self._term.inkey(timeout=0)
        if not keystroke:
            return None
        if keystroke.is_sequence:
            name = keystroke.name or ""
            return Key(_NAMED_KEYS.get(name, name.lower()))
        text = str(keystroke)
        if text in ("\r", "\n"):
            return Key(ENTER)
        if text in ("\x7f", "\x08"):
            return Key(BACKSPACE)
        if text == "\x1b":
            return Key(ESCAPE)
        code = ord(text[0])
        if 1 <= code <= 26:
            return Key(chr(code + ord("a") - 1), ctrl=True)
        return Key(text)

    def draw(self, glyphs) -> None:
        """Clear the screen and print the glyphs as one update."""
        term = self._term
        parts = [_SYNC_BEGIN, term.clear]
        for glyph in glyphs:
            parts.append(term.move_xy(glyph.x, glyph.y))
            parts.append(getattr(term, glyph.color.value))
            parts.append(glyph.text)
        parts.append(_SYNC_END)
        self._stream.write("".join(parts))
        self._stream.flush()