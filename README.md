# dungeonterm

Building blocks for a terminal client of a multi-user dungeon: a model of the
world as one player sees it, keyboard handling, rendering to a terminal with
`blessed`, and the requests a player's actions turn into.

## Controls

`dungeonterm.input.InputHandler` maps keys to events as follows.

| Key                     | Event                                                          |
|-------------------------|----------------------------------------------------------------|
| `h` `j` `k` `l`         | `Move` west, south, north, east                                |
| `y` `u` `b` `n`         | `Move` diagonally (NW, NE, SW, SE)                             |
| a move into a creature  | `Attack` instead, if the creature there has hit points above 0 |
| `,`                     | `Pickup` of an entity with a weight on the player's square     |
| `<` or `>`              | `Travel` through an entity with ends on the player's square    |
| `i`                     | inventory mode: `j`/`k` select, `d` gives `Drop`, `Esc` closes |
| `:`                     | command mode: type text, `Backspace` deletes, `Enter` gives `Say` |
| `Ctrl-C`                | `Quit`                                                         |

Keys other than `Ctrl-C` do nothing until the state contains the player's own
entity.

## Modules

- `dungeonterm.state`: `WorldEntity` (position, room, species, pending
  command, hit points, stair ends, weight), `Message` (a chat line) and
  `State`, with `self_entity()`, `inventory()` (entities whose room is the
  player) and `visible_entities()` (everything else).
- `dungeonterm.input`: `Key`, `InputMode`, the event classes `Quit`, `Move`,
  `Attack`, `Travel`, `Pickup`, `Drop` and `Say`, and `InputHandler`, whose
  `handle(state, key)` returns the events for one key press.
- `dungeonterm.render`: `Color` and `Glyph`; `wall_char(state, entity)` picks
  a box-drawing character from the walls beside an entity in the same room;
  `entity_glyph(state, entity)` gives an entity's glyph; `draw_order(state)`
  puts creatures above tiles and the player on top; `render(state, handler,
  rows)` gives every glyph of a frame: entities, the player's pending move
  arrow, a health bar of width `rows` on row 30, and at column 30 either the
  chat log or the inventory list, plus the `:` command line in command mode.
  `Terminal` is a context manager that puts the terminal in raw mode with a
  hidden cursor; it has `rows`, `read_key()` (returns `None` when no key is
  waiting) and `draw(glyphs)`.
- `dungeonterm.commands`: `PlayerCommand`, `PlayerMessage`, `ExitResult` and
  `translate(event, self_entity_id)`. `translate` returns `None` for `Quit`,
  a `PlayerCommand` for moves and targeted actions, and a `PlayerMessage` for
  `Say`, whose text is split at the first space into recipient species and
  message; a `Say` without a space raises `ValueError`.

## Example

```python
from dungeonterm.commands import translate
from dungeonterm.input import InputHandler, Quit
from dungeonterm.render import Terminal, render

def play(get_state, send):
    handler = InputHandler()
    with Terminal() as term:
        while True:
            state = get_state()
            key = term.read_key()
            if key is not None:
                for event in handler.handle(state, key):
                    if isinstance(event, Quit):
                        return
                    send(translate(event, state.self_entity_id))
            term.draw(render(state, handler, term.rows))
```

## What this package does not do

It does not talk to a game server: there is no login, no database access, no
polling of the world and no sending of commands or chat. It also installs no
command to start a game. A program using it supplies the `State` snapshots
and delivers the `PlayerCommand` and `PlayerMessage` values itself, as
`get_state` and `send` do in the example above.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.