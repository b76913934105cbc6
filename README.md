# blockcaster

This package holds the game logic for a grid-based first-person game with a
built-in block editor. It provides the block map, the player camera and its
controls, per-frame actions, menu widgets and a small software framebuffer. It
does not open a window or draw a 3D view, so a display layer has to be put on
top of it.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Map files

A map is a plain text grid. Each row is a line of non-negative integers separated
by spaces. `0` is empty floor and positive values are blocks. Block `6` is TNT.
`blockcaster.gamemap.parse_row` parses one line and raises `MapFormatError`
(a `ValueError`) if the line holds any character other than ASCII digits and
spaces. `GameMap(rows, name=None)` checks that there is at least one row and
that all rows have the same length. It raises `MapFormatError` otherwise.

`GameMap.to_text` writes the grid back as space-separated lines with no final
newline. Only the first character of each cell value is written, so the format
expects single-digit blocks. `GameMap.save(path=None)` writes that text to
`path`, or to the map's `name` when no path is given.

## Modules

- `blockcaster.gamemap`: `GameMap`, `MapFormatError` and `parse_row`. Cells are
  read and written as `game_map[x, y]`. Float coordinates are truncated, and
  coordinates outside the grid raise `IndexError`. `width` and `height` give
  the grid size.
- `blockcaster.state`: `Vector`, `Keys`, `Player` and `GameState`.
  `GameState.create(game_map, position)` takes an `(x, y)` pair and sets up a
  fresh game. The camera looks along `(-1, 0)` with a plane of `(0, 0.66)`.
  A start position outside the map raises `ValueError`.
- `blockcaster.controls`: `key_press`, `key_release`, `mouse_press`,
  `mouse_release` and `mouse_move` turn raw key codes and mouse buttons into
  state changes. The key codes are `KEY_FORWARD` (122), `KEY_BACKWARD` (115),
  `KEY_TURN_LEFT` (113), `KEY_TURN_RIGHT` (100), `KEY_EDITOR_ON` (97),
  `KEY_EDITOR_OFF` (101) and `KEY_ESCAPE`. Escape sets `save_map` while
  `edit_menu` is on. Otherwise it raises `QuitRequested`.
- `blockcaster.actions`: `apply_actions(state)` applies one frame of held
  input. It walks, turns, cycles the inventory and switches the editor on or
  off. In the editor it keeps or breaks blocks. Outside the editor it aims TNT
  when the TNT slot is selected. The helpers can also be called on their own:
  `walk`, `rotate`, `rotate_view`, `break_wall`, `put_wall`, `aim_tnt`,
  `cycle_inventory` and `target_cell`. `update_editor` moves the editor's
  preview block to the empty cell in front of the camera. It is not called by
  `apply_actions`.
- `blockcaster.menu`: `Button` (with `update`, which reports a `ButtonEvent`),
  `RadioButton`, `select_radio`, `load_radio_buttons` and
  `layout_main_buttons` cover the title menu and the map chooser.
  `load_radio_buttons` reads a list file whose first line is a count and whose
  following lines are map names. A missing or empty file gives no buttons.
- `blockcaster.image`: `Image` is a framebuffer of packed 0xRRGGBB pixels with
  `get`, `set` and `clear`. The module also provides `blit_at`, `blit_scaled`,
  which skips negative (transparent) pixels, and `draw_cursor`, which inverts
  a 15-pixel cross at the centre.
- `blockcaster.color`: `Color` (with `to_int`), `create_rgb`, `int_to_rgb`
  and `negative_color`.
- `blockcaster.assets`: `read_texture_list` returns the count on the first
  line together with the listed file names. `texture_paths` joins those names
  onto a directory (`textures` by default). `button_image` names the up and
  down image files of a menu button.
- `blockcaster.textutil`: `atoi`, `itoa`, `split_words`, `trim`,
  `capitalize`, `factorial`, `int_sqrt`, `power` and `iter_lines`.

## Example

```python
from blockcaster.gamemap import GameMap, parse_row
from blockcaster.state import GameState
from blockcaster.controls import key_press, KEY_FORWARD
from blockcaster.actions import apply_actions

text = """1 1 1 1 1
1 0 0 0 1
1 0 0 0 1
1 0 0 0 1
1 1 1 1 1"""

game_map = GameMap([parse_row(line) for line in text.splitlines()], name="level.txt")
state = GameState.create(game_map, (2.5, 2.5))
key_press(state, KEY_FORWARD)
apply_actions(state)
print(state.player.position)   # Vector(x=2.42, y=2.5)
```

## What this package does not do

The package has no game loop, no window and no command to start a game. It does
not raycast or render the first-person view, floors, ceilings or the TNT
explosion. It also does not decode image files: `assets` only names the files
that a display layer would load.