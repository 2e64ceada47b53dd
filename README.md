# solong

Tools for a small tile-map puzzle game: loading and validating `.ber`
maps, reading XPM images, and a handful of text and formatting helpers.
The package uses only the Python standard library.

## Maps

A map is a rectangular text file with the `.ber` extension. It uses these
characters:

| Character | Meaning     |
|-----------|-------------|
| `1`       | wall        |
| `0`       | empty floor |
| `C`       | collectible |
| `E`       | exit        |
| `P`       | player      |

`solong.maps.load_map(path)` reads a map and checks it. A map is accepted
when:

- the first and last rows are all walls;
- every other row has the width of the first row, starts and ends with a
  wall, and holds only the characters above;
- it has exactly one player, exactly one exit and at least one collectible;
- the player can reach every collectible and the exit without crossing a
  wall.

If any check fails, `load_map` raises `MapError`. The message of the error
is the text to show the user, for example `"Error:\nInvalid wall\n"`.

```python
from solong.maps import check_map_name, load_map, MapError

path = "maps/level.ber"
if not check_map_name(path):
    raise SystemExit("Error:\nWrong map name\n")
try:
    game_map = load_map(path)
except MapError as err:
    raise SystemExit(str(err))

print(game_map.width, game_map.height)
print(game_map.player, game_map.exit, game_map.collectibles)
print("".join(game_map.lines), end="")
```

A `GameMap` holds the raw `lines` (newlines included), the trimmed `rows`,
`width`, `height`, the `player` and `exit` positions as `(x, y)`, and the
number of `collectibles`. The checks are also available one at a time:
`check_walls`, `count_items`, `flood_fill` and `check_reachable`.

## Other modules

- `solong.xpm` reads XPM images: `load_xpm(path)`, `parse_xpm_text(text)`
  and `parse_xpm(lines)` return an `XpmImage` with `width`, `height` and
  `pixel(x, y)`. Malformed data raises `XpmError`. Transparent pixels
  (colour `None`) have the value `0xFF000000`.
- `solong.colors` looks up X11 colour names (`lookup_color`, `color_names`)
  and converts 0xRRGGBB colours for low-depth visuals (`good_color`).
- `solong.lines` reads text line by line through a fixed-size buffer
  (`LineReader`, `read_lines`).
- `solong.strings` and `solong.chars` provide string and character helpers
  such as `split`, `strtrim`, `substr`, `strncmp`, `atoi` and `itoa`.
- `solong.printf` formats text with the `c s p d i u x X %` conversions
  (`format_printf`, `printf`, `put_str`, `put_nbr` and others).
- `solong.linked` provides a singly linked list (`LinkedList`, `Node`).

## What it does not do

The package has no command-line program and opens no window. It does not
draw maps or run a game loop. It validates maps and reads images. Showing
them on screen is left to the calling code.

## Tests

```
pip install ".[test]"
pytest
```