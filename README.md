# solong

Tools for a small tile-based game in which a player collects every item on a
map and then reaches the exit: a map checker, an XPM image reader, X11 colour
names and the text helpers they are built on.

## Checking a map

Maps are plain text files with the `.ber` extension. Every line has the same
length and uses only these characters:

- `1` wall
- `0` floor
- `P` the player's start (exactly one)
- `E` the exit (exactly one)
- `C` a collectible (at least one)

The map must be fully enclosed by walls and contain no empty lines.

```
solong-check maps/level1.ber
```

The command prints `Map loaded:`, the rows of the map and its width and
height, then `Validating map...`. On success it prints
`Map validation successful!` and `Program finished successfully.` and exits
with status 0. On any problem (wrong number of arguments, a file name not
ending in `.ber`, an unreadable file, or a failed check) it writes `Error`
and the message to standard error and exits with status 1.

From Python:

```python
from solong.mapcheck import read_map, validate_map, MapError

try:
    game_map = read_map("maps/level1.ber")
    validate_map(game_map)
except MapError as err:
    print(err)
else:
    print(game_map.width, game_map.height, game_map.collectible_count)
```

`read_map` returns a `GameMap` holding the `rows` of the map, with `width`
and `height` properties; it raises `MapError` for an unreadable, empty or
non-rectangular file, or one with empty lines. `check_walls` and
`check_elements` can be run on their own; `check_elements` fills in
`player_count`, `exit_count` and `collectible_count`. `validate_map` runs
both.

## Reading XPM images

`solong.xpm` decodes XPM images:

- `read_xpm_file(path)`, `parse_xpm_text(text)` and `parse_xpm_lines(lines)`
  return an `XpmImage` with `width`, `height` and `pixels[y][x]`.
- `XpmImage.pixel(x, y)` gives one pixel value; `XpmImage.to_bytes(bytes_per_pixel, big_endian)`
  packs all pixels row by row.
- Pixels whose colour is `None` become `0xFF000000`.
- `text_to_rgb(name, suffix)` resolves `#rrggbb` values and colour names;
  `strip_comments(text)` blanks out `/* */` and `//` comments that lie
  outside quotes.
- Malformed or truncated data raises `XpmError`.

## Colours

- `solong.colors.lookup_color(name)` returns the `0xRRGGBB` value of an X11
  colour name, ignoring ASCII case; `"none"` gives -1 and an unknown name
  gives `None`.
- `solong.visual.rgb_shifts(red_mask, green_mask, blue_mask)` describes where
  each channel sits in a pixel, and `solong.visual.good_color(color, depth, shifts)`
  converts a 24-bit colour for a display of lower depth.

## Text helpers

- `solong.chars`: ASCII classification (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`) and case conversion (`to_lower`, `to_upper`).
- `solong.textops`: `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`,
  `strncmp`, `strnstr` and `atoi`, with C string semantics (text stops at the
  first NUL; searches return indices or `None`).
- `solong.transform`: `substr`, `strjoin`, `strtrim`, `split`, `itoa`,
  `strmapi` and `striteri`.
- `solong.wordtab`: `str_str`, the quote-aware `str_str_quoted`, and
  `str_to_wordtab` for splitting on spaces and tabs.

## What it does not do

There is no game here: no window, no drawing and no play. The map checker
does not check that the player can actually reach every collectible and the
exit; it checks only shape, walls and element counts.

## Running the tests

```
pip install -e ".[test]"
pytest
```