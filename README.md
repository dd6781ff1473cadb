# solong

Map handling for a small top-down puzzle game. The player crosses a map of
open space, walls and stars, collects every star and then reaches the exit.
This package reads such maps, checks that they are playable and gives you the
grid to work with. It also ships a few small text, list and formatting helpers
under `solong.libft`.

## Installing

```
pip install .
```

The package has no runtime dependencies.

## Map files

A map is plain text, one row per line, made of these characters:

| Char | Meaning     |
|------|-------------|
| `1`  | wall        |
| `0`  | empty space |
| `C`  | star        |
| `P`  | player      |
| `E`  | exit        |

`solong.gamemap.parse_map(text)` runs these checks in order and raises
`MapError` (a `ValueError`) with the message of the first one that fails:

1. the map is not empty — `Error: the map is empty.`
2. it uses no other characters — `Error: the map is not valid.`
3. it has exactly one `P`, exactly one `E` and at least one `C` —
   `Error: the map is not valid.`
4. it is enclosed by walls: the first row is all walls, every middle row
   starts and ends with a wall, and the last line is walls only (so the file
   must not end with a newline) — `Error: the map is not surrounded by walls.`
5. the exit can be reached from the player — `Error: the map doesn't have a valid path.`
6. every row is as wide as the first — `Error: the map is not rectangular.`

Example of a valid map:

```
1111111
1P0C0E1
1111111
```

## Using it

```python
from solong.gamemap import MapError, load_map, parse_map

try:
    game_map = parse_map("1111111\n1P0C0E1\n1111111")
except MapError as err:
    print(err)
else:
    print(game_map.width, game_map.height)   # 7 3
    print(game_map.find("P"))                # (1, 1)
    print(game_map.count("C"))               # 1
    print(game_map[5, 1])                    # E
```

`load_map(path)` does the same for a file. A `GameMap` can also be built with
`GameMap.from_lines(lines)`; it supports `map[x, y]` reading and writing,
iteration over `(x, y, tile)`, `find`, `count`, `copy`, and the `width`,
`height` and `lines` properties. Each check is also available on its own
(`check_not_empty`, `check_composition`, `check_counts`, `check_walls`,
`check_valid_path`, `check_rectangular`), taking the map as a list of lines.

## Helpers

- `solong.libft.chars` — `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`, `atoi` (C-style, 32-bit wrapping) and
  `itoa`.
- `solong.libft.text` — `strlen`, `strdup`, `strjoin`, `strchr`, `strrchr`,
  `strncmp`, `strnstr`, `substr`, `strtrim`, `split`, `strlcpy`, `strlcat`,
  `strmapi`, `striteri`. Searches return an index or `None`.
- `solong.libft.linked` — a `Node` singly linked list with `lstnew`,
  `lstadd_front`, `lstadd_back`, `lstsize`, `lstlast`, `lstiter`,
  `lstdelone` and `lstclear`; the adding functions return the new head.
- `solong.libft.printf` — `sformat(fmt, *args)` and `printf(fmt, *args)`
  supporting `%c %s %p %d %i %u %x %X %%`, plus the single-value
  `format_dec`, `format_unsigned`, `format_hex`, `format_pointer` and
  `format_str`.

## What this package does not do

It does not play the game. There is no window, no drawing, no keyboard
handling, no player movement or move counter, and no command to start a
level. It stops at loading and validating maps.

## Tests

```
pip install .[test]
pytest
```