"""Loading and validating so_long maps."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

WALL = "1"
EMPTY = "0"
COLLECTIBLE = "C"
PLAYER = "P"
EXIT = "E"

ALLOWED_CHARS = frozenset({WALL, EMPTY, COLLECTIBLE, PLAYER, EXIT, "\n"})

EMPTY_MESSAGE = "Error: the map is empty."
NOT_VALID_MESSAGE = "Error: the map is not valid."
WALLS_MESSAGE = "Error: the map is not surrounded by walls."
PATH_MESSAGE = "Error: the map doesn't have a valid path."
RECTANGLE_MESSAGE = "Error: the map is not rectangular."


class MapError(ValueError):
    """Raised when a map file does not describe a playable map."""


def line_width(line: str) -> int:
    """Return the length of ``line`` without its trailing newline."""
    return len(line) - 1 if line.endswith("\n") else len(line)


def _body(line: str) -> str:
    """Return the part of ``line`` before its first newline."""
    return line.split("\n", 1)[0]


@dataclass
class GameMap:
    """A rectangular grid of map tiles, indexed as ``map[x, y]``."""

    grid: List[List[str]] = field(default_factory=list)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "GameMap":
        """Build a map from text lines, with or without trailing newlines."""
        return cls([list(_body(line)) for line in lines])

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def lines(self) -> List[str]:
        """The rows of the map as strings."""
        return ["".join(row) for row in self.grid]

    def __getitem__(self, pos: Tuple[int, int]) -> str:
        x, y = pos
        return self.grid[y][x]

    def __setitem__(self, pos: Tuple[int, int], tile: str) -> None:
        x, y = pos
        self.grid[y][x] = tile

    def __iter__(self) -> Iterator[Tuple[int, int, str]]:
        """Yield ``(x, y, tile)`` for every cell, row by row."""
        for y, row in enumerate(self.grid):
            for x, tile in enumerate(row):
                yield x, y, tile

    def find(self, char: str) -> Optional[Tuple[int, int]]:
        """Return the ``(x, y)`` of the first ``char`` in reading order, or None."""
        for x, y, tile in self:
            if tile == char:
                return x, y
        return None

    def count(self, char: str) -> int:
        """Return how many cells hold ``char``."""
        return sum(row.count(char) for row in self.grid)

    def copy(self) -> "GameMap":
        """Return an independent copy of the map."""
        return GameMap([list(row) for row in self.grid])


def check_not_empty(lines: Sequence[str]) -> None:
    """Reject a map with no lines at all."""
    if not lines:
        raise MapError(EMPTY_MESSAGE)


def check_composition(lines: Sequence[str]) -> None:
    """Reject a map holding any character other than 1, 0, C, P, E or newline."""
    for line in lines:
        if any(ch not in ALLOWED_CHARS for ch in line):
            raise MapError(NOT_VALID_MESSAGE)


def check_counts(lines: Sequence[str]) -> None:
    """Require exactly one exit, exactly one player and at least one collectible."""
    text = "".join(lines)
    exits = text.count(EXIT)
    players = text.count(PLAYER)
    collectibles = text.count(COLLECTIBLE)
    if exits != 1 or players != 1 or collectibles < 1:
        raise MapError(NOT_VALID_MESSAGE)


def check_walls(lines: Sequence[str]) -> None:
    """Require the map to be closed by walls.

    The first row must be walls up to its newline, every middle row must start
    and end with a wall, and the last line must consist of walls only, so a
    newline after it is rejected.
    """
    if len(lines) < 2:
        raise MapError(WALLS_MESSAGE)
    if any(ch != WALL for ch in _body(lines[0])):
        raise MapError(WALLS_MESSAGE)
    for line in lines[1:-1]:
        body = _body(line)
        if not body or body[0] != WALL or body[-1] != WALL:
            raise MapError(WALLS_MESSAGE)
    if any(ch != WALL for ch in lines[-1]):
        raise MapError(WALLS_MESSAGE)


def check_valid_path(lines: Sequence[str]) -> None:
    """Require the exit to be reachable from the player.

    Only the exit is searched for; collectibles need not be reachable. The
    search area is as wide as the last line and as tall as the map.
    """
    grid = [_body(line) for line in lines]
    width = line_width(lines[-1]) if lines else 0
    height = len(grid)
    start = GameMap.from_lines(lines).find(PLAYER)
    if start is None:
        raise MapError(PATH_MESSAGE)
    seen = set()
    stack = [start]
    while stack:
        x, y = stack.pop()
        if not (0 <= x < width and 0 <= y < height) or (x, y) in seen:
            continue
        row = grid[y]
        if x >= len(row) or row[x] == WALL:
            continue
        if row[x] == EXIT:
            return
        seen.add((x, y))
        stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
    raise MapError(PATH_MESSAGE)


def check_rectangular(lines: Sequence[str]) -> None:
    """Require every row to be as wide as the first one."""
    if not lines:
        return
    width = len(_body(lines[0]))
    for line in lines:
        if len(_body(line)) != width:
            raise MapError(RECTANGLE_MESSAGE)


def _split_lines(text: str) -> List[str]:
    """Split text into lines that keep their trailing newline."""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def parse_map(text: str) -> GameMap:
    """Validate map text and return the map it describes.

    The checks run in a fixed order and the first failure raises MapError.
    """
    lines = _split_lines(text)
    check_not_empty(lines)
    check_composition(lines)
    check_counts(lines)
    check_walls(lines)
    check_valid_path(lines)
    check_rectangular(lines)
    return GameMap.from_lines(lines)


def load_map(path: Union[str, "PathLike[str]"]) -> GameMap:
    """Read and validate the map file at ``path``."""
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    return parse_map(text)