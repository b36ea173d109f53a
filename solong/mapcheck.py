"""Loading and validating rectangular game maps stored in ``.ber`` files.

A map is made of rows of equal length using the characters ``0`` (floor),
``1`` (wall), ``P`` (player), ``E`` (exit) and ``C`` (collectible).
"""

from __future__ import annotations

import sys
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

__all__ = ["MapError", "GameMap", "read_map", "check_walls", "check_elements", "validate_map", "main"]

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
ALLOWED = frozenset({FLOOR, WALL, PLAYER, EXIT, COLLECTIBLE})


class MapError(Exception):
    """A map file cannot be read or does not describe a valid map."""


@dataclass
class GameMap:
    """A loaded map and the element counts found in it."""

    rows: List[str] = field(default_factory=list)
    player_count: int = 0
    exit_count: int = 0
    collectible_count: int = 0

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)


def read_map(path: Union[str, Path]) -> GameMap:
    """Read a map file, checking that it is non-empty and rectangular."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError("Could not open map file.") from exc
    lines = data.decode("latin-1").split("\n")
    if lines[-1] == "":
        lines.pop()
    width: Optional[int] = None
    for line in lines:
        if not line:
            raise MapError("Map contains empty lines.")
        if width is None:
            width = len(line)
        elif len(line) != width:
            raise MapError("Map is not rectangular.")
    if not lines:
        raise MapError("Map is empty or invalid dimensions.")
    return GameMap(rows=lines)


def check_walls(game_map: GameMap) -> None:
    """Require the map to be enclosed by walls on all four sides."""
    rows = game_map.rows
    if not rows:
        return
    if any(c != WALL for c in rows[0] + rows[-1]):
        raise MapError("Map is not surrounded by walls (top/bottom).")
    if any(row[0] != WALL or row[-1] != WALL for row in rows):
        raise MapError("Map is not surrounded by walls (left/right).")


def check_elements(game_map: GameMap) -> None:
    """Count the map's elements, requiring one player, one exit and at
    least one collectible, and no characters outside the allowed set."""
    counts: Counter = Counter()
    for row in game_map.rows:
        for char in row:
            if char not in ALLOWED:
                raise MapError("Map contains invalid characters. (Allowed: 0, 1, P, E, C)")
            counts[char] += 1
    game_map.player_count = counts[PLAYER]
    game_map.exit_count = counts[EXIT]
    game_map.collectible_count = counts[COLLECTIBLE]
    if game_map.player_count != 1:
        raise MapError("Map must contain exactly one player ('P').")
    if game_map.exit_count != 1:
        raise MapError("Map must contain exactly one exit ('E').")
    if game_map.collectible_count < 1:
        raise MapError("Map must contain at least one collectible ('C').")


def validate_map(game_map: GameMap) -> None:
    """Run every map check, raising :class:`MapError` at the first failure."""
    check_walls(game_map)
    check_elements(game_map)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load and validate the map named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 1:
            raise MapError("Usage: ./so_long <map_file.ber>")
        path = args[0]
        if not path.endswith(".ber"):
            raise MapError("Map file must have .ber extension.")
        game_map = read_map(path)
        print("Map loaded:")
        for row in game_map.rows:
            print(row)
        print(f"Width: {game_map.width}, Height: {game_map.height}")
        print("Validating map...")
        validate_map(game_map)
        print("Map validation successful!")
    except MapError as exc:
        sys.stdout.flush()
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    print("Program finished successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())