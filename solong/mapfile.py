"""Reading and validating game map files."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from pathlib import Path

from solong.lines import read_lines

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
ALLOWED_TILES = frozenset({WALL, FLOOR, PLAYER, EXIT, COLLECTIBLE})

_MARK = "x"
_BLOCKING = frozenset({WALL, EXIT})


class MapError(ValueError):
    """Raised when a map file is missing or not a valid game map."""


@dataclass(frozen=True)
class GameMap:
    """A map as read from file: its raw lines, newlines included.

    The width is the length of the first line less its newline; the
    height is the number of lines.
    """

    lines: tuple[str, ...]
    path: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))

    @property
    def height(self) -> int:
        return len(self.lines)

    @property
    def width(self) -> int:
        return len(self.lines[0]) - 1 if self.lines else 0

    @property
    def rows(self) -> tuple[str, ...]:
        """The lines cut to the map width."""
        return tuple(line[: self.width] for line in self.lines)

    def cell(self, row: int, col: int) -> str:
        """Return the tile at ``row``, ``col``; '' where a line is too short."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"cell ({row}, {col}) outside {self.width}x{self.height} map")
        line = self.lines[row]
        return line[col] if col < len(line) else ""

    def positions_of(self, tile: str) -> list[tuple[int, int]]:
        """Return the (row, col) positions holding ``tile``, row by row."""
        return [
            (row, col)
            for row in range(self.height)
            for col in range(self.width)
            if self.cell(row, col) == tile
        ]

    def find_player(self) -> tuple[int, int]:
        """Return the (row, col) of the player; the last one if several."""
        players = self.positions_of(PLAYER)
        if not players:
            raise MapError("map has no player")
        return players[-1]


def check_extension(path: str | Path) -> str:
    """Check that ``path`` names a ``.ber`` file and return it as text."""
    text = str(path)
    if not text.endswith(".ber"):
        raise MapError(f"map file must have a .ber extension: {text}")
    return text


def read_map(path: str | Path) -> GameMap:
    """Read the lines of the map file at ``path``."""
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            lines = tuple(read_lines(stream))
    except OSError as exc:
        raise MapError(f"cannot read map {path}: {exc}") from exc
    if not lines:
        raise MapError(f"map file is empty: {path}")
    return GameMap(lines, str(path))


def check_walls(game_map: GameMap) -> None:
    """Check that the map is closed by walls on all four sides."""
    if game_map.width < 1:
        raise MapError("map has no columns")
    last_col = game_map.width - 1
    last_row = game_map.height - 1
    for row in range(game_map.height):
        if game_map.cell(row, 0) != WALL or game_map.cell(row, last_col) != WALL:
            raise MapError(f"row {row} is not closed by walls")
    for col in range(game_map.width):
        if game_map.cell(0, col) != WALL or game_map.cell(last_row, col) != WALL:
            raise MapError(f"column {col} is not closed by walls")


def check_letters(game_map: GameMap) -> None:
    """Check that every tile is one of 0, 1, C, E and P."""
    for row in range(game_map.height):
        for col in range(game_map.width):
            tile = game_map.cell(row, col)
            if tile not in ALLOWED_TILES:
                raise MapError(f"unexpected tile {tile!r} at ({row}, {col})")


def check_map(game_map: GameMap) -> None:
    """Check the map is rectangular and holds one P, one E and some C."""
    last = game_map.height - 1
    for row, line in enumerate(game_map.lines):
        newline = 0 if row == last else 1
        if len(line) - newline != game_map.width:
            raise MapError(f"row {row} does not have the map width")
    collectibles = len(game_map.positions_of(COLLECTIBLE))
    players = len(game_map.positions_of(PLAYER))
    exits = len(game_map.positions_of(EXIT))
    if collectibles < 1:
        raise MapError("map has no collectible")
    if players != 1:
        raise MapError(f"map needs exactly one player, found {players}")
    if exits != 1:
        raise MapError(f"map needs exactly one exit, found {exits}")


def _neighbours(row: int, col: int) -> tuple[tuple[int, int], ...]:
    return ((row, col + 1), (row, col - 1), (row + 1, col), (row - 1, col))


def validate_path(game_map: GameMap) -> frozenset[tuple[int, int]]:
    """Check every collectible and the exit can be reached by the player.

    The player walks through anything but walls and the exit. Returns the
    set of positions the player can reach.
    """
    seeds = {game_map.find_player(), *game_map.positions_of(_MARK)}
    reachable = set(seeds)
    queue = deque(seeds)
    while queue:
        row, col = queue.popleft()
        for position in _neighbours(row, col):
            r, c = position
            if not (0 <= r < game_map.height and 0 <= c < game_map.width):
                continue
            if position in reachable or game_map.cell(r, c) in _BLOCKING:
                continue
            reachable.add(position)
            queue.append(position)
    for position in game_map.positions_of(COLLECTIBLE):
        if position not in reachable:
            raise MapError(f"collectible at {position} cannot be reached")
    for row, col in game_map.positions_of(EXIT):
        if not any(position in reachable for position in _neighbours(row, col)):
            raise MapError(f"exit at {(row, col)} cannot be reached")
    return frozenset(reachable)


def load_map(path: str | Path) -> GameMap:
    """Read the map at ``path`` and run every check on it."""
    check_extension(path)
    game_map = read_map(path)
    check_walls(game_map)
    check_letters(game_map)
    check_map(game_map)
    validate_path(game_map)
    return game_map