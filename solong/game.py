"""Game state: the player, the collectibles and the rules for moving."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import IO

from solong.mapfile import COLLECTIBLE, EXIT, WALL, GameMap
from solong.printf import printf


class Key(IntEnum):
    """Key codes the game reacts to."""

    A = 0
    S = 1
    D = 2
    W = 13
    ESC = 53


class Direction(Enum):
    """A step on the map as (row delta, column delta)."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]


class MoveOutcome(Enum):
    """What became of a key press or a move."""

    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"
    QUIT = "quit"


_KEY_DIRECTIONS = {
    Key.W: Direction.UP,
    Key.A: Direction.LEFT,
    Key.S: Direction.DOWN,
    Key.D: Direction.RIGHT,
}


@dataclass
class Collectibles:
    """The collectibles of a map and which of them were picked up."""

    positions: tuple[tuple[int, int], ...]
    collected: set[tuple[int, int]] = field(default_factory=set)

    @staticmethod
    def from_map(game_map: GameMap) -> Collectibles:
        """Collect the positions of every collectible on ``game_map``."""
        return Collectibles(tuple(game_map.positions_of(COLLECTIBLE)))

    @property
    def total(self) -> int:
        return len(self.positions)

    @property
    def count(self) -> int:
        return len(self.collected)

    def collect_at(self, row: int, col: int) -> bool:
        """Pick up the collectible at ``row``, ``col`` if one is still there."""
        position = (row, col)
        if position in self.positions and position not in self.collected:
            self.collected.add(position)
            return True
        return False

    def remaining(self) -> list[tuple[int, int]]:
        """Positions of the collectibles not yet picked up, in map order."""
        return [pos for pos in self.positions if pos not in self.collected]

    def all_collected(self) -> bool:
        return len(self.collected) == len(self.positions)


@dataclass
class Game:
    """A game in progress on a validated map."""

    game_map: GameMap
    player: tuple[int, int]
    collectibles: Collectibles
    moves: int = 0
    facing: Direction | None = None
    finished: bool = False
    log: IO[str] | None = None

    @staticmethod
    def from_map(game_map: GameMap) -> Game:
        """Start a game with the player on its starting tile."""
        return Game(game_map, game_map.find_player(), Collectibles.from_map(game_map))

    def _step(self, target: tuple[int, int]) -> None:
        self.moves += 1
        if self.log is not None:
            printf("%d\n", self.moves, stream=self.log)
        self.player = target

    def move(self, direction: Direction) -> MoveOutcome:
        """Try to move the player one tile in ``direction``.

        Walls block. The exit blocks until every collectible is picked up;
        stepping onto it then wins the game.
        """
        if self.finished:
            return MoveOutcome.IGNORED
        row, col = self.player
        target = (row + direction.d_row, col + direction.d_col)
        tile = self.game_map.cell(*target)
        self.facing = direction
        if tile == COLLECTIBLE:
            self.collectibles.collect_at(*target)
        if tile == WALL:
            return MoveOutcome.BLOCKED
        if tile == EXIT:
            if not self.collectibles.all_collected():
                return MoveOutcome.BLOCKED
            self._step(target)
            self.finished = True
            return MoveOutcome.WON
        self._step(target)
        return MoveOutcome.MOVED

    def handle_key(self, keycode: int) -> MoveOutcome:
        """React to a key code: W, A, S, D move and ESC quits."""
        if keycode == Key.ESC:
            self.finished = True
            return MoveOutcome.QUIT
        direction = _KEY_DIRECTIONS.get(keycode)
        if direction is None:
            return MoveOutcome.IGNORED
        return self.move(direction)