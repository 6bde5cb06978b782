"""Window, drawing and the command that starts the game."""

from __future__ import annotations

import sys
from pathlib import Path

import pygame

from solong.game import Direction, Game, Key, MoveOutcome
from solong.mapfile import EXIT, WALL, MapError, load_map
from solong.xpm import XpmError, load_xpm

TILE = 64
TITLE = "so_long"
TEXT_POSITION = (32, 32)
TEXT_COLOR = (0, 0, 0)
DEFAULT_ASSET_DIR = Path("srcs")

_PYGAME_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_ESCAPE: Key.ESC,
}


def load_surface(path: str | Path) -> pygame.Surface:
    """Load an XPM file as a surface with per-pixel alpha.

    The high byte of a pixel is its transparency: 0 is opaque.
    """
    image = load_xpm(path)
    data = bytearray()
    for value in image.pixels:
        alpha = 0xFF - ((value >> 24) & 0xFF)
        data += bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha))
    surface = pygame.image.frombuffer(bytes(data), (image.width, image.height), "RGBA")
    return surface.copy()


class GameWindow:
    """A window showing a game and feeding key presses to it."""

    def __init__(self, game: Game, asset_dir: str | Path = DEFAULT_ASSET_DIR) -> None:
        assets = Path(asset_dir)
        self.game = game
        self.floor = load_surface(assets / "floor.xpm")
        self.wall = load_surface(assets / "wall.xpm")
        self.exit = load_surface(assets / "exit.xpm")
        self.collectible = load_surface(assets / "pokeball.xpm")
        self.stand = load_surface(assets / "charizard_front.xpm")
        self.player_images = {
            Direction.UP: load_surface(assets / "charizard_back.xpm"),
            Direction.DOWN: load_surface(assets / "charizard_front.xpm"),
            Direction.LEFT: load_surface(assets / "charizard_left.xpm"),
            Direction.RIGHT: load_surface(assets / "charizard_right.xpm"),
        }
        pygame.display.init()
        pygame.font.init()
        game_map = game.game_map
        self.screen = pygame.display.set_mode((game_map.width * TILE, game_map.height * TILE))
        pygame.display.set_caption(TITLE)
        self._font = pygame.font.Font(None, 24)
        self.draw()

    def _blit(self, image: pygame.Surface, row: int, col: int) -> None:
        self.screen.blit(image, (col * TILE, row * TILE))

    def draw(self) -> None:
        """Redraw the map, the collectibles left, the player and the move count."""
        self.screen.fill((0, 0, 0))
        for row, line in enumerate(self.game.game_map.rows):
            for col, tile in enumerate(line):
                self._blit(self.wall if tile == WALL else self.floor, row, col)
                if tile == EXIT:
                    self._blit(self.exit, row, col)
        for row, col in self.game.collectibles.remaining():
            self._blit(self.collectible, row, col)
        facing = self.game.facing
        image = self.stand if facing is None else self.player_images[facing]
        self._blit(image, *self.game.player)
        text = self._font.render(str(self.game.moves), True, TEXT_COLOR)
        self.screen.blit(text, TEXT_POSITION)
        pygame.display.flip()

    def handle_key(self, keycode: int) -> MoveOutcome:
        """Pass a key code to the game and redraw."""
        outcome = self.game.handle_key(keycode)
        if outcome is not MoveOutcome.IGNORED:
            self.draw()
        return outcome

    def run(self) -> int:
        """Process events until the window closes, ESC is pressed or the game is won."""
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type != pygame.KEYDOWN:
                continue
            keycode = _PYGAME_KEYS.get(event.key)
            if keycode is None:
                continue
            if self.handle_key(keycode) in (MoveOutcome.WON, MoveOutcome.QUIT):
                return 0


def main(argv: list[str] | None = None) -> int:
    """Play the map file named by the single argument."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        return 1
    try:
        game_map = load_map(args[0])
    except MapError:
        sys.stderr.write("Error\n")
        return 1
    game = Game.from_map(game_map)
    game.log = sys.stdout
    pygame.init()
    try:
        window = GameWindow(game, DEFAULT_ASSET_DIR)
        return window.run()
    except XpmError:
        sys.stderr.write("Error\n")
        return 1
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())