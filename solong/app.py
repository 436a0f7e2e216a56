"""Window, rendering and the command-line entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

import pygame

from solong.game import Direction, Game, MoveResult
from solong.grid import ErrorKind, MapError
from solong.loader import load_map
from solong.xpm import TRANSPARENT, XpmError, XpmImage, load_xpm

TILE_SIZE = 64
DEFAULT_TEXTURES = Path("textures")
TITLE = "so_long"

_TILE_TEXTURES = {
    "1": "wall.xpm",
    "C": "coin.xpm",
    "E": "exit.xpm",
    "P": "player.xpm",
}
_BACKGROUND = "background.xpm"

_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


def _to_surface(image: XpmImage) -> pygame.Surface:
    data = bytearray()
    for row in image.pixels:
        for value in row:
            if value == TRANSPARENT:
                data += b"\x00\x00\x00\x00"
            else:
                data += bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 0xFF))
    return pygame.image.frombuffer(bytes(data), (image.width, image.height), "RGBA").copy()


def _load_texture(path: Path) -> pygame.Surface:
    return _to_surface(load_xpm(path))


class Renderer:
    """Draws a game onto an off-screen surface, one texture per tile."""

    def __init__(self, game: Game, texture_dir: str | os.PathLike[str]) -> None:
        folder = Path(texture_dir)
        self.game = game
        self.background = _load_texture(folder / _BACKGROUND)
        self.textures = {
            tile: _load_texture(folder / name) for tile, name in _TILE_TEXTURES.items()
        }
        self.surface = pygame.Surface((game.width * TILE_SIZE, game.height * TILE_SIZE))

    def draw(self) -> pygame.Surface:
        """Redraw every tile and return the surface."""
        self.surface.fill((0, 0, 0))
        for y, row in enumerate(self.game.rows):
            for x, tile in enumerate(row):
                position = (x * TILE_SIZE, y * TILE_SIZE)
                self.surface.blit(self.background, position)
                sprite = self.textures.get(tile)
                if sprite is not None:
                    self.surface.blit(sprite, position)
        return self.surface


def direction_for_key(key: int) -> Direction | None:
    """Map arrow keys and WASD to a direction; other keys give None."""
    return _KEYS.get(key)


def run(game: Game, texture_dir: str | os.PathLike[str]) -> int:
    """Open a window and play until the game ends or the window closes."""
    pygame.init()
    try:
        renderer = Renderer(game, texture_dir)
        screen = pygame.display.set_mode(renderer.surface.get_size())
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        dirty = True
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type != pygame.KEYUP:
                    continue
                if event.key == pygame.K_ESCAPE:
                    print("Quitting game by pressing ESC")
                    return 0
                direction = direction_for_key(event.key)
                if direction is None:
                    continue
                result = game.move(direction)
                if result is MoveResult.FINISHED:
                    return 0
                if result is not MoveResult.BLOCKED:
                    print(game.moves)
                    dirty = True
            if dirty:
                screen.blit(renderer.draw(), (0, 0))
                pygame.display.flip()
                dirty = False
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(f"Error\n{ErrorKind.INVALID_NAME.message}")
        return 0
    try:
        game = Game(load_map(args[0]))
        return run(game, DEFAULT_TEXTURES)
    except MapError as exc:
        print(f"Error\n{exc.kind.message}")
        return 1
    except XpmError as exc:
        print(f"Error\n{exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())