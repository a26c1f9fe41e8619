"""Window, textures and the event loop of the game."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .game import FLOOR, KEY_DOWN, KEY_ESCAPE, KEY_LEFT, KEY_RIGHT, KEY_UP, Game  # noqa: E402
from .mapfile import (  # noqa: E402
    COLLECTIBLE,
    EXIT,
    PLAYER,
    WALL,
    MapError,
    has_map_extension,
    read_map,
    validate_map,
)
from .printf import cprint  # noqa: E402

TILE_SIZE = 64
TEXTURE_DIR = "textures"
TITLE = "so_long"

_TEXTURE_FILES = {
    "wall": "wall.xpm",
    "floor": "floor.xpm",
    "player": "cat.xpm",
    "collect": "mouse.xpm",
    "exit": "exit.xpm",
}

_SPECIAL_KEYS = {
    pygame.K_ESCAPE: KEY_ESCAPE,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_UP: KEY_UP,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_DOWN: KEY_DOWN,
}


@dataclass(frozen=True)
class Textures:
    """The images drawn for each kind of tile."""

    wall: pygame.Surface
    floor: pygame.Surface
    player: pygame.Surface
    collect: pygame.Surface
    exit: pygame.Surface


def load_textures(directory: str | os.PathLike[str] = TEXTURE_DIR) -> Textures:
    """Load every tile image from ``directory``; OSError if any is missing."""
    base = Path(directory)
    images = {}
    try:
        for field, name in _TEXTURE_FILES.items():
            images[field] = pygame.image.load(str(base / name))
    except (pygame.error, OSError) as exc:
        raise OSError("Error loading textures") from exc
    return Textures(**images)


def tile_texture(textures: Textures, tile: str) -> pygame.Surface | None:
    """The image for ``tile``, or None for an unknown tile."""
    return {
        WALL: textures.wall,
        FLOOR: textures.floor,
        EXIT: textures.exit,
        PLAYER: textures.player,
        COLLECTIBLE: textures.collect,
    }.get(tile)


def draw(surface: pygame.Surface, game: Game, textures: Textures) -> None:
    """Clear ``surface`` and draw the map with the player on top."""
    surface.fill((0, 0, 0))
    for y, row in enumerate(game.grid[: game.height]):
        for x, tile in enumerate(row[: game.width]):
            image = tile_texture(textures, tile)
            if image is not None:
                surface.blit(image, (x * TILE_SIZE, y * TILE_SIZE))
    surface.blit(textures.player, (game.player_x * TILE_SIZE, game.player_y * TILE_SIZE))


def _run(game: Game, surface: pygame.Surface, textures: Textures) -> None:
    draw(surface, game, textures)
    pygame.display.flip()
    while not game.finished:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return
        if event.type != pygame.KEYDOWN:
            continue
        if game.handle_key(_SPECIAL_KEYS.get(event.key, event.key)):
            return
        draw(surface, game, textures)
        pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1 or not has_map_extension(args[0]):
        cprint("Error\n")
        return 1
    try:
        grid = read_map(args[0])
    except OSError as exc:
        print(f"Error: {exc.strerror or exc}", file=sys.stderr)
        return 1
    try:
        validate_map(grid)
    except MapError as exc:
        cprint("Error\n%s\n", str(exc))
        return 1
    game = Game(grid)
    try:
        pygame.init()
    except pygame.error:
        cprint("Error initializing mlx\n")
        return 1
    try:
        try:
            surface = pygame.display.set_mode(
                (game.width * TILE_SIZE, game.height * TILE_SIZE)
            )
        except pygame.error:
            cprint("Error creating window\n")
            return 1
        pygame.display.set_caption(TITLE)
        try:
            textures = load_textures(TEXTURE_DIR)
        except OSError:
            sys.stderr.write("Error loading textures\n")
            return 1
        _run(game, surface, textures)
    finally:
        pygame.quit()
    return 0