"""Game state: the grid, the player's position and movement rules."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .mapfile import COLLECTIBLE, EXIT, PLAYER, WALL, MapError
from .printf import cprint

FLOOR = "0"

KEY_ESCAPE = 65307
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_A = 97
KEY_W = 119
KEY_D = 100
KEY_S = 115

_DIRECTIONS = {
    KEY_LEFT: (-1, 0),
    KEY_A: (-1, 0),
    KEY_UP: (0, -1),
    KEY_W: (0, -1),
    KEY_RIGHT: (1, 0),
    KEY_D: (1, 0),
    KEY_DOWN: (0, 1),
    KEY_S: (0, 1),
}


def count_collectibles(grid: Iterable[Iterable[str]]) -> int:
    """Number of collectible tiles left in ``grid``."""
    return sum(1 for row in grid for tile in row if tile == COLLECTIBLE)


class Game:
    """A running game on a validated map.

    The player's starting tile is turned into floor; the player's position
    is kept separately in ``player_x`` and ``player_y``.
    """

    def __init__(self, grid: Sequence[str]) -> None:
        if not grid:
            raise MapError("Map is empty")
        self.grid: list[list[str]] = [list(row) for row in grid]
        self.height = len(self.grid)
        self.width = len(self.grid[0])
        self.moves = 0
        self.finished = False
        start: tuple[int, int] | None = None
        for y, row in enumerate(self.grid):
            for x, tile in enumerate(row[: self.width]):
                if tile == PLAYER:
                    start = (x, y)
                    row[x] = FLOOR
        if start is None:
            raise MapError("Map has no player")
        self.player_x, self.player_y = start

    @property
    def remaining(self) -> int:
        """Collectibles still on the map."""
        return count_collectibles(self.grid)

    def move(self, dx: int, dy: int) -> bool:
        """Step the player by ``(dx, dy)``.

        Returns False when the step is blocked by a wall or the map edge.
        Stepping onto the exit with nothing left to collect ends the game
        without counting the step.
        """
        new_x = self.player_x + dx
        new_y = self.player_y + dy
        if not (0 <= new_x < self.width and 0 <= new_y < self.height):
            return False
        target = self.grid[new_y][new_x]
        if target == WALL:
            return False
        if target == COLLECTIBLE:
            self.grid[new_y][new_x] = FLOOR
        elif target == EXIT and self.remaining == 0:
            self.finished = True
            return True
        self.moves += 1
        cprint("Number of movment : %d\n", self.moves)
        self.player_x = new_x
        self.player_y = new_y
        return True

    def handle_key(self, keycode: int) -> bool:
        """React to a key press; return True once the game is over."""
        if keycode == KEY_ESCAPE:
            self.finished = True
        elif keycode in _DIRECTIONS:
            self.move(*_DIRECTIONS[keycode])
        return self.finished