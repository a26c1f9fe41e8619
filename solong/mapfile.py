"""Loading and validating game maps stored in ``.ber`` files."""

from __future__ import annotations

from collections.abc import Sequence

from .lines import LineReader

WALL = "1"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"


class MapError(ValueError):
    """A map that cannot be played."""


def has_map_extension(path: str) -> bool:
    """True when ``path`` names a ``.ber`` file."""
    return str(path).endswith(".ber")


def read_map(path: str) -> list[str]:
    """Rows of the map file at ``path``, each without its trailing newline."""
    with open(path, encoding="utf-8", newline="") as handle:
        return [line[:-1] if line.endswith("\n") else line for line in LineReader(handle)]


def is_rectangular(grid: Sequence[str]) -> bool:
    """True when every row is as long as the first."""
    if not grid:
        return False
    width = len(grid[0])
    return all(len(row) == width for row in grid)


def is_walled(grid: Sequence[str]) -> bool:
    """True when the first and last rows and both edge columns are all walls."""
    if not grid or not grid[0]:
        return False
    width = len(grid[0])
    if set(grid[0]) - {WALL} or set(grid[-1]) - {WALL}:
        return False
    return all(len(row) >= width and row[0] == WALL and row[width - 1] == WALL for row in grid)


def has_required_elements(grid: Sequence[str]) -> bool:
    """One player, one exit and at least one collectible.

    The first column of each row is not examined.
    """
    players = exits = collectibles = 0
    for row in grid:
        for tile in row[1:]:
            if tile == PLAYER:
                players += 1
            elif tile == EXIT:
                exits += 1
            elif tile == COLLECTIBLE:
                collectibles += 1
    return players == 1 and exits == 1 and collectibles > 0


def _find_player(grid: Sequence[str]) -> tuple[int, int] | None:
    width = len(grid[0])
    for r, row in enumerate(grid):
        col = row.find(PLAYER, 0, width)
        if col >= 0:
            return r, col
    return None


def _reachable(grid: Sequence[str], start: tuple[int, int] | None) -> set[tuple[int, int]]:
    seen: set[tuple[int, int]] = set()
    stack = [start] if start is not None else []
    while stack:
        r, c = stack.pop()
        if r < 0 or c < 0 or r >= len(grid) or c >= len(grid[r]):
            continue
        if grid[r][c] == WALL or (r, c) in seen:
            continue
        seen.add((r, c))
        stack.extend(((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)))
    return seen


def has_valid_path(grid: Sequence[str]) -> bool:
    """True when the player can reach every exit and collectible."""
    if not grid:
        return False
    seen = _reachable(grid, _find_player(grid))
    width = len(grid[0])
    return all(
        (r, c) in seen
        for r, row in enumerate(grid)
        for c, tile in enumerate(row[:width])
        if tile in (EXIT, COLLECTIBLE)
    )


def validate_map(grid: Sequence[str]) -> Sequence[str]:
    """Return ``grid`` unchanged, or raise MapError naming the first problem."""
    if not is_rectangular(grid):
        raise MapError("Map is not rectangular")
    if not is_walled(grid):
        raise MapError("Map is not surrounded by walls")
    if not has_required_elements(grid):
        raise MapError("Missing or incorrect elements")
    if not has_valid_path(grid):
        raise MapError("No valid path exists")
    return grid