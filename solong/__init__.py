"""A tile-based puzzle game: collect every item, then reach the exit.

Also holds the map checks, the display-free game state and small
formatting, string, buffer and line-reading helpers.
"""

__version__ = "0.1.0"