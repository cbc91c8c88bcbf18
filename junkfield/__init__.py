"""A turn-based terminal game of collecting space junk among drifting asteroids."""

__version__ = "0.1.0"