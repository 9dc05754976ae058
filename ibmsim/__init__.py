"""Interactive console calculator with arithmetic, logic and experimental units."""

__version__ = "0.1.0"