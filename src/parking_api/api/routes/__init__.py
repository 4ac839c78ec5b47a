"""Route group exports."""

from . import health, parkings, stats

__all__ = ["health", "parkings", "stats"]
