"""Occupancy statistics helpers."""

from .timeframe import resolve_timeframe, round_to_interval

__all__ = [
    "round_to_interval",
    "resolve_timeframe",
]
