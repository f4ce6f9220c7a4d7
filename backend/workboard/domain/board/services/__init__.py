"""Domain services for the timeline board."""

from .overlap_validator import OverlapValidator, find_conflict
from .timescale_engine import TimescaleEngine, TimescaleState

__all__ = [
    "OverlapValidator",
    "TimescaleEngine",
    "TimescaleState",
    "find_conflict",
]
