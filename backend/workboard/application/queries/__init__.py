"""Read-side queries for the board renderer."""

from .board_queries import build_bar, build_timeline, build_work_center_rows

__all__ = ["build_bar", "build_timeline", "build_work_center_rows"]
