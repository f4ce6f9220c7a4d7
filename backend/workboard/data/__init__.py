"""
Sample data for the work order timeline board.

Used to populate storage when no persisted board is found.
"""

from .seed import seed_work_centers, seed_work_orders

__all__ = ["seed_work_centers", "seed_work_orders"]
