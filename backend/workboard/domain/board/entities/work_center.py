"""Work center entity: a resource that work orders are scheduled against."""

from pydantic import Field

from ...shared.base import Entity


class WorkCenter(Entity):
    """
    A work center row on the board.

    Work centers are created at seed/import time and never mutated.
    """

    name: str = Field(..., min_length=1)
