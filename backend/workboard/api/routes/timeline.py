"""
Timeline API Routes

Read and steer the timescale: granularity, re-centering, window expansion
and pixel-to-date lookups for click-to-create.
"""

from typing import Literal

from fastapi import APIRouter, HTTPException, Query

from workboard.api.deps import EngineDep, error_status_code
from workboard.application.dtos.board_dtos import (
    DateAtPositionResponse,
    ExpandResponse,
    GranularityRequest,
    TimelineResponse,
)
from workboard.application.queries.board_queries import build_timeline
from workboard.domain.board.value_objects import calendar
from workboard.domain.shared.exceptions import ValidationError

router = APIRouter(prefix="/timeline", tags=["timeline"])


@router.get("", response_model=TimelineResponse)
def get_timeline(engine: EngineDep) -> TimelineResponse:
    return build_timeline(engine)


@router.put(
    "/granularity",
    response_model=TimelineResponse,
    summary="Change timescale",
    description="Switch to day, week or month view. The window is re-centered on today.",
)
def set_granularity(request: GranularityRequest, engine: EngineDep) -> TimelineResponse:
    engine.set_granularity(request.granularity)
    return build_timeline(engine)


@router.post("/today", response_model=TimelineResponse, summary="Go to today")
def center_on_today(engine: EngineDep) -> TimelineResponse:
    engine.center_on_today()
    return build_timeline(engine)


@router.post("/expand/{direction}", response_model=ExpandResponse)
def expand(direction: Literal["past", "future"], engine: EngineDep) -> ExpandResponse:
    """
    Grow the window by the expansion buffer.

    After expanding into the past the renderer should shift its scroll
    position right by ``scrollCompensation`` pixels.
    """
    if direction == "past":
        added = engine.expand_past()
        compensation = engine.scroll_compensation(added)
    else:
        added = engine.expand_future()
        compensation = 0

    state = engine.state
    return ExpandResponse(
        direction=direction,
        added=added,
        scroll_compensation=compensation,
        view_start=state.view_start,
        view_end=state.view_end,
    )


@router.get(
    "/date-at",
    response_model=DateAtPositionResponse,
    responses={422: {"description": "Offset outside the supported date range"}},
)
def date_at_position(
    engine: EngineDep,
    offset_x: float = Query(
        ...,
        allow_inf_nan=False,
        description="Pixel offset from the window's left edge",
    ),
) -> DateAtPositionResponse:
    try:
        target = engine.get_date_from_position(offset_x)
    except ValidationError as e:
        raise HTTPException(
            status_code=error_status_code(e.error_type.value), detail=e.to_dict()
        ) from e
    return DateAtPositionResponse(
        offset_x=offset_x,
        date=target,
        display_date=calendar.format_for_display(target),
    )
