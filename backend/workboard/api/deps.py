"""
API Dependencies

The settings, engine, store and service are held per application on
``app.state`` (see ``workboard.main``); routes receive them here.
"""

from typing import Annotated

from fastapi import Depends, Request, status

from workboard.application.services.work_order_service import WorkOrderService
from workboard.application.services.work_order_store import WorkOrderStore
from workboard.core.config import Settings
from workboard.domain.board.services.timescale_engine import TimescaleEngine
from workboard.domain.shared.exceptions import ErrorType

ERROR_STATUS_CODES: dict[str, int] = {
    ErrorType.VALIDATION.value: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorType.RESOURCE_CONFLICT.value: status.HTTP_409_CONFLICT,
    ErrorType.NOT_FOUND.value: status.HTTP_404_NOT_FOUND,
    ErrorType.PERSISTENCE.value: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_settings(request: Request) -> Settings:
    return request.app.state.config


def get_engine(request: Request) -> TimescaleEngine:
    return request.app.state.engine


def get_store(request: Request) -> WorkOrderStore:
    return request.app.state.store


def get_service(request: Request) -> WorkOrderService:
    return request.app.state.service


def error_status_code(error_type: str | None) -> int:
    return ERROR_STATUS_CODES.get(
        error_type or "", status.HTTP_500_INTERNAL_SERVER_ERROR
    )


SettingsDep = Annotated[Settings, Depends(get_settings)]
EngineDep = Annotated[TimescaleEngine, Depends(get_engine)]
StoreDep = Annotated[WorkOrderStore, Depends(get_store)]
ServiceDep = Annotated[WorkOrderService, Depends(get_service)]
