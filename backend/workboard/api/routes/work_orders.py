"""
Work Center and Work Order API Routes

Board rows with positioned bars, and the form endpoints for creating,
replacing, deleting and pre-checking work orders. Form endpoints always
answer ``{success, error?}``; the status code reflects the error type.
"""

from fastapi import APIRouter, HTTPException, Query, Response, status

from workboard.api.deps import EngineDep, ServiceDep, StoreDep, error_status_code
from workboard.application.dtos.board_dtos import (
    OperationResult,
    WorkCenterResponse,
    WorkOrderBar,
    WorkOrderForm,
    WorkOrderResponse,
)
from workboard.application.queries.board_queries import (
    build_bar,
    build_work_center_rows,
)

router = APIRouter()

FORM_RESPONSES = {
    404: {"description": "Unknown work order or work center", "model": OperationResult},
    409: {"description": "Overlaps another work order on the work center", "model": OperationResult},
    422: {"description": "Invalid work order data", "model": OperationResult},
}


@router.get(
    "/work-centers",
    response_model=list[WorkCenterResponse],
    tags=["work-centers"],
)
def list_work_centers(store: StoreDep, engine: EngineDep) -> list[WorkCenterResponse]:
    """Every work center with its work orders placed on the current timescale."""
    return build_work_center_rows(store, engine)


@router.get(
    "/work-centers/{work_center_id}/work-orders",
    response_model=list[WorkOrderBar],
    tags=["work-centers"],
    responses={404: {"description": "Work center not found"}},
)
def list_work_center_orders(
    work_center_id: str, store: StoreDep, engine: EngineDep
) -> list[WorkOrderBar]:
    if store.get_work_center(work_center_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Work center {work_center_id} not found",
        )
    return [build_bar(engine, wo) for wo in store.list_by_resource(work_center_id)]


@router.get(
    "/work-orders/{work_order_id}",
    response_model=WorkOrderResponse,
    tags=["work-orders"],
    responses={404: {"description": "Work order not found"}},
)
def get_work_order(work_order_id: str, store: StoreDep) -> WorkOrderResponse:
    work_order = store.get(work_order_id)
    if work_order is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Work order {work_order_id} not found",
        )
    return WorkOrderResponse.from_entity(work_order)


@router.post(
    "/work-orders/check",
    response_model=OperationResult,
    tags=["work-orders"],
    summary="Pre-submit check",
    description="Run the create/update checks without saving anything.",
)
def check_work_order(
    form: WorkOrderForm,
    service: ServiceDep,
    exclude_id: str | None = Query(None, description="Work order being edited"),
) -> OperationResult:
    return service.check(form, exclude_id)


@router.post(
    "/work-orders",
    response_model=OperationResult,
    status_code=status.HTTP_201_CREATED,
    tags=["work-orders"],
    responses=FORM_RESPONSES,
)
def create_work_order(
    form: WorkOrderForm, service: ServiceDep, response: Response
) -> OperationResult:
    result = service.create(form)
    if not result.success:
        response.status_code = error_status_code(result.error_type)
    return result


@router.put(
    "/work-orders/{work_order_id}",
    response_model=OperationResult,
    tags=["work-orders"],
    responses=FORM_RESPONSES,
)
def update_work_order(
    work_order_id: str, form: WorkOrderForm, service: ServiceDep, response: Response
) -> OperationResult:
    result = service.update(work_order_id, form)
    if not result.success:
        response.status_code = error_status_code(result.error_type)
    return result


@router.delete(
    "/work-orders/{work_order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["work-orders"],
)
def delete_work_order(work_order_id: str, service: ServiceDep) -> None:
    """Remove a work order. Unknown ids succeed too."""
    service.delete(work_order_id)
