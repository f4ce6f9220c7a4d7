from typing import Any

from fastapi import APIRouter

from workboard.api.deps import EngineDep, SettingsDep, StoreDep

router = APIRouter()


@router.get("/health")
def health(config: SettingsDep, engine: EngineDep, store: StoreDep) -> dict[str, Any]:
    """Liveness plus a summary of what the board currently holds."""
    return {
        "status": "healthy",
        "service": config.PROJECT_NAME,
        "environment": config.ENVIRONMENT,
        "granularity": engine.granularity.value,
        "work_centers": len(store.work_centers),
        "work_orders": len(store.work_orders),
    }
