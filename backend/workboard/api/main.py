from fastapi import APIRouter

from workboard.api.routes import health, timeline, work_orders

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])

# Board routes
api_router.include_router(timeline.router)
api_router.include_router(work_orders.router)
