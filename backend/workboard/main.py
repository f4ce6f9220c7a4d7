import time
import uuid
from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager
from datetime import date

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from workboard.api.main import api_router
from workboard.application.bootstrap import build_engine, build_service, build_store
from workboard.core.config import Settings, settings
from workboard.core.observability import (
    get_logger,
    set_correlation_id,
    setup_structured_logging,
)
from workboard.domain.board.value_objects import calendar
from workboard.domain.shared.base import KeyValueStore

logger = get_logger(__name__)


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Tag each request with a correlation id and log its outcome."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        set_correlation_id(correlation_id)

        start_time = time.time()
        method = request.method
        path = request.url.path

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                method=method,
                path=path,
                duration_seconds=time.time() - start_time,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise

        response.headers["X-Correlation-ID"] = correlation_id
        logger.info(
            "Request completed",
            method=method,
            path=path,
            status_code=response.status_code,
            duration_seconds=time.time() - start_time,
        )
        return response


def custom_generate_unique_id(route: APIRoute) -> str:
    return f"{route.tags[0]}-{route.name}"


def create_app(
    config: Settings | None = None,
    *,
    storage: KeyValueStore | None = None,
    clock: Callable[[], date] = calendar.today,
) -> FastAPI:
    """
    Build the board application.

    The engine and store are created at startup and held on ``app.state``
    next to ``config``.

    Args:
        config: Settings to use instead of the environment-derived ones
        storage: Key-value backend to use instead of ``STORAGE_BACKEND``
        clock: Source of "today"
    """
    config = config or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        setup_structured_logging(config)
        logger.info("Starting application initialization")

        try:
            store = build_store(config, storage, clock)
            app.state.engine = build_engine(config, clock)
            app.state.store = store
            app.state.service = build_service(store)
        except Exception as e:
            logger.error("Application startup failed", error=str(e), exc_info=True)
            raise

        logger.info(
            "Application started successfully",
            project_name=config.PROJECT_NAME,
            environment=config.ENVIRONMENT,
            api_version=config.API_V1_STR,
            storage_backend=config.STORAGE_BACKEND if storage is None else "injected",
            overlap_boundary=config.OVERLAP_BOUNDARY,
        )

        yield

        logger.info("Shutting down application")

    app = FastAPI(
        title=config.PROJECT_NAME,
        description="""
        Work Order Timeline - Gantt board API

        Work centers and their work orders laid out on a day, week or month
        timescale, with overlap-checked scheduling.
        """,
        version="1.0.0",
        openapi_url=f"{config.API_V1_STR}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        generate_unique_id_function=custom_generate_unique_id,
        lifespan=lifespan,
    )

    app.state.config = config
    app.add_middleware(ObservabilityMiddleware)

    if config.all_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.all_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(api_router, prefix=config.API_V1_STR)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("workboard.main:app", host="0.0.0.0", port=8000, reload=True)
