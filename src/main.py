"""Main FastAPI application entry point.

Wires middleware, exception handlers and routers. Shared infrastructure
(database engine, logger, enrichers) is created lazily by the container and
released on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: log configuration summary
    - Shutdown: dispose database engine

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "application_starting",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await get_database().close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Contest participant portal with login audit view",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Trace-Id"],
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (Problem Details error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
