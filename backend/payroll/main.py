"""Payroll API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PayrollError → plain text / Problem / JSON responses
    - CORS configured from settings (not hardcoded)
    - Schema creation and seed loading complete before the app accepts traffic

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Seed runs through the same SQL repositories the routes use
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from payroll import __version__
from payroll.api.error_handlers import register_error_handlers
from payroll.api.routes import employees, health, orders
from payroll.config import Settings, get_settings
from payroll.infrastructure.database import DatabaseSessionManager, init_db
from payroll.infrastructure.observability import setup_logging
from payroll.infrastructure.seed import load_demo_data
from payroll.infrastructure.sql_repositories import (
    SqlEmployeeRepository, SqlOrderRepository,
)

logger = logging.getLogger(__name__)


async def prepare_database(
    manager: DatabaseSessionManager, settings: Settings,
) -> None:
    """Create tables and load demo data, per settings."""
    if settings.create_schema_on_startup:
        await manager.create_all()
    if settings.seed_demo_data:
        async with manager.session() as db:
            await load_demo_data(
                SqlEmployeeRepository(db), SqlOrderRepository(db),
            )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await prepare_database(manager, settings)
    logger.info("Payroll API started")
    yield
    logger.info("Payroll API shutting down")
    await manager.dispose()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Payroll API", version=__version__, lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )
    app.include_router(health.router)
    app.include_router(employees.router)
    app.include_router(orders.router)
    register_error_handlers(app)
    return app


app = create_app()
