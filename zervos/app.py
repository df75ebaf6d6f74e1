"""FastAPI application for the Zervos admin API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import configure_logging, settings

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    from .database import async_session_factory, engine
    from .services.organization_svc import ensure_organization

    # Auto-create tables for SQLite (local dev)
    if "sqlite" in settings.database_url:
        from .models import Base
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as db:
        await ensure_organization(db, settings.default_org_uuid, settings.default_org_name)
    logger.info("Zervos API ready (%s)", settings.environment)
    yield
    await engine.dispose()


app = FastAPI(
    title=settings.app_title,
    lifespan=lifespan,
    docs_url=None if settings.is_production else "/docs",
    redoc_url=None if settings.is_production else "/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_origin.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "message": str(exc)},
    )


# Import and register routers
from .routers import (  # noqa: E402
    appointments, auth, custom_labels, customers, health, integrations, locations,
    notification_settings, organization_settings, resources, roles, services, sync,
    team_members, workspaces,
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(sync.router)
app.include_router(customers.router)
app.include_router(services.router)
app.include_router(appointments.router)
app.include_router(team_members.router)
app.include_router(custom_labels.router)
app.include_router(notification_settings.router)
app.include_router(organization_settings.router)
app.include_router(roles.router)
app.include_router(workspaces.router)
app.include_router(locations.router)
app.include_router(resources.router)
app.include_router(integrations.router)
