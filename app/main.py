from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.achievements.routes import achievements
from app.activities.routes import activities
from app.core.config import settings
from app.core.datetime_utils import as_utc_iso, utcnow
from app.core.exceptions import register_exception_handlers
from app.core.log_config import RequestLoggingMiddleware, setup_logging
from app.core.schemas import ERROR_RESPONSES
from app.db.session import create_db_engine, create_session_factory, init_schema
from app.db.store import Store, get_store
from app.progress.routes import progress
from app.users.routes import users

setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("connecting_to_database", backend=settings.DATABASE_URL.split(":", 1)[0])
    engine = create_db_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    if settings.AUTO_CREATE_SCHEMA:
        init_schema(engine)
        logger.info("schema_ready")
    app.state.session_factory = create_session_factory(engine)

    try:
        yield
    finally:
        logger.info("closing_database")
        engine.dispose()
        logger.info("database_closed")


app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
    lifespan=lifespan,
    description="Backend API for MathKids: users, activities, daily progress and achievements",
    version=settings.VERSION,
)

register_exception_handlers(app, debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(
    users.router,
    prefix=f"{settings.API_PREFIX}/users",
    tags=["users"],
    responses=ERROR_RESPONSES,
)
app.include_router(
    activities.router,
    prefix=f"{settings.API_PREFIX}/activities",
    tags=["activities"],
    responses=ERROR_RESPONSES,
)
app.include_router(
    progress.router,
    prefix=f"{settings.API_PREFIX}/progress",
    tags=["progress"],
    responses=ERROR_RESPONSES,
)
app.include_router(
    achievements.router,
    prefix=f"{settings.API_PREFIX}/achievements",
    tags=["achievements"],
    responses=ERROR_RESPONSES,
)


@app.get("/")
async def root() -> dict[str, Any]:
    prefix = settings.API_PREFIX
    return {
        "message": "MathKids API",
        "version": settings.VERSION,
        "status": "running",
        "endpoints": {
            "users": f"{prefix}/users",
            "activities": f"{prefix}/activities",
            "progress": f"{prefix}/progress",
            "achievements": f"{prefix}/achievements",
            "health": f"{prefix}/health",
        },
    }


@app.get(f"{settings.API_PREFIX}/health")
async def health_check(store: Store = Depends(get_store)) -> dict[str, str]:
    db_status = "healthy" if store.ping() else "unhealthy"
    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "database": db_status,
        "version": settings.VERSION,
        "timestamp": as_utc_iso(utcnow()),
    }
