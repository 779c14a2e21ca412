# Main application entry point
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import (
    health_router,
    notes_router,
    register_exception_handlers,
    todos_router,
    users_router,
)
from .config import get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .database import AsyncSessionLocal, create_tables

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting Taskboard application",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )

    # Allow tests to skip touching the real DB (e.g., when using SQLite in-memory)
    if os.getenv("TASKBOARD_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB table creation due to TASKBOARD_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

        if settings.seed_users_on_startup:
            from .core.seed import seed_users

            async with AsyncSessionLocal() as session:
                await seed_users(session)

    yield

    logger.info("Shutting down Taskboard application")


app = FastAPI(
    title=settings.app_name,
    description="Personal task management API",
    version=__version__,
    lifespan=lifespan,
)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(users_router, prefix=settings.api_prefix)
app.include_router(todos_router, prefix=settings.api_prefix)
app.include_router(notes_router, prefix=settings.api_prefix)
app.include_router(health_router, prefix=settings.api_prefix)


# Root endpoint
@app.get("/")
async def root():
    return {"message": "Taskboard API"}


@app.get(f"{settings.api_prefix}/")
async def api_root():
    return {
        "message": "Taskboard API",
        "version": __version__,
        "documentation": {
            "swagger_ui": "/docs",
            "redoc": "/redoc",
            "openapi_json": "/openapi.json"
        },
        "endpoints": {
            "users": f"{settings.api_prefix}/users",
            "todos": f"{settings.api_prefix}/todos",
            "notes": f"{settings.api_prefix}/notes",
            "health": f"{settings.api_prefix}/health/"
        }
    }


# Basic unprefixed health endpoint for load balancers
@app.get("/health")
async def basic_health():
    return {"status": "ok"}


def run() -> None:
    """Console entry point."""
    import uvicorn

    uvicorn.run("taskboard.main:app", host=settings.host, port=settings.port, reload=settings.reload)


if __name__ == "__main__":
    run()
