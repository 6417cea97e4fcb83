"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS),
registers the exception handlers and includes all API routers. It serves as
the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vet_clinic import __version__
from vet_clinic.core.database.session import init_db
from vet_clinic.core.logging_config import get_logger, setup_logging

from .api.v1 import health, medical_records, owners, pets
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on startup. A database that cannot be reached is
    logged and the server keeps starting; requests then fail with 500 until it
    becomes available.
    """
    # Startup
    try:
        logger.info("Starting up Vet Clinic Records Server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    # Shutdown
    logger.info("Shutting down Vet Clinic Records Server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Vet Clinic Records API

    This API manages the owners of a veterinary clinic, their pets and each
    pet's medical visit history: CRUD, substring search, pagination and counts.
    """,
    version=__version__,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

# Set all CORS enabled origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=settings.cors.allow_methods,
    allow_headers=settings.cors.allow_headers,
)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(owners.router, prefix=f"{constant.API_V1_STR}/owners")
app.include_router(pets.router, prefix=f"{constant.API_V1_STR}/pets")
app.include_router(medical_records.router, prefix=f"{constant.API_V1_STR}/medical-records")


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(app, host=settings.server_host, port=settings.server_port)
