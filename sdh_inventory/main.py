"""FastAPI application entry point"""
import asyncio
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sdh_inventory.infrastructure.config.settings import settings
from sdh_inventory.infrastructure.log_config import setup_logging
from sdh_inventory.infrastructure.database.base import init_db
from sdh_inventory.infrastructure.init_data import init_default_admin, init_default_settings
from sdh_inventory.infrastructure.storage import ensure_upload_dir
from sdh_inventory.presentation.api.v1.routers import (
    assets,
    auth,
    backup,
    notifications,
    settings_lists,
    users,
)

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events"""
    logger.info("Initializing application...")
    init_db()
    logger.info("Database initialized")

    ensure_upload_dir()
    await init_default_admin()
    await init_default_settings()

    try:
        yield
    except (KeyboardInterrupt, asyncio.CancelledError):
        # Normal shutdown
        pass
    finally:
        logger.info("Shutting down application...")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
    max_age=3600,
)

app.include_router(auth.router, prefix=settings.API_V1_PREFIX)
app.include_router(users.router, prefix=settings.API_V1_PREFIX)
app.include_router(assets.router, prefix=settings.API_V1_PREFIX)
app.include_router(notifications.router, prefix=settings.API_V1_PREFIX)
app.include_router(settings_lists.router, prefix=settings.API_V1_PREFIX)
app.include_router(backup.router, prefix=settings.API_V1_PREFIX)

# Mount static files for uploads (directory must exist before mount)
ensure_upload_dir()
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}
