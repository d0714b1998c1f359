"""
Summer Toolbox - Main FastAPI Application

Local backend for the toolbox desktop shell: text codecs, JSON formatting,
operation history and image format conversion.
"""

import logging
import os
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Add parent directory to path
sys.path.append(str(Path(__file__).parent))

from api.exceptions import register_exception_handlers  # noqa: E402

# Import routers  # noqa: E402
from api.routers import codec, formatter, history, image, system  # noqa: E402

# Import configuration  # noqa: E402
from config import get_settings  # noqa: E402
from core.constants import SystemConstants  # noqa: E402
from core.history_buffer import HistoryBuffer  # noqa: E402

# Get configuration
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.system.log_level),
    format=SystemConstants.LOG_FORMAT,
)
logger = logging.getLogger(__name__)

# Suppress watchfiles debug messages
logging.getLogger("watchfiles").setLevel(logging.WARNING)

# PIL logs every plugin it probes at DEBUG
logging.getLogger("PIL").setLevel(logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""
    # Startup
    logger.info("Starting Summer Toolbox backend...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.system.debug}")

    # Store shared state for access by routers
    app.state.history_buffer = HistoryBuffer(max_size=settings.history.buffer_size)
    app.state.config = settings.to_dict()
    app.state.debug = settings.system.debug

    yield

    # Shutdown
    logger.info("Shutting down Summer Toolbox backend...")
    app.state.history_buffer.clear()
    logger.info("Server shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Summer Toolbox",
    description="Text encoding tools and image format conversion for the toolbox desktop app",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS for the desktop webview
if settings.api.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition", "X-Processing-Time-Ms"],
    )

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(codec.router, prefix="/api/codec", tags=["Codec"])
app.include_router(formatter.router, prefix="/api/json", tags=["JSON"])
app.include_router(image.router, prefix="/api/image", tags=["Image"])
app.include_router(history.router, prefix="/api/history", tags=["History"])
app.include_router(system.router, prefix="/api/system", tags=["System"])


# Root endpoint
@app.get("/")
async def root():
    return {
        "name": "Summer Toolbox",
        "status": "running",
        "version": "1.0.0",
        "endpoints": {
            "codec": "/api/codec",
            "json": "/api/json",
            "image": "/api/image",
            "history": "/api/history",
            "system": "/api/system",
            "docs": "/docs",
        },
    }


# Health check endpoint
@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "services": {
            "history_buffer": getattr(app.state, "history_buffer", None) is not None,
        },
    }


if __name__ == "__main__":
    # Write PID file so the desktop shell can stop the backend
    run_dir = os.getenv("RUN_DIR", os.path.join(Path(__file__).parent, "var", "run"))
    pid_file = os.path.join(run_dir, "backend.pid")

    os.makedirs(run_dir, exist_ok=True)

    with open(pid_file, "w") as f:
        f.write(str(os.getpid()))
    logger.info(f"PID {os.getpid()} written to {pid_file}")

    reload_excludes = (
        ["*.log", "*.pyc", "__pycache__", ".git", ".venv", "venv"]
        if settings.system.debug
        else None
    )

    server_config = uvicorn.Config(
        "main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.system.debug,
        reload_excludes=reload_excludes,
        log_level=settings.system.log_level.lower(),
        loop="asyncio",
    )

    server = uvicorn.Server(server_config)

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
    finally:
        # Clean up PID file
        try:
            if os.path.exists(pid_file):
                os.remove(pid_file)
                logger.info(f"Removed PID file: {pid_file}")
        except OSError as e:
            logger.warning(f"Failed to remove PID file: {e}")
        logger.info("Server exiting...")
