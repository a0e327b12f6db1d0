"""
Web Application Entry Point
============================

FastAPI application exposing the file relocation endpoint.

Author: FileMove Project
License: MIT
"""

from typing import Dict, List, Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config.config_loader import ConfigLoader
from ..config.schema import Config
from ..core.relocator import FileRelocator
from ..utils.logger import get_logger, setup_logging
from .middleware import RequestLoggingMiddleware
from .routes import api_router

logger = get_logger(__name__)


def create_app(
    config: Optional[Config] = None,
    relocator: Optional[FileRelocator] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Loaded configuration (loaded from disk/env if None)
        relocator: Relocator to serve requests with (built from config if None)

    Returns:
        Configured FastAPI app
    """
    config = config or ConfigLoader().load()

    app = FastAPI(
        title="FileMove",
        description="Moves every file of a directory tree into one destination directory",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json"
    )

    app.state.config = config
    app.state.relocator = relocator or FileRelocator.from_config(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(api_router, prefix="/api", tags=["API"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint for container orchestration."""
        return {"status": "healthy", "service": "filemove"}

    return app


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report invalid request bodies as 400 with per-field messages."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(location) or "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))

    logger.warning(f"Invalid request to {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Request validation failed", "errors": errors}
    )


def main(config_path: Optional[str] = None) -> int:
    """Load configuration, set up logging and serve the API."""
    try:
        config = ConfigLoader(config_path).load()
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return 1

    setup_logging(
        log_level=config.app.log_level,
        log_to_file=config.app.log_to_file,
        log_file_path=config.app.log_file_path,
        log_rotation_size=config.app.log_rotation_size,
        log_retention_count=config.app.log_retention_count,
        json_format=config.app.json_logs
    )

    logger.info(f"FileMove API starting on {config.app.host}:{config.app.port}")
    uvicorn.run(
        create_app(config),
        host=config.app.host,
        port=config.app.port,
        log_level=str(config.app.log_level).lower()
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
