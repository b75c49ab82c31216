"""Skill Service - FastAPI Application."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .database import Database, init_tables
from .errors import InvalidInputError, SkillServiceError
from .models.envelope import ErrorDetail, ErrorResponse
from .routers import skills_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("skill_service")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    logger.info(f"Starting {settings.service_name} v{settings.service_version}")

    await Database.connect()
    await init_tables()
    logger.info(f"Connected to PostgreSQL at {settings.postgres_host}:{settings.postgres_port}")

    yield

    # Shutdown
    await Database.disconnect()
    logger.info("Disconnected from PostgreSQL")


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    """Build an error envelope response."""
    body = ErrorResponse(error=ErrorDetail(code=code, message=message))
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_service_error(request: Request, exc: SkillServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return error_response(exc.status_code, exc.code, exc.message)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    message = "; ".join(problems) or InvalidInputError.message
    logger.info(f"{request.method} {request.url.path} invalid input: {message}")
    return error_response(InvalidInputError.status_code, InvalidInputError.code, message)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = "not_found" if exc.status_code == 404 else "http_error"
    return error_response(exc.status_code, code, str(exc.detail))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, "internal_error", "Internal server error")


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="Skill Service",
        description="CRUD and patch-action API for skills backed by PostgreSQL",
        version=settings.service_version,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Errors
    app.add_exception_handler(SkillServiceError, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    # Routers
    app.include_router(skills_router, prefix=settings.api_prefix)

    @app.get("/")
    async def root() -> dict:
        """Root endpoint."""
        return {
            "service": settings.service_name,
            "version": settings.service_version,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "skill_service.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
