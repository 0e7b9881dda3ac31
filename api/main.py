# api/main.py
"""
Web Agent Lab FastAPI Application
Main entry point for the API server
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

ROOT_DIR = Path(__file__).resolve().parent.parent
sys.path.append(str(ROOT_DIR))

# Import core modules
from core.config import get_config, setup_logging
from core.exceptions import ValidationError, WebAgentError, error_payload
from schemas.base import ErrorResponse

from api.dependencies import shutdown_dependencies
from api.middleware import setup_middleware
from api.routers import agent_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Startup
    config = get_config()
    setup_logging(config)
    app.state.config = config

    logger.info("🚀 Starting Web Agent Lab API...")
    if not config.llm.has_credential:
        logger.warning("OPENAI_API_KEY not set; agent runs will be rejected")
    logger.info(
        f"✅ Web Agent Lab API ready at http://{config.api.host}:{config.api.port}"
    )

    yield

    # Shutdown
    logger.info("Web Agent Lab API shutting down...")
    shutdown_dependencies()


def _error_response(status_code: int, payload: dict) -> JSONResponse:
    body = ErrorResponse(**payload)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


# Create FastAPI app
def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    config = get_config()

    app = FastAPI(
        title="Web Agent Lab API",
        description="Autonomous web research agent with streamed progress",
        version="0.1.0",
        docs_url="/docs" if config.get_feature_flag("docs") else None,
        redoc_url="/redoc" if config.get_feature_flag("docs") else None,
        lifespan=lifespan,
    )

    setup_middleware(app, config.api.cors_origins_list)

    # Global exception handlers
    @app.exception_handler(WebAgentError)
    async def handle_agent_error(request: Request, exc: WebAgentError):
        """Handle custom agent exceptions"""
        logger.warning(f"{exc.error_code} on {request.url.path}: {exc.message}")
        return _error_response(exc.status_code, error_payload(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        """Malformed request bodies are rejected before any run starts"""
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        first_loc = errors[0]["loc"] if errors else []
        field = ".".join(str(part) for part in first_loc if part != "body") or "body"
        error = ValidationError(field, errors[0]["msg"] if errors else "invalid request", errors)
        return _error_response(error.status_code, error_payload(error))

    @app.exception_handler(Exception)
    async def handle_general_error(request: Request, exc: Exception):
        """Handle general exceptions"""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return _error_response(500, error_payload(exc))

    API_PREFIX = config.api.prefix

    app.include_router(health_router, prefix=API_PREFIX, tags=["Health"])
    if config.get_feature_flag("agent"):
        app.include_router(agent_router, prefix=API_PREFIX, tags=["Agent"])

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": "Web Agent Lab API",
            "version": "0.1.0",
            "docs_url": "/docs",
            "health_check": f"{API_PREFIX}/health",
            "agent": f"{API_PREFIX}/agent",
        }

    return app


# Create app instance
app = create_app()


def main():
    """Run the application"""
    config = get_config()

    uvicorn.run(
        "api.main:app",
        host=config.api.host,
        port=config.api.port,
        reload=config.api.debug,
        log_level="info" if not config.api.debug else "debug",
    )


if __name__ == "__main__":
    main()
