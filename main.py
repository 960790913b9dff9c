"""
FastAPI Application Entry Point

Integrates:
  - /correctText grammar correction endpoint
  - Middleware for logging & error handling

Run: uvicorn main:create_app --factory --host 0.0.0.0 --port 8080
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from config import Config
from infra import InfraConfig, get_config
from transport.rest import MethodNotAllowed, create_router, method_not_allowed_handler

# Setup logging
logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(config: Optional[InfraConfig] = None) -> FastAPI:
    """
    Create the FastAPI application.

    The configuration is read once here; a missing API key raises
    ConfigurationError and the server never starts.
    """
    config = config or get_config()
    corrector = config.create_corrector()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        mode = "mock" if config.mock else "remote"
        logger.info(
            f"Start server on {Config.HOST}:{Config.PORT} in {mode} mode "
            f"({type(corrector).__name__})"
        )

        yield

        # Shutdown
        logger.info("Grammar server shutting down...")

    app = FastAPI(
        title="Grammar Correction API",
        description="Forwards text to a completion API for grammar correction",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Middleware for logging
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all requests."""
        logger.debug(f"{request.method} {request.url.path}")
        try:
            response = await call_next(request)
            return response
        except Exception as e:
            logger.error(f"Request error: {str(e)}", exc_info=True)
            return PlainTextResponse("Internal server error", status_code=500)

    app.include_router(create_router(corrector, config.api_key))
    app.add_exception_handler(MethodNotAllowed, method_not_allowed_handler)
    app.state.config = config

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:create_app",
        factory=True,
        host=Config.HOST,
        port=Config.PORT,
        reload=Config.ENVIRONMENT == "development",
    )
