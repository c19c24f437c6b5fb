"""Main FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from wanderlux.config import get_settings
from wanderlux.pricing import PRICING_TABLE
from wanderlux.web.routes import router


# Configure logging
logging.basicConfig(level=get_settings().log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(
        f"Serving forms for {len(PRICING_TABLE.destinations)} destinations "
        f"and {len(PRICING_TABLE.styles)} travel styles"
    )

    yield

    logger.info("Application shutting down")


def create_app() -> FastAPI:
    """Create FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=f"{settings.site_name} Forms",
        description="Trip cost calculator, appointment and contact forms",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Include routes
    app.include_router(router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "wanderlux.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
