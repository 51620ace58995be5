"""
Commerce API - Backend
CRUD service for products and customers
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from commerce_api.api import customers, products
from commerce_api.api.errors import register_exception_handlers
from commerce_api.core.config import Settings, get_settings
from commerce_api.core.database import build_engine, build_session_factory, check_connection, init_db
from commerce_api.core.logging_config import RequestLoggingMiddleware, configure_logging
from commerce_api.models.seed import seed_database

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        settings: Configuration; read from the environment / .env when omitted

    Returns:
        Application with its own engine and session factory on app.state
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    engine = build_engine(settings)
    session_factory = build_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await init_db(engine)
        if settings.SEED_DATA:
            await seed_database(session_factory)
        logger.info(f"{settings.API_TITLE} {settings.API_VERSION} started")
        yield
        await engine.dispose()
        logger.info("Database engine disposed")

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description=settings.API_DESCRIPTION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app, settings)

    # Include API routers
    app.include_router(products.router, prefix="/api/v1/products", tags=["Products"])
    app.include_router(customers.router, prefix="/api/v1/customers", tags=["Customers"])

    @app.get("/")
    async def root():
        """Root endpoint - API status check"""
        return {
            "message": settings.API_TITLE,
            "status": "online",
            "version": settings.API_VERSION,
        }

    @app.get("/health")
    async def health():
        """Health check endpoint for monitoring - tests database connectivity"""
        db_latency_ms = None
        db_error = None

        try:
            db_latency_ms = await check_connection(engine)
            db_status = "connected"
        except Exception as e:
            db_status = "disconnected"
            db_error = str(e)
            logger.warning(f"Health check could not reach the database: {e}")

        return {
            "status": "healthy" if db_status == "connected" else "degraded",
            "version": settings.API_VERSION,
            "database": {
                "status": db_status,
                "latency_ms": db_latency_ms,
                "error": db_error,
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run("commerce_api.main:app", host=_settings.API_HOST, port=_settings.API_PORT)
