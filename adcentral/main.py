"""
Main entry point for the FastAPI application
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from adcentral.api.routes import api_router
from adcentral.core.config import settings
from adcentral.db.database import create_app_tables
from adcentral.db.record_store import StoreError
import logging

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting %s...", settings.PROJECT_NAME)

    # Create database tables
    await create_app_tables()
    logger.info("Database tables created/verified")

    yield

    # Shutdown
    logger.info("Shutting down %s...", settings.PROJECT_NAME)

async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Report record store failures without interpreting them"""
    logger.error("Record store error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc)}
    )

def create_app() -> FastAPI:
    """Create and configure the FastAPI application"""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_DESCRIPTION,
        version=settings.VERSION,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        lifespan=lifespan
    )

    app.add_exception_handler(StoreError, store_error_handler)

    # Include API router
    app.include_router(api_router, prefix=settings.API_V1_STR)

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "adcentral.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
