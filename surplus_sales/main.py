"""
Main FastAPI application entry point.
"""
import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from surplus_sales.config import get_settings
from surplus_sales.database import close_db, init_db
from surplus_sales.errors import register_exception_handlers
from surplus_sales.routers import accessories, cabs, materials, users

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan events for the application.
    Handles startup and shutdown events.
    """
    # Startup
    logger.info("🚀 Starting %s %s", settings.app_name, settings.app_version)
    await init_db()
    logger.info("🌐 API available at: %s", settings.api_prefix)

    yield

    # Shutdown
    await close_db()
    logger.info("👋 Shutting down %s", settings.app_name)


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    ## Surplus Sales Inventory API

    Inventory and user management for a surplus vehicle parts business.

    ### Entities:
    * **Accessories**: Parts and add-ons with make, colour and derived stock status
    * **Materials**: Raw materials by category and supplier
    * **Cabs**: Multicab vehicles in stock
    * **Users**: Authentication and admin/staff account management
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Origin", "Content-Type", "Accept", "Authorization"],
    expose_headers=["X-Process-Time"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its status and timing."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    logger.info(
        "%s %s - %s - %.4fs",
        request.method,
        request.url.path,
        response.status_code,
        process_time,
    )
    response.headers["X-Process-Time"] = str(process_time)
    return response


register_exception_handlers(app)

# Include routers
app.include_router(users.router, prefix=settings.api_prefix)
app.include_router(accessories.router, prefix=settings.api_prefix)
app.include_router(materials.router, prefix=settings.api_prefix)
app.include_router(cabs.router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": f"Welcome to {settings.app_name} API",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": settings.app_version,
        "time": datetime.now(timezone.utc).isoformat(),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "surplus_sales.main:app",
        host="0.0.0.0",
        port=8080,
        reload=settings.debug,
    )
