"""
FastAPI application entry point for the Stargate astronaut duty tracker.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from app.config import get_settings
from app.db.database import init_db, SessionLocal
from contextlib import asynccontextmanager
import logging

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info("Starting Stargate duty tracker API")

    # Initialize database
    try:
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")

    yield

    # Shutdown
    logger.info("Shutting down Stargate duty tracker API")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Backend API for tracking people, astronaut careers and duty assignments",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Import and include routers
from app.api import people, duties, reports

# Include all API routers with /api prefix
app.include_router(
    people.router,
    prefix="/api",
    tags=["people"]
)
app.include_router(
    duties.router,
    prefix="/api",
    tags=["duties"]
)
app.include_router(
    reports.router,
    prefix="/api",
    tags=["reports"]
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    try:
        # Check database connection
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
        finally:
            db.close()

        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": settings.app_version,
            "database": "connected"
        }
    except Exception as e:
        return {
            "status": "unhealthy",
            "app": settings.app_name,
            "version": settings.app_version,
            "error": str(e)
        }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Stargate Astronaut Career Tracking API",
        "version": settings.app_version,
        "docs": "/api/docs",
        "endpoints": {
            "people": "/api/people",
            "duties": "/api/duties",
            "reports": "/api/reports/summary",
            "audit": "/api/audit"
        }
    }
