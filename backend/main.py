import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel

import sys
import os

sys.path.append(os.path.dirname(__file__))

from app.core.config import settings
from app.api import api_router

# Register every table with SQLModel metadata
from app import models  # noqa: F401

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# --- App Initialization ---
app = FastAPI(
    title="Class Reunion API",
    description="Content, guestbook and admin API for the class reunion site",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router)

# Public URLs of uploaded objects
app.mount(
    settings.MEDIA_URL,
    StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
    name="media",
)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "The service is temporarily unavailable. Please try again."},
    )


# --- Event Handlers ---
@app.on_event("startup")
async def startup_event():
    logger.info("Starting up Class Reunion API...")

    from app.core.database import engine

    if settings.AUTO_CREATE_TABLES:
        if engine:
            try:
                logger.info("Auto-creating database tables...")
                SQLModel.metadata.create_all(engine)
                logger.info("Database tables created successfully!")
            except SQLAlchemyError as e:
                logger.error(f"Failed to create database tables: {e}")
                logger.error("Database functionality may not work properly.")
        else:
            logger.warning("Database engine not available. Skipping table creation.")
            logger.warning("Please check database connection and restart the service.")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down Class Reunion API...")


# --- API Endpoints ---
@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Class Reunion API", "version": "1.0.0"}


@app.get("/health")
async def health_check():
    """Health check endpoint with database status."""
    from app.core.database import engine
    from sqlalchemy import text

    health = {"status": "healthy", "database": "unknown"}

    if engine:
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            health["database"] = "connected"
        except SQLAlchemyError as e:
            health["database"] = f"error: {str(e)}"
            health["status"] = "degraded"
    else:
        health["database"] = "not_available"
        health["status"] = "degraded"

    return health
