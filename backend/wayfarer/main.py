"""
FastAPI entrypoint for Wayfarer backend application.
"""
import logging
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from wayfarer.core.config import settings
from wayfarer.core.errors import WayfarerError
from wayfarer.core.utils import format_error
from wayfarer.api.router import api_router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Wayfarer API",
    description="Backend API for trip planning and group expense splitting",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(WayfarerError)
async def wayfarer_error_handler(request: Request, exc: WayfarerError):
    """Translate service errors (not found, invalid order) to HTTP errors."""
    logger.warning(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=format_error(exc.message))


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    """Foreign key and uniqueness violations are reported with the database message."""
    message = str(exc.orig) if exc.orig is not None else str(exc)
    logger.error(f"{request.method} {request.url.path} integrity violation: {message}")
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=format_error(message))


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "Wayfarer API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
