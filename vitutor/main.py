"""
vitutor - Vietnamese/English learning assistant
Main application entry point.
"""

import contextlib
import traceback
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from vitutor import config
from vitutor.logger import configure_logging, logger
from vitutor.middleware import LoggingMiddleware
from vitutor.routers import gemini_router


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    # Re-configure logging so it survives uvicorn's own setup
    configure_logging()
    logger.info(
        "Starting up...",
        provider_configured=config.get_api_key() is not None,
        model=config.get_text_model(),
    )
    if config.get_api_key() is None:
        logger.warning("GEMINI_API_KEY is not set; requests will fail with a configuration error")

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title="vitutor",
    description="Vietnamese/English translation, grammar and vocabulary assistant",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)
app.add_middleware(LoggingMiddleware)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        error = "Method not allowed"
    else:
        error = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": error},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Invalid request body", path=request.url.path, errors=str(exc.errors()))
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Missing action or payload"},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {request.method} {request.url.path}")
    logger.error(traceback.format_exc())
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error"},
    )


app.include_router(gemini_router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint for API discovery."""
    return JSONResponse(
        content={
            "message": "vitutor API Server",
            "version": "1.0.0",
            "docs": "/docs",
            "status": "active",
        }
    )


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return JSONResponse(
        {
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "provider_configured": config.get_api_key() is not None,
        }
    )
