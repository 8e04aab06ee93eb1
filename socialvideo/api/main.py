"""FastAPI application for social video analysis."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from socialvideo import __version__
from socialvideo.api.middleware import CorrelationMiddleware
from socialvideo.api.routers import analyze, health
from socialvideo.lib.config_manager import config
from socialvideo.lib.logging_config import setup_logging
from socialvideo.services.analysis import AnalysisError

INVALID_JSON_MESSAGE = "Invalid JSON body"
INVALID_BODY_MESSAGE = "Invalid request body"

setup_logging(config.get("SERVICE_NAME"), config.get("LOG_LEVEL"))

app = FastAPI(
    title="Social Video Analysis API",
    description="Aggregates public YouTube metadata and captions into one payload",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get_list("CORS_ORIGINS"),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationMiddleware)

# Include routers
app.include_router(health.router)
app.include_router(analyze.router, tags=["analysis"])


def error_response(status_code: int, message: str) -> JSONResponse:
    """Render an error in the {"error": message} shape."""
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Map body parsing problems to 400 instead of FastAPI's 422."""
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            return error_response(400, INVALID_JSON_MESSAGE)
        if error.get("type") == "missing" and tuple(error.get("loc", ())) == ("body",):
            return error_response(400, INVALID_JSON_MESSAGE)
    return error_response(400, INVALID_BODY_MESSAGE)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Social Video Analysis API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "endpoints": {
            "analyze_social_video": "POST /analyze_social_video",
        },
    }
