import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .helpers.config import get_settings
from .helpers.errors import INVALID_INPUT
from .routes import base, combine

logger = logging.getLogger(__name__)

settings = get_settings()

# Initialize app
app = FastAPI(
    title=settings.APP_NAME,
    description="Combine scene image URLs into a summary or a single composited PNG",
    version=settings.APP_VERSION,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
)


@app.on_event("startup")
async def startup_event():
    logger.info("Server running on port %s", settings.PORT)
    logger.info("Environment: %s", settings.NODE_ENV)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    # Error factories put {error, message} in detail; serve it as the whole body
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        content = exc.detail
    else:
        content = {"detail": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Malformed request"
    return JSONResponse(status_code=400, content={"error": INVALID_INPUT, "message": message})


app.include_router(base.base_router)
app.include_router(combine.combine_router)
