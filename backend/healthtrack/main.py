"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from healthtrack.config import get_settings
from healthtrack.database import init_db
from healthtrack.api import api_router
from healthtrack.errors import HealthTrackError, InternalError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    if not settings.jwt_secret_key:
        logger.warning("JWT_SECRET_KEY is not set; signup and login will fail")
    await init_db()
    logger.info("Database ready")
    yield
    # Shutdown
    pass


app = FastAPI(
    title=settings.app_name,
    version=API_VERSION,
    description="HealthTrack - wellness tracking of exercises and meals",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins.split(","),
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)


def _error_response(exc: HealthTrackError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
        headers=headers,
    )


@app.exception_handler(HealthTrackError)
async def healthtrack_error_handler(request: Request, exc: HealthTrackError):
    if exc.status_code >= 500:
        logger.error("%s %s failed (%s): %s", request.method, request.url.path, exc.kind.value, exc.message)
    else:
        logger.info("%s %s rejected (%s)", request.method, request.url.path, exc.kind.value)
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected request for %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request"},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(InternalError())


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unexpected error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(InternalError())


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "HealthTrack backend is running"


@app.get("/api")
async def api_info():
    return {"message": "HealthTrack API is running", "version": API_VERSION}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("healthtrack.main:app", host="0.0.0.0", port=5000, reload=settings.debug)
