"""Main FastAPI application."""
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse, JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
import os

from event_checkin.api.router import api_router
from event_checkin.api.deps import get_store
from event_checkin.core.config import settings
from event_checkin.core.exceptions import StorageError
from event_checkin.core.rate_limit import limiter
from event_checkin.core.logging_config import setup_logging, get_logger
from event_checkin.middleware import LoggingMiddleware, SecurityHeadersMiddleware
from event_checkin.storage import RecordStore, create_store

setup_logging(level=settings.LOG_LEVEL, json_logs=settings.ENVIRONMENT == "production")
logger = get_logger(__name__)

if settings.ENVIRONMENT == "production":
    settings.validate_production_config()

logger.info(
    "application_starting",
    app_title=settings.APP_TITLE,
    app_version=settings.APP_VERSION,
    environment=settings.ENVIRONMENT,
    storage_backend=settings.STORAGE_BACKEND,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Tests may install their own store before startup
    if getattr(app.state, "store", None) is None:
        app.state.store = create_store(settings)
    yield


app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)
app.state.store = None

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as 400 rather than FastAPI's default 422."""
    errors = jsonable_encoder(exc.errors(), custom_encoder={Exception: str})
    message = errors[0]["msg"] if errors else "Invalid request"
    logger.info("request_validation_failed", errors=len(errors))
    return JSONResponse(status_code=400, content={"detail": message, "errors": errors})


app.add_middleware(SecurityHeadersMiddleware, enable_hsts=settings.ENVIRONMENT == "production")

# Add logging middleware (must be added before other middleware for proper request tracking)
app.add_middleware(LoggingMiddleware)


@app.middleware("http")
async def add_api_version_header(request: Request, call_next):
    """Add X-API-Version header to all responses for version tracking."""
    response = await call_next(request)
    response.headers["X-API-Version"] = settings.APP_VERSION
    return response

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "X-Request-ID", "X-Checkin-URL"],
)

app.include_router(api_router)


# Health endpoint - must be defined before catch-all route
@app.get("/health")
async def health_check(store: RecordStore = Depends(get_store)):
    """
    Health check endpoint.

    Returns:
        - status: "healthy" or "unhealthy"
        - environment: Current environment setting
        - storage: backend name and reachability

    Returns 503 if the record store is unreachable.
    """
    health_status = {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "storage": {
            "backend": settings.STORAGE_BACKEND,
            "status": "connected",
        },
    }

    try:
        store.ping()
    except StorageError as e:
        health_status["status"] = "unhealthy"
        health_status["storage"]["status"] = f"error: {e.message}"
        logger.error("health_check_failed", error=e.message)
        raise HTTPException(status_code=503, detail=health_status)

    return health_status


# Serve the built frontend (check-in form, QR display, dashboards)
if os.path.exists(settings.FRONTEND_BUILD_PATH):
    assets_path = f"{settings.FRONTEND_BUILD_PATH}/assets"
    if os.path.exists(assets_path):
        app.mount("/assets", StaticFiles(directory=assets_path), name="assets")

    @app.get("/", response_class=FileResponse)
    async def serve_root():
        """Serve frontend root."""
        return FileResponse(f"{settings.FRONTEND_BUILD_PATH}/index.html")

    @app.get("/{full_path:path}")
    async def serve_frontend(full_path: str):
        """Serve the frontend for all non-API routes such as /checkin/<id>."""
        if full_path.startswith("api") or full_path.startswith("docs") or full_path.startswith("redoc") or full_path.startswith("openapi.json"):
            raise HTTPException(status_code=404, detail="Not found")

        build_root = os.path.realpath(settings.FRONTEND_BUILD_PATH)
        file_path = os.path.realpath(os.path.join(build_root, full_path))
        if file_path.startswith(build_root + os.sep) and os.path.isfile(file_path):
            return FileResponse(file_path)

        # Client-side routing handles everything else
        return FileResponse(f"{settings.FRONTEND_BUILD_PATH}/index.html")
