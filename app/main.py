"""
FastAPI application entry point
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError
import logging
import time

from app.core.config import settings
from app.core.database import engine, Base, SessionLocal
from app.core.dependencies import localized
from app.core.exceptions import AppError, Internal
from app.core.health import get_health_status, VERSION
from app.core.languages import SUPPORTED_LANGUAGES
from app.core.logging_config import setup_logging
from app.core.redis import cache
from app.services.admin_service import AdminService
from app.services.content_kinds import CONTENT_KINDS

# Register all models on Base.metadata
from app import models  # noqa: F401

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Multilingual content management backend with SEO sitemaps",
    version=VERSION,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

PUBLIC_PREFIXES = {kind.path_segment for kind in CONTENT_KINDS.values()} | set(SUPPORTED_LANGUAGES) | {"sitemap"}

SEO_HEADERS = {
    "Cache-Control": "public, max-age=3600",
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
}


@app.on_event("startup")
async def startup():
    """Initialize database, cache and bootstrap admin on startup"""
    logger.info(f"Starting {settings.APP_NAME}...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created/verified")
    except SQLAlchemyError as e:
        logger.error(f"Error creating database tables: {e}", exc_info=True)

    cache.connect()

    db = SessionLocal()
    try:
        AdminService(db).ensure_default_admin()
    finally:
        db.close()

    # Check health on startup
    health = await get_health_status()
    if health["status"] == "healthy":
        logger.info("All systems healthy")
    else:
        logger.warning(f"Health check issues: {health}")


@app.on_event("shutdown")
async def shutdown():
    """Cleanup on shutdown"""
    logger.info(f"Shutting down {settings.APP_NAME}...")
    cache.disconnect()


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"{settings.APP_NAME} API",
        "version": VERSION,
        "status": "running"
    }


@app.get("/health")
async def health():
    """
    Health check endpoint.
    Returns status of all components.
    """
    return await get_health_status()


@app.get("/health/ready")
async def readiness():
    """
    Readiness probe.
    Returns 200 if ready to accept traffic.
    """
    health_status = await get_health_status()

    if health_status["status"] == "healthy":
        return JSONResponse(
            content=health_status,
            status_code=status.HTTP_200_OK
        )
    else:
        return JSONResponse(
            content=health_status,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE
        )


@app.get("/health/live")
async def liveness():
    """
    Liveness probe.
    Returns 200 if application is alive.
    """
    return {"status": "alive"}


def _is_public_content(request: Request) -> bool:
    if request.method != "GET":
        return False
    first_segment = request.url.path.strip("/").split("/", 1)[0]
    return first_segment in PUBLIC_PREFIXES


# SEO headers on public content responses
@app.middleware("http")
async def seo_headers(request: Request, call_next):
    response = await call_next(request)
    if _is_public_content(request) and response.status_code == status.HTTP_200_OK:
        for header, value in SEO_HEADERS.items():
            response.headers[header] = value
    return response


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests"""
    start_time = time.time()

    logger.info(f"{request.method} {request.url.path} - {request.client.host if request.client else 'unknown'}")

    try:
        response = await call_next(request)
        process_time = time.time() - start_time

        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.3f}s"
        )

        return response
    except Exception as e:
        process_time = time.time() - start_time
        logger.error(
            f"{request.method} {request.url.path} - "
            f"Error: {str(e)} - "
            f"Time: {process_time:.3f}s",
            exc_info=True
        )
        raise


# ==================== EXCEPTION HANDLERS ====================

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Render service errors as {error, message} in the caller's language"""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.error,
            "message": localized(request, exc.message_key, **exc.params),
        }
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors (400), not 422"""
    details = [
        {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "invalid_argument",
            "message": localized(request, "VALIDATION_FAILED"),
            "details": details,
        }
    )


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    logger.warning(f"Rate limit exceeded: {request.url.path} - {request.client.host if request.client else 'unknown'}")
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={
            "error": "rate_limited",
            "message": localized(request, "RATE_LIMITED"),
        }
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions"""
    logger.error(
        f"Unhandled exception: {exc}",
        exc_info=True,
        extra={
            "path": request.url.path,
            "method": request.method,
        }
    )

    error = Internal()
    return JSONResponse(
        status_code=error.status_code,
        content={
            "error": error.error,
            "message": localized(request, error.message_key),
        }
    )


# Include routers
from app.api.v1 import admin, sitemap, statistics
from app.api.v1.content import content_routers

app.state.limiter = admin.limiter

app.include_router(admin.router, prefix="/admin")
app.include_router(admin.accounts_router, prefix="/admin", tags=["admin"])
app.include_router(statistics.router, prefix="/statistics", tags=["statistics"])
app.include_router(sitemap.router, tags=["sitemap"])
for content_router in content_routers:
    app.include_router(content_router)
