"""
Health check utilities
"""
from typing import Dict, Any
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.core.database import SessionLocal
from app.core.config import settings
from app.core.redis import cache
import redis
import logging

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


async def check_database() -> Dict[str, Any]:
    """
    Check database connectivity.

    Returns:
        Dictionary with status and details
    """
    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
            return {
                "status": "healthy",
                "message": "Database connection successful"
            }
        finally:
            db.close()
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        return {
            "status": "unhealthy",
            "message": "Database connection failed"
        }


async def check_redis() -> Dict[str, Any]:
    """
    Check Redis connectivity. Redis only backs the sitemap cache,
    so an outage degrades but does not fail the service.

    Returns:
        Dictionary with status and details
    """
    if not cache.is_connected:
        return {
            "status": "degraded",
            "message": "Sitemap cache disabled"
        }
    try:
        r = redis.from_url(settings.REDIS_URL, socket_connect_timeout=2)
        r.ping()
        return {
            "status": "healthy",
            "message": "Redis connection successful"
        }
    except redis.RedisError as e:
        logger.warning(f"Redis health check failed: {e}")
        return {
            "status": "unhealthy",
            "message": "Redis connection failed"
        }


async def get_health_status() -> Dict[str, Any]:
    """
    Get overall health status.

    Returns:
        Dictionary with health status of all components
    """
    db_status = await check_database()
    redis_status = await check_redis()

    overall_status = "healthy"
    if db_status["status"] != "healthy":
        overall_status = "unhealthy"

    return {
        "status": overall_status,
        "version": VERSION,
        "environment": settings.ENVIRONMENT,
        "components": {
            "database": db_status,
            "redis": redis_status,
        }
    }
