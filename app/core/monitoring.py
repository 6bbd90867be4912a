"""
Monitoring utilities for metrics and error tracking
"""
from typing import Dict, Any, Optional
from datetime import datetime, timezone
import logging
import time
from functools import wraps

from app.core.exceptions import AppError, Internal

logger = logging.getLogger(__name__)


def track_error(
    error_type: str,
    entity: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None
):
    """
    Track error for monitoring.

    Args:
        error_type: Type of error
        entity: Content kind or entity name (optional)
        metadata: Additional metadata
    """
    error_data = {
        "error_type": error_type,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "entity": entity,
        "metadata": metadata or {},
    }

    logger.error(f"Error tracked: {error_data}")


def track_metric(
    metric_name: str,
    value: float,
    tags: Optional[Dict[str, str]] = None
):
    """
    Track metric for monitoring.

    Args:
        metric_name: Name of metric
        value: Metric value
        tags: Additional tags
    """
    metric_data = {
        "metric": metric_name,
        "value": value,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "tags": tags or {},
    }

    logger.debug(f"Metric: {metric_data}")


def service_operation(func):
    """
    Decorator for service methods that touch the database.

    Known application errors pass through untouched. Anything else rolls the
    session back, is logged with its stack trace and surfaces as Internal.
    The decorated method's instance must expose ``db`` and may expose
    ``entity_name``.

    Usage:
        @service_operation
        def create(self, data):
            ...
    """
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        start_time = time.time()
        entity = getattr(self, "entity_name", None)

        try:
            result = func(self, *args, **kwargs)
        except AppError:
            self.db.rollback()
            track_metric(
                f"{func.__qualname__}.duration",
                time.time() - start_time,
                tags={"status": "rejected"}
            )
            raise
        except Exception as e:
            self.db.rollback()
            duration = time.time() - start_time
            logger.error(f"{func.__qualname__} failed: {e}", exc_info=True)
            track_error(
                f"{func.__qualname__}.error",
                entity=entity,
                metadata={"error": type(e).__name__, "duration": duration}
            )
            raise Internal() from e

        track_metric(
            f"{func.__qualname__}.duration",
            time.time() - start_time,
            tags={"status": "success"}
        )
        return result

    return wrapper
