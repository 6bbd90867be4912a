"""
Parameter validation helpers shared by routers and services
"""
from typing import Any

from app.core.exceptions import InvalidArgument


def parse_positive_int(value: Any, param: str) -> int:
    """
    Parse a positive integer from a path/query string or int.

    Raises:
        InvalidArgument: INVALID_NUMBER_PARAM naming ``param``
    """
    if isinstance(value, bool):
        raise InvalidArgument("INVALID_NUMBER_PARAM", param=param)

    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        number = int(value.strip())
    else:
        raise InvalidArgument("INVALID_NUMBER_PARAM", param=param)

    if number <= 0:
        raise InvalidArgument("INVALID_NUMBER_PARAM", param=param)
    return number


def parse_pagination(page: Any, limit: Any, max_limit: int) -> tuple:
    """Validate page/limit; limit is capped at ``max_limit``."""
    page = parse_positive_int(page, "page")
    limit = parse_positive_int(limit, "limit")
    if limit > max_limit:
        raise InvalidArgument("LIMIT_TOO_LARGE", param="limit", max=max_limit)
    return page, limit


def ensure_non_empty_string(value: Any, param: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument("INVALID_PARAM", param=param)
    return value
