#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

import uuid
from typing import Optional, Any, List
from datetime import datetime

from fastapi import HTTPException


def safe_str(value: Optional[Any], default: str = "") -> str:
    """
    Safely convert value to string.

    Args:
        value: Value to convert.
        default: Default value if value is None.

    Returns:
        String value.
    """
    if value is None:
        return default
    return str(value)


def safe_list(value: Optional[Any]) -> List[str]:
    """Convert a JSON array column value to a list of strings."""
    if not value:
        return []
    return [str(item) for item in value]


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert datetime to ISO format string.

    Args:
        dt: Datetime object.

    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    return dt.isoformat()


def parse_uuid(value: str, name: str) -> uuid.UUID:
    """Parse a path parameter as UUID or fail with 400."""
    try:
        return uuid.UUID(value)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid {name} format: {value}. Must be a valid UUID."
        )
