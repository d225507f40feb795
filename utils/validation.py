"""
Input validation utilities.
"""

import re
from typing import Any


_INVALID_INDEX_CHARS = re.compile(r'[\\/*?"<>|, #:]')


def validate_index_name(name: str) -> None:
    """
    Validate a concrete Elasticsearch index name.

    Args:
        name: Index name to validate

    Raises:
        ValueError: If the name would be rejected by Elasticsearch
    """
    if not name:
        raise ValueError("Index name cannot be empty")

    if name in (".", ".."):
        raise ValueError("Index name cannot be '.' or '..'")

    if name[0] in "_-+":
        raise ValueError("Index name cannot start with '_', '-' or '+'")

    if name != name.lower():
        raise ValueError("Index name must be lowercase")

    invalid_chars = sorted(set(_INVALID_INDEX_CHARS.findall(name)))
    if invalid_chars:
        raise ValueError(f"Invalid characters in index name: {invalid_chars}")

    if len(name.encode("utf-8")) > 255:
        raise ValueError("Index name cannot be longer than 255 bytes")


def validate_size(size: int, max_size: int = 10000) -> int:
    """
    Validate and clamp size parameter.

    Args:
        size: Requested size
        max_size: Maximum allowed size

    Returns:
        Valid size value
    """
    return clamp_value(size, min_value=1, max_value=max_size)


def validate_from(from_: int) -> int:
    """Clamp a pagination offset to zero or more."""
    return max(0, from_)


def clamp_value(value: Any, min_value: Any, max_value: Any) -> Any:
    """
    Clamp a value between min and max.

    Args:
        value: Value to clamp
        min_value: Minimum allowed value
        max_value: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_value, min(value, max_value))
