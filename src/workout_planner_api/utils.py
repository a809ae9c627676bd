"""Utility functions."""
from typing import Any, Optional


def to_int(s: Any) -> Optional[int]:
    """Convert an int-like value to int, returning None if conversion fails."""
    if s is None or isinstance(s, bool):
        return None
    try:
        if isinstance(s, float):
            return int(s)
        return int(str(s).strip())
    except (TypeError, ValueError, OverflowError):
        return None


def upper_from_range(txt: str) -> Optional[int]:
    """Extract upper bound from a range string like '10-12'."""
    try:
        a, b = txt.replace("–", "-").split("-", 1)
        return int(b.strip())
    except (AttributeError, ValueError):
        return None
