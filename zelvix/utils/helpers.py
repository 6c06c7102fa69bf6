"""
Helper utilities
"""

import time
from typing import Any, List, Optional

def current_millis() -> int:
    """Milliseconds since the epoch, used to prefix stored file names"""
    return int(time.time() * 1000)

def split_keywords(value: Any) -> List[str]:
    """
    Keyword list from a list or a comma separated string

    Args:
        value: ["a", "b"] or "a, b"

    Returns:
        Trimmed, non-empty keywords in their original order
    """
    if value is None:
        return []
    if isinstance(value, str):
        parts = value.split(",")
    elif isinstance(value, (list, tuple)):
        parts = value
    else:
        raise ValueError("keywords must be a list or a comma separated string")
    return [str(part).strip() for part in parts if str(part).strip()]

def wrap_list(value: Any) -> List[Any]:
    """Wrap a single object into a list, pass lists through"""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]

async def read_limited(upload: Any, limit: int) -> Optional[bytes]:
    """
    Read an uploaded file without loading more than limit + 1 bytes

    Returns:
        The file contents, or None when the upload is larger than limit
    """
    if upload.size is not None and upload.size > limit:
        return None
    content = await upload.read(limit + 1)
    return None if len(content) > limit else content
