"""Query string helper for resource paths."""

from typing import Any

import httpx


def with_query(path: str, **params: Any) -> str:
    """Append the non-None ``params`` to ``path`` as an encoded query string.

    Lists are sent comma-separated, the way the scheduler parses them.
    """
    cleaned = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = ",".join(str(item) for item in value)
        cleaned[key] = value
    if not cleaned:
        return path
    return f"{path}?{httpx.QueryParams(cleaned)}"
