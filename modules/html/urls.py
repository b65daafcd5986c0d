"""
URL building utilities - no external dependencies.
"""

__all__ = ["build_query_string"]

from urllib.parse import urlencode


def build_query_string(params: dict[str, str | int | bool | None]) -> str:
    """
    Build a URL query string from parameters.

    Args:
        params: Parameter names to values. None values are dropped,
                bools become "true"/"false".

    Returns:
        Query string starting with "?", or "" when nothing is left

    Example:
        >>> build_query_string({"hex": "FF0000FF", "signed": True})
        '?hex=FF0000FF&signed=true'
        >>> build_query_string({"signed": None})
        ''
    """
    filtered = {
        k: ("true" if v else "false") if isinstance(v, bool) else str(v)
        for k, v in params.items()
        if v is not None
    }
    return "?" + urlencode(filtered) if filtered else ""
