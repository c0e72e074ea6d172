r"""Query parameter values and their string conversion.

Request parameters are restricted to four primitive kinds. Each of them
converts to the string used in URL query items.
"""

from __future__ import annotations

__all__ = ["QueryValue", "to_query_string"]

from typing import Any

QueryValue = str | int | float | bool


def to_query_string(value: Any) -> str | None:
    """Convert a parameter value to its query string form.

    Booleans render in lowercase, like JSON. Values outside the four
    supported kinds yield ``None`` so the caller can drop them.

    Args:
        value: The parameter value to convert.

    Returns:
        The string form of the value, or ``None`` if the value is not
        a supported query value.

    Example:
        ```pycon
        >>> from endpointer.query import to_query_string
        >>> to_query_string(42)
        '42'
        >>> to_query_string(True)
        'true'
        >>> to_query_string(3.14)
        '3.14'
        >>> to_query_string(object()) is None
        True

        ```
    """
    # bool must be checked first because it subclasses int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return None
