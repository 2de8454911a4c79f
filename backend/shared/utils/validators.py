"""
Input validation helpers shared by the query pipeline.
"""

import re

_SEPARATORS = re.compile(r"[_\-\s]")


def escape_like_pattern(value: str) -> str:
    """
    Escape special characters in LIKE patterns.

    SQL LIKE uses % and _ as wildcards. Use together with ``escape="\\\\"``
    on the SQLAlchemy operator.

    Args:
        value: The search string to escape

    Returns:
        The escaped string safe for use in LIKE patterns
    """
    if not value:
        return value

    # Escape the escape character first, then the wildcards
    value = value.replace("\\", "\\\\")
    value = value.replace("%", "\\%")
    value = value.replace("_", "\\_")
    return value


def normalize_field_name(name: str) -> str:
    """
    Reduce a field name to a case- and separator-insensitive key.

    ``PriceListId``, ``priceListId`` and ``price_list_id`` all map to
    ``pricelistid``.
    """
    return _SEPARATORS.sub("", name).lower()
