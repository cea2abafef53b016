"""Field access shared by the matcher, ranker and facet builder.

Records may be ProfileRecord models, ORM rows, or plain dicts from a projection
query; missing fields read as None.
"""

from collections.abc import Mapping
from typing import Any


def get_field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def get_array(record: Any, name: str) -> list:
    """Array field value, coalesced to [] when null or not a list."""
    value = get_field(record, name)
    if isinstance(value, (list, tuple)):
        return list(value)
    return []
