"""Utility functions for gradle-poet."""

from __future__ import annotations

from typing import Any

from expandvars import expandvars


def expandvars_dict(data: dict[str, Any], nounset: bool = False) -> dict[str, Any]:
    """Recursively expand environment variables in every string of a mapping.

    With ``nounset``, referencing an unset variable without a default raises
    instead of expanding to an empty string.
    """

    def expand_item(item: Any) -> Any:
        if isinstance(item, str):
            return expandvars(item, nounset=nounset)
        if isinstance(item, dict):
            return expandvars_dict(item, nounset=nounset)
        if isinstance(item, list):
            return [expand_item(i) for i in item]
        return item

    return {key: expand_item(value) for key, value in data.items()}


def unique(items) -> tuple:
    """Drop duplicates while keeping first-seen order.

    Stands in for set semantics without depending on hash ordering,
    which changes between interpreter runs.
    """
    return tuple(dict.fromkeys(items))
