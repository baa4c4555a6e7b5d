"""Logic for overlaying user settings on the defaults."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` overlaid with ``update``, merging nested mappings.

    Non-mapping values in ``update`` replace the value in ``base`` outright.
    Neither input is modified.
    """
    merged = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = deep_merge(current, value)
        merged[key] = value
    return merged
