"""Recursive merge of a user configuration over the defaults."""

from typing import Any

ADDITIVE_KEYS = frozenset({"customTags"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``update`` merged on top; neither input is changed.

    - Mappings (e.g. ``externalLinks``) merge key by key.
    - Lists replace the default list, except ``customTags``, whose entries
      are added to the defaults, deduplicated and sorted.
    - Everything else is replaced.
    """
    result = dict(base)
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif key in ADDITIVE_KEYS and isinstance(current, list) and isinstance(value, list):
            result[key] = sorted({*current, *value})
        else:
            result[key] = value
    return result
