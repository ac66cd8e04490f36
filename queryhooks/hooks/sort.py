"""Sort hook.

Reads the ``sort`` parameter and orders the query by it::

    from queryhooks.hooks import sort

    # ascending on field_1
    sort.run(select(Parent), {"sort": "field_1.asc"})

    # ascending on lower(field_1); only meaningful for text columns
    sort.run(select(Parent), {"sort": "field_1.asc.ci"})

Without a usable ``sort`` value the query is returned untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from queryhooks.core.config import settings
from queryhooks.core.sort_directive import is_empty_sort_value, parse_sort_directive
from queryhooks.core.sorting import apply_ordering


class SortHook:
    def __init__(self, param_key: str | None = None, strict: bool | None = None):
        self.param_key = param_key if param_key is not None else settings.SORT_PARAM_KEY
        self.strict = strict if strict is not None else settings.SORT_STRICT

    def run(self, query: Any, params: Mapping[str, Any]) -> Any:
        """Return ``query`` ordered by ``params[param_key]``.

        Other keys of ``params`` are ignored.
        """
        raw = params.get(self.param_key)
        if is_empty_sort_value(raw):
            return query

        directive = parse_sort_directive(raw, strict=self.strict)
        return apply_ordering(query, directive)


def run(query: Any, params: Mapping[str, Any]) -> Any:
    """Apply a :class:`SortHook` built from the current settings."""
    return SortHook().run(query, params)
