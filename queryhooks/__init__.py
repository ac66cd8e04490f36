from queryhooks.core.sort_directive import (
    SortDirection,
    SortDirective,
    SortParseError,
    parse_sort_directive,
)
from queryhooks.core.sorting import apply_ordering, case_insensitive, field_ref
from queryhooks.hooks.sort import SortHook

__all__ = [
    "SortDirection",
    "SortDirective",
    "SortHook",
    "SortParseError",
    "apply_ordering",
    "case_insensitive",
    "field_ref",
    "parse_sort_directive",
]
