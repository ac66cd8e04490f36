"""Parsing of the ``sort`` request parameter.

The parameter encodes a single ordering as ``<field-path>.<direction>[.ci]``::

    "field_1.asc"          ascending on field_1
    "field_1.desc"         descending on field_1
    "field_1.asc.ci"       ascending on lower(field_1)
    "assoc.field_1.desc"   descending on the dotted field "assoc.field_1"

Anything that does not match the grammar yields no directive, unless the
caller asks for strict parsing.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

# One or more non-empty dot-separated segments.
_FIELD_PATH = r"[^.\s]+(?:\.[^.\s]+)*"
_CASE_INSENSITIVE_SUFFIX = re.compile(rf"(?P<rest>{_FIELD_PATH})\.ci")
_DIRECTION_SUFFIX = re.compile(rf"(?P<field>{_FIELD_PATH})\.(?P<direction>asc|desc)")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortDirective(BaseModel):
    """A parsed single-field ordering request."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., min_length=1, description="Field path, dots preserved")
    direction: SortDirection
    case_insensitive: bool = False


class SortParseError(ValueError):
    """Raised by strict parsing when the sort value is malformed."""

    def __init__(self, raw: Any, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid sort value {raw!r}: {reason}")


def is_empty_sort_value(raw: Any) -> bool:
    """True for an absent, empty-string or empty-sequence sort value."""
    if raw is None:
        return True
    if isinstance(raw, str):
        return raw == ""
    return isinstance(raw, Sequence) and len(raw) == 0


def _reject(raw: Any, reason: str, strict: bool) -> None:
    if strict:
        raise SortParseError(raw, reason)
    logger.debug("Ignoring sort value %r: %s", raw, reason)
    return None


def parse_sort_directive(raw: Any, strict: bool = False) -> SortDirective | None:
    """Parse a raw ``sort`` parameter value into a :class:`SortDirective`.

    Args:
        raw: The parameter value. Usually a string; a one-element list or
            tuple (as produced by multi-value query string parsing) is
            unwrapped.
        strict: Raise :class:`SortParseError` for malformed values instead of
            returning ``None``.

    Returns:
        The directive, or ``None`` when no sort was requested or the value
        could not be interpreted.
    """
    if is_empty_sort_value(raw):
        return None

    value = raw
    if isinstance(value, (list, tuple)):
        if len(value) > 1:
            return _reject(raw, "only one sort field is supported", strict)
        value = value[0]
        if is_empty_sort_value(value):
            return None

    if not isinstance(value, str):
        return _reject(raw, "expected a string", strict)

    case_insensitive = False
    ci_match = _CASE_INSENSITIVE_SUFFIX.fullmatch(value)
    if ci_match:
        value = ci_match.group("rest")
        case_insensitive = True

    match = _DIRECTION_SUFFIX.fullmatch(value)
    if not match:
        return _reject(raw, "expected '<field>.asc' or '<field>.desc'", strict)

    return SortDirective(
        field=match.group("field"),
        direction=SortDirection(match.group("direction")),
        case_insensitive=case_insensitive,
    )
