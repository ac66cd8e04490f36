"""Ordering clauses for SQLAlchemy queries."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy import asc, column, desc, func, select
from sqlalchemy.orm import Query
from sqlalchemy.sql.elements import ColumnClause, ColumnElement
from sqlalchemy.sql.selectable import GenerativeSelect

from queryhooks.core.sort_directive import SortDirection, SortDirective

logger = logging.getLogger(__name__)

FieldTransform = Callable[[ColumnElement[Any]], ColumnElement[Any]]


def field_ref(field: str) -> ColumnClause[Any]:
    """Build a plain column reference for a field path.

    Dotted paths are kept as a single identifier; the field is not checked
    against any table, so an unknown name only fails when the query runs.
    """
    return column(field)


def case_insensitive(field: ColumnElement[Any]) -> ColumnElement[Any]:
    """Wrap a field reference so it is compared by its lower-cased value."""
    return func.lower(field)


def transform_for(directive: SortDirective) -> FieldTransform | None:
    if directive.case_insensitive:
        return case_insensitive
    return None


def _orderable(query: Any) -> Any:
    # Mapped classes and tables are promoted to a SELECT.
    if isinstance(query, (GenerativeSelect, Query)):
        return query
    return select(query)


def apply_ordering(
    query: Any,
    directive: SortDirective | None,
    transform: FieldTransform | None = None,
) -> Any:
    """Append the ordering described by ``directive`` to ``query``.

    Args:
        query: A ``Select``, an ORM ``Query``, or anything ``select()``
            accepts (mapped class, table).
        directive: The parsed sort request. ``None`` leaves the query as is.
        transform: Optional field-reference decorator applied before ordering.
            Defaults to the one the directive asks for (``case_insensitive``
            for ``.ci`` sorts).

    Returns:
        A new query with the ordering appended, or ``query`` itself when there
        is no directive.
    """
    if directive is None:
        return query

    if transform is None:
        transform = transform_for(directive)

    key: ColumnElement[Any] = field_ref(directive.field)
    if transform is not None:
        key = transform(key)

    order_func = asc if directive.direction == SortDirection.ASC else desc
    logger.debug(
        "Ordering by %s %s (case_insensitive=%s)",
        directive.field,
        directive.direction.value,
        directive.case_insensitive,
    )
    return _orderable(query).order_by(order_func(key))
