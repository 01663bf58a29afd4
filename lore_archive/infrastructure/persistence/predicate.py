"""Translation of filter predicates into SQLAlchemy WHERE clauses.

The filter builder is lenient and lets values it could not coerce through
(``nan`` numbers, ``InvalidDate`` markers). This is the point where those are
rejected, before a query reaches the database.
"""

import math
import uuid
from datetime import datetime, timezone
from typing import Any, List

from sqlalchemy import Select, Uuid
from sqlalchemy.sql.elements import ColumnElement

from lore_archive.domain.exceptions import InvalidIdentifierError, ValidationError
from lore_archive.domain.models.filters import Contains, Equals, FilterPredicate, InvalidDate, OneOf, Range

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    return value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2).replace("%", LIKE_ESCAPE + "%").replace("_", LIKE_ESCAPE + "_")


def _coerce(column, field: str, value: Any) -> Any:
    if isinstance(value, InvalidDate):
        raise ValidationError([f"{field} must be a valid date, got '{value.raw}'"])
    if isinstance(value, float) and math.isnan(value):
        raise ValidationError([f"{field} must be a number"])
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(column.type, Uuid) and not isinstance(value, uuid.UUID):
        try:
            return uuid.UUID(str(value))
        except ValueError:
            raise InvalidIdentifierError(field)
    return value


def to_clauses(model, predicate: FilterPredicate) -> List[ColumnElement[bool]]:
    clauses: List[ColumnElement[bool]] = []

    for field, condition in predicate.items():
        column = getattr(model, field)

        if isinstance(condition, Contains):
            pattern = f"%{escape_like(condition.value)}%"
            if condition.case_insensitive:
                clauses.append(column.ilike(pattern, escape=LIKE_ESCAPE))
            else:
                clauses.append(column.like(pattern, escape=LIKE_ESCAPE))
        elif isinstance(condition, Range):
            if condition.gte is not None:
                clauses.append(column >= _coerce(column, field, condition.gte))
            if condition.lte is not None:
                clauses.append(column <= _coerce(column, field, condition.lte))
        elif isinstance(condition, OneOf):
            clauses.append(column.in_([_coerce(column, field, value) for value in condition.values]))
        elif isinstance(condition, Equals):
            clauses.append(column == _coerce(column, field, condition.value))
        else:
            raise TypeError(f"Unsupported filter condition: {condition!r}")

    return clauses


def apply_predicate(statement: Select, model, predicate: FilterPredicate) -> Select:
    clauses = to_clauses(model, predicate)
    return statement.where(*clauses) if clauses else statement
