from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


class FilterType(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    ARRAY = "array"
    DATE = "date"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class FilterConfig:
    """Maps an accepted query parameter onto a stored field of a given type."""

    field: str
    type: FilterType


FilterConfigs = Dict[str, FilterConfig]


@dataclass(frozen=True)
class InvalidDate:
    """Result of coercing text that is not a date. Carries the original text."""

    raw: str


@dataclass(frozen=True)
class Equals:
    value: Any


@dataclass(frozen=True)
class Contains:
    value: str
    case_insensitive: bool = True


@dataclass(frozen=True)
class Range:
    gte: Optional[Union[float, int, datetime, InvalidDate]] = None
    lte: Optional[Union[float, int, datetime, InvalidDate]] = None


@dataclass(frozen=True)
class OneOf:
    values: Tuple[str, ...]


Condition = Union[Equals, Contains, Range, OneOf]

FilterPredicate = Dict[str, Condition]
