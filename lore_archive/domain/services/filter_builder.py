import re
from datetime import datetime
from typing import List, Mapping, Sequence, Union

from lore_archive.domain.models.filters import (
    Contains,
    Equals,
    FilterConfigs,
    FilterPredicate,
    FilterType,
    InvalidDate,
    OneOf,
    Range,
)

RawValue = Union[str, Sequence[str], None]
RawParams = Mapping[str, RawValue]

_YEAR_ONLY = re.compile(r"^\d{4}$")


class FilterBuilder:
    """Translates raw query parameters into a storage-agnostic filter predicate.

    Only parameters declared in the configuration contribute, and the resulting
    predicate is keyed by the configured ``field`` names, never by the raw
    parameter names. Values are coerced leniently: a number that does not parse
    becomes ``nan`` and a date that does not parse becomes an ``InvalidDate``.
    Rejecting those is left to whoever executes the predicate.
    """

    @staticmethod
    def build(params: RawParams, configs: FilterConfigs) -> FilterPredicate:
        """Build a predicate from ``params`` using ``configs`` - pure function"""
        predicate: FilterPredicate = {}

        for param, config in configs.items():
            value = params.get(param)
            if FilterBuilder._is_empty(value):
                continue

            field = config.field
            if config.type == FilterType.TEXT:
                predicate[field] = Contains(FilterBuilder.as_text(value), case_insensitive=True)
            elif config.type == FilterType.NUMBER:
                number = FilterBuilder.to_number(FilterBuilder.as_text(value))
                predicate[field] = FilterBuilder._bounded(predicate.get(field), param, number, "_min", "_max")
            elif config.type == FilterType.ARRAY:
                predicate[field] = OneOf(tuple(FilterBuilder.to_candidates(value)))
            elif config.type == FilterType.DATE:
                moment = FilterBuilder.to_date(FilterBuilder.as_text(value))
                predicate[field] = FilterBuilder._bounded(predicate.get(field), param, moment, "_from", "_to")
            elif config.type == FilterType.BOOLEAN:
                predicate[field] = Equals(FilterBuilder.as_text(value).lower() == "true")
            else:
                predicate[field] = Equals(value)

        return predicate

    @staticmethod
    def _is_empty(value: RawValue) -> bool:
        if value is None:
            return True
        if isinstance(value, str):
            return value == ""
        return len(value) == 0

    @staticmethod
    def _bounded(existing, param: str, value, lower_suffix: str, upper_suffix: str):
        # Bounds on the same field compose into one range.
        if param.endswith(lower_suffix):
            upper = existing.lte if isinstance(existing, Range) else None
            return Range(gte=value, lte=upper)
        if param.endswith(upper_suffix):
            lower = existing.gte if isinstance(existing, Range) else None
            return Range(gte=lower, lte=value)
        return Equals(value)

    @staticmethod
    def as_text(value: RawValue) -> str:
        """Coerce a raw value to the string it stands for"""
        if isinstance(value, str):
            return value
        if value is None:
            return ""
        # Repeated scalar parameters keep the first occurrence.
        return str(value[0]) if len(value) else ""

    @staticmethod
    def to_number(text: str) -> Union[int, float]:
        stripped = text.strip()
        if "_" in stripped:
            return float("nan")
        try:
            return int(stripped)
        except ValueError:
            pass
        try:
            return float(stripped)
        except ValueError:
            return float("nan")

    @staticmethod
    def to_date(text: str) -> Union[datetime, InvalidDate]:
        stripped = text.strip()
        if stripped.endswith(("Z", "z")):
            stripped = stripped[:-1] + "+00:00"
        try:
            if _YEAR_ONLY.match(stripped):
                return datetime(int(stripped), 1, 1)
            return datetime.fromisoformat(stripped)
        except ValueError:
            return InvalidDate(text)

    @staticmethod
    def to_candidates(value: RawValue) -> List[str]:
        """Membership candidates from a list value or a comma separated string"""
        if not isinstance(value, str):
            return [str(item) for item in value]
        return [piece.strip() for piece in value.split(",") if piece.strip()]

