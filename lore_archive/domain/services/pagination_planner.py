import re
from typing import Optional, Sequence, TypeVar

from lore_archive.domain.models.pagination import PaginationOptions, PaginationResult

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class PaginationPlanner:
    """Domain service turning page/limit parameters into fetch plans and envelopes"""

    @staticmethod
    def plan(raw_page: Optional[str] = None, raw_limit: Optional[str] = None) -> PaginationOptions:
        """Plan offset and limit from raw parameters - never raises"""
        page = PaginationPlanner.parse_int(raw_page)
        limit = PaginationPlanner.parse_int(raw_limit)

        page = max(1, DEFAULT_PAGE if page is None else page)
        limit = max(1, DEFAULT_LIMIT if limit is None else limit)

        return PaginationOptions(page=page, limit=limit, skip=(page - 1) * limit)

    @staticmethod
    def assemble(data: Sequence[T], total: int, options: PaginationOptions) -> PaginationResult[T]:
        """Wrap an already fetched page with its pagination metadata - pure function"""
        total_pages = (total + options.limit - 1) // options.limit if total > 0 else 0
        return PaginationResult(
            data=list(data),
            total=total,
            page=options.page,
            limit=options.limit,
            total_pages=total_pages,
        )

    @staticmethod
    def parse_int(raw: Optional[str]) -> Optional[int]:
        """Read the leading integer of ``raw``; ``None`` when there is none"""
        if raw is None:
            return None
        match = _LEADING_INT.match(str(raw))
        if not match:
            return None
        try:
            return int(match.group(1))
        except ValueError:
            # Digit runs past the interpreter's conversion limit count as unparseable.
            return None
