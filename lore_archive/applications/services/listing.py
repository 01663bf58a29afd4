from typing import Callable, Optional, TypeVar

from lore_archive.domain.exceptions import ValidationError
from lore_archive.domain.models.filters import FilterConfigs
from lore_archive.domain.models.pagination import PaginationOptions, PaginationResult
from lore_archive.domain.ports.repositories.document_repository import DocumentRepository
from lore_archive.domain.services.filter_builder import FilterBuilder, RawParams
from lore_archive.domain.services.pagination_planner import PaginationPlanner
from lore_archive.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

D = TypeVar("D")
P = TypeVar("P")

# Largest offset or limit a 64-bit database integer can bind.
MAX_BOUND = 2**63 - 1


def plan_page(params: RawParams, max_limit: Optional[int] = None) -> PaginationOptions:
    page = params.get("page")
    limit = params.get("limit")
    options = PaginationPlanner.plan(
        FilterBuilder.as_text(page) if page is not None else None,
        FilterBuilder.as_text(limit) if limit is not None else None,
    )
    if max_limit:
        options = options.capped(max_limit)
    if options.skip > MAX_BOUND:
        raise ValidationError(["page is out of range"])
    if options.limit > MAX_BOUND:
        raise ValidationError(["limit is out of range"])
    return options


async def fetch_page(
    repository: DocumentRepository[D],
    params: RawParams,
    configs: FilterConfigs,
    to_public: Callable[[D], P],
    max_limit: Optional[int] = None,
) -> PaginationResult[P]:
    """Filter, count and fetch one page of documents, then wrap it in the pagination envelope"""
    predicate = FilterBuilder.build(params, configs)
    options = plan_page(params, max_limit)
    logger.debug(f"Listing with predicate {predicate} (skip={options.skip}, limit={options.limit})")

    total = await repository.count(predicate)
    documents = await repository.find(predicate, skip=options.skip, limit=options.limit)

    return PaginationPlanner.assemble([to_public(document) for document in documents], total, options)
