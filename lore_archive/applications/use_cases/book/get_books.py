from typing import Optional

from lore_archive.applications.interfaces.dtos.book import BookPublic
from lore_archive.applications.services.listing import fetch_page
from lore_archive.domain.models.filters import FilterConfig, FilterConfigs, FilterType
from lore_archive.domain.models.pagination import PaginationResult
from lore_archive.domain.ports.repositories.book_repository import BookRepository
from lore_archive.domain.services.filter_builder import RawParams

BOOK_FILTERS: FilterConfigs = {
    "title": FilterConfig(field="title", type=FilterType.TEXT),
    "publication_year": FilterConfig(field="publication_year", type=FilterType.NUMBER),
    "publication_year_min": FilterConfig(field="publication_year", type=FilterType.NUMBER),
    "publication_year_max": FilterConfig(field="publication_year", type=FilterType.NUMBER),
    "created_from": FilterConfig(field="created_at", type=FilterType.DATE),
    "created_to": FilterConfig(field="created_at", type=FilterType.DATE),
}


class GetBooksUseCase:
    def __init__(self, book_repository: BookRepository):
        self.book_repository = book_repository

    async def execute(self, params: RawParams, max_limit: Optional[int] = None) -> PaginationResult[BookPublic]:
        return await fetch_page(self.book_repository, params, BOOK_FILTERS, BookPublic.model_validate, max_limit)
