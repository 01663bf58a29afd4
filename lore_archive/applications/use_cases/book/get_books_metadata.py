from typing import Optional

from lore_archive.applications.interfaces.dtos.book import BookMetadata
from lore_archive.applications.services.listing import fetch_page
from lore_archive.applications.use_cases.book.get_book_metadata import to_metadata
from lore_archive.applications.use_cases.book.get_books import BOOK_FILTERS
from lore_archive.domain.models.pagination import PaginationResult
from lore_archive.domain.ports.repositories.book_repository import BookRepository
from lore_archive.domain.services.filter_builder import RawParams


class GetBooksMetadataUseCase:
    def __init__(self, book_repository: BookRepository):
        self.book_repository = book_repository

    async def execute(self, params: RawParams, max_limit: Optional[int] = None) -> PaginationResult[BookMetadata]:
        return await fetch_page(self.book_repository, params, BOOK_FILTERS, to_metadata, max_limit)
