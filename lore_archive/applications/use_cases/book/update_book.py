from lore_archive.applications.interfaces.dtos.book import BookPublic, BookSchema
from lore_archive.applications.services.identifiers import parse_id
from lore_archive.domain.exceptions import NotFoundError
from lore_archive.domain.models.book import Book
from lore_archive.domain.ports.repositories.book_repository import BookRepository
from lore_archive.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class UpdateBookUseCase:
    def __init__(self, book_repository: BookRepository):
        self.book_repository = book_repository

    async def execute(self, book_id: str, book_data: BookSchema) -> BookPublic:
        book = Book(id=parse_id(book_id, "book"), **book_data.model_dump())

        updated_book = await self.book_repository.update(book)
        if not updated_book:
            raise NotFoundError("book")

        logger.info(f"Book updated: {updated_book.id}")
        return BookPublic.model_validate(updated_book)
