from lore_archive.applications.interfaces.dtos.book import BookPublic, BookSchema
from lore_archive.domain.models.book import Book
from lore_archive.domain.ports.repositories.book_repository import BookRepository
from lore_archive.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateBookUseCase:
    def __init__(self, book_repository: BookRepository):
        self.book_repository = book_repository

    async def execute(self, book_data: BookSchema) -> BookPublic:
        book = Book(**book_data.model_dump())

        created_book = await self.book_repository.create(book)
        logger.info(f"Book created: {created_book.id} '{created_book.title}'")

        return BookPublic.model_validate(created_book)
