from lore_archive.applications.services.identifiers import parse_id
from lore_archive.domain.exceptions import NotFoundError
from lore_archive.domain.ports.repositories.book_repository import BookRepository
from lore_archive.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class DeleteBookUseCase:
    def __init__(self, book_repository: BookRepository):
        self.book_repository = book_repository

    async def execute(self, book_id: str) -> None:
        document_id = parse_id(book_id, "book")

        deleted = await self.book_repository.delete(document_id)
        if not deleted:
            raise NotFoundError("book")

        logger.info(f"Book deleted: {document_id}")
