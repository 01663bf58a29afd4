from lore_archive.applications.interfaces.dtos.book import BookPublic
from lore_archive.applications.services.identifiers import parse_id
from lore_archive.domain.exceptions import NotFoundError
from lore_archive.domain.ports.repositories.book_repository import BookRepository


class GetBookUseCase:
    def __init__(self, book_repository: BookRepository):
        self.book_repository = book_repository

    async def execute(self, book_id: str) -> BookPublic:
        book = await self.book_repository.get_by_id(parse_id(book_id, "book"))
        if not book:
            raise NotFoundError("book")

        return BookPublic.model_validate(book)
