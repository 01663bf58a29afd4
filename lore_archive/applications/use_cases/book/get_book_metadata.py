from lore_archive.applications.interfaces.dtos.book import BookMetadata
from lore_archive.applications.services.identifiers import parse_id
from lore_archive.domain.exceptions import NotFoundError
from lore_archive.domain.models.book import Book
from lore_archive.domain.ports.repositories.book_repository import BookRepository


def to_metadata(book: Book) -> BookMetadata:
    return BookMetadata(
        id=str(book.id),
        title=book.title,
        blurb=book.blurb,
        characters=[str(character_id) for character_id in book.characters],
        publication_year=book.publication_year,
    )


class GetBookMetadataUseCase:
    def __init__(self, book_repository: BookRepository):
        self.book_repository = book_repository

    async def execute(self, book_id: str) -> BookMetadata:
        book = await self.book_repository.get_by_id(parse_id(book_id, "book"))
        if not book:
            raise NotFoundError("book")

        return to_metadata(book)
