from lore_archive.applications.interfaces.dtos.stats import BookStats, CharacterBookStats
from lore_archive.applications.services.identifiers import parse_id
from lore_archive.domain.exceptions import NotFoundError
from lore_archive.domain.ports.repositories.character_repository import CharacterRepository


class GetCharacterBookStatsUseCase:
    def __init__(self, character_repository: CharacterRepository):
        self.character_repository = character_repository

    async def execute(self, character_id: str) -> CharacterBookStats:
        appearances = await self.character_repository.get_book_appearances(parse_id(character_id, "character"))
        if not appearances:
            raise NotFoundError("character")

        books = [
            BookStats(book_id=str(book.book_id), title=book.title, character_count=book.character_count)
            for book in appearances.books
        ]

        return CharacterBookStats(
            character_id=str(appearances.character_id),
            character_name=appearances.character_name,
            total_books=len(books),
            books=books,
        )
