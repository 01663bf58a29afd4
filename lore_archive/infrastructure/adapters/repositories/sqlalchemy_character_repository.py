import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import func, select

from lore_archive.domain.models.character import Character as DomainCharacter
from lore_archive.domain.models.stats import BookAppearance, CharacterBooks, SpeciesCount
from lore_archive.domain.ports.repositories.character_repository import CharacterRepository
from lore_archive.infrastructure.adapters.repositories.sqlalchemy_document_repository import (
    SQLAlchemyDocumentRepository,
)
from lore_archive.infrastructure.persistence.models import Book as SQLBook
from lore_archive.infrastructure.persistence.models import Character as SQLCharacter
from lore_archive.infrastructure.persistence.models import Species as SQLSpecies


class SQLAlchemyCharacterRepository(SQLAlchemyDocumentRepository[DomainCharacter], CharacterRepository):
    sql_model = SQLCharacter
    entity = "character"
    entity_plural = "characters"

    def _to_domain(self, sql_character: SQLCharacter) -> DomainCharacter:
        return DomainCharacter(
            id=sql_character.id,
            name=sql_character.name,
            age=sql_character.age,
            species=sql_character.species,
            appears_in=[uuid.UUID(book_id) for book_id in sql_character.appears_in or []],
            desc=sql_character.desc,
            created_at=sql_character.created_at,
            updated_at=sql_character.updated_at,
        )

    def _to_values(self, character: DomainCharacter) -> Dict[str, Any]:
        return {
            "name": character.name,
            "age": character.age,
            "species": character.species,
            "appears_in": [str(book_id) for book_id in character.appears_in],
            "desc": character.desc,
        }

    async def count_by_species(self) -> List[SpeciesCount]:
        character_count = func.count(SQLCharacter.id).label("count")
        query = (
            select(SQLCharacter.species, SQLSpecies.name, character_count)
            .outerjoin(SQLSpecies, SQLSpecies.id == SQLCharacter.species)
            .group_by(SQLCharacter.species, SQLSpecies.name)
            .order_by(character_count.desc())
        )
        async with self._guard("fetch", "character species statistics"):
            rows = (await self.session.execute(query)).all()

        return [SpeciesCount(species_id=species_id, species_name=name, count=count) for species_id, name, count in rows]

    async def get_book_appearances(self, character_id: uuid.UUID) -> Optional[CharacterBooks]:
        async with self._guard("fetch", "character book statistics"):
            sql_character = await self._get_row(character_id)
            if not sql_character:
                return None

            book_ids = [uuid.UUID(book_id) for book_id in sql_character.appears_in or []]
            books_by_id = {}
            if book_ids:
                sql_books = await self.session.scalars(select(SQLBook).where(SQLBook.id.in_(book_ids)))
                books_by_id = {sql_book.id: sql_book for sql_book in sql_books.all()}

        # Books that no longer exist are left out, the rest keep the character's order.
        appearances = [
            BookAppearance(
                book_id=book_id,
                title=books_by_id[book_id].title,
                character_count=len(books_by_id[book_id].characters or []),
            )
            for book_id in book_ids
            if book_id in books_by_id
        ]

        return CharacterBooks(character_id=sql_character.id, character_name=sql_character.name, books=appearances)
