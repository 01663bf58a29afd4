import uuid
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from lore_archive.domain.exceptions import DuplicateEntryError, RepositoryError
from lore_archive.domain.models.book import Book as DomainBook
from lore_archive.domain.models.character import Character as DomainCharacter
from lore_archive.domain.models.filters import Contains, Range
from lore_archive.domain.models.species import Species as DomainSpecies
from lore_archive.infrastructure.adapters.repositories.sqlalchemy_book_repository import SQLAlchemyBookRepository
from lore_archive.infrastructure.adapters.repositories.sqlalchemy_character_repository import (
    SQLAlchemyCharacterRepository,
)
from lore_archive.infrastructure.adapters.repositories.sqlalchemy_species_repository import (
    SQLAlchemySpeciesRepository,
)

from .conftest import BaseIntegrationTest


class TestSQLAlchemyBookRepository(BaseIntegrationTest):
    """Integration tests for SQLAlchemy book repository"""

    @pytest.fixture
    def book_repository(self, test_session):
        return SQLAlchemyBookRepository(test_session)

    def _book(self, title, year=2000, characters=None):
        return DomainBook(title=title, blurb="blurb", pages=100, publication_year=year, characters=characters or [])

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamps(self, book_repository):
        character_id = uuid.uuid4()

        created = await book_repository.create(self._book("Elantris", characters=[character_id]))

        assert created.id is not None
        assert created.created_at is not None
        assert created.updated_at is not None
        assert created.characters == [character_id]

    @pytest.mark.asyncio
    async def test_find_and_count_share_predicate(self, book_repository):
        for title, year in [("Elantris", 2005), ("Warbreaker", 2009), ("Mistborn", 2006)]:
            await book_repository.create(self._book(title, year))
        predicate = {"publication_year": Range(gte=2006)}

        found = await book_repository.find(predicate, skip=0, limit=10)
        total = await book_repository.count(predicate)

        assert total == 2
        assert {book.title for book in found} == {"Warbreaker", "Mistborn"}

    @pytest.mark.asyncio
    async def test_find_applies_offset_and_limit(self, book_repository):
        for i in range(5):
            await book_repository.create(self._book(f"Book {i}"))

        found = await book_repository.find({"title": Contains("book")}, skip=3, limit=10)

        assert len(found) == 2

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, book_repository):
        book = self._book("Ghost")
        book.id = uuid.uuid4()

        assert await book_repository.update(book) is None

    @pytest.mark.asyncio
    async def test_delete(self, book_repository):
        created = await book_repository.create(self._book("Elantris"))

        assert await book_repository.delete(created.id) is True
        assert await book_repository.delete(created.id) is False
        assert await book_repository.get_by_id(created.id) is None

    @pytest.mark.asyncio
    async def test_integrity_error_becomes_duplicate_entry(self, test_session):
        test_session.commit = AsyncMock(side_effect=IntegrityError("INSERT", {}, Exception("unique")))
        repository = SQLAlchemyBookRepository(test_session)

        with pytest.raises(DuplicateEntryError, match="Duplicate entry"):
            await repository.create(self._book("Elantris"))

    @pytest.mark.asyncio
    async def test_database_error_becomes_repository_error(self, test_session):
        test_session.scalar = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("gone")))
        repository = SQLAlchemyBookRepository(test_session)

        with pytest.raises(RepositoryError, match="Failed to fetch books"):
            await repository.count({})


class TestSQLAlchemyCharacterRepository(BaseIntegrationTest):
    """Integration tests for the character statistics queries"""

    @pytest.mark.asyncio
    async def test_count_by_species(self, test_session):
        species = await SQLAlchemySpeciesRepository(test_session).create(DomainSpecies(name="Human", desc="folk"))
        characters = SQLAlchemyCharacterRepository(test_session)
        orphan_species = uuid.uuid4()
        for name, species_id in [("A", species.id), ("B", orphan_species), ("C", orphan_species)]:
            await characters.create(DomainCharacter(name=name, age=1, species=species_id))

        counts = await characters.count_by_species()

        assert [(item.species_id, item.species_name, item.count) for item in counts] == [
            (orphan_species, None, 2),
            (species.id, "Human", 1),
        ]

    @pytest.mark.asyncio
    async def test_book_appearances_keep_order(self, test_session):
        books = SQLAlchemyBookRepository(test_session)
        first = await books.create(DomainBook(title="First", blurb="b", pages=1, publication_year=1))
        second = await books.create(
            DomainBook(title="Second", blurb="b", pages=1, publication_year=2, characters=[uuid.uuid4()])
        )
        characters = SQLAlchemyCharacterRepository(test_session)
        character = await characters.create(
            DomainCharacter(name="Hoid", age=1000, species=uuid.uuid4(), appears_in=[second.id, first.id])
        )

        appearances = await characters.get_book_appearances(character.id)

        assert appearances.character_name == "Hoid"
        assert [(book.title, book.character_count) for book in appearances.books] == [("Second", 1), ("First", 0)]

    @pytest.mark.asyncio
    async def test_book_appearances_missing_character(self, test_session):
        assert await SQLAlchemyCharacterRepository(test_session).get_book_appearances(uuid.uuid4()) is None
