import uuid
from typing import Any, Dict

from lore_archive.domain.models.book import Book as DomainBook
from lore_archive.domain.ports.repositories.book_repository import BookRepository
from lore_archive.infrastructure.adapters.repositories.sqlalchemy_document_repository import (
    SQLAlchemyDocumentRepository,
)
from lore_archive.infrastructure.persistence.models import Book as SQLBook


class SQLAlchemyBookRepository(SQLAlchemyDocumentRepository[DomainBook], BookRepository):
    sql_model = SQLBook
    entity = "book"
    entity_plural = "books"

    def _to_domain(self, sql_book: SQLBook) -> DomainBook:
        return DomainBook(
            id=sql_book.id,
            title=sql_book.title,
            blurb=sql_book.blurb,
            pages=sql_book.pages,
            publication_year=sql_book.publication_year,
            characters=[uuid.UUID(character_id) for character_id in sql_book.characters or []],
            created_at=sql_book.created_at,
            updated_at=sql_book.updated_at,
        )

    def _to_values(self, book: DomainBook) -> Dict[str, Any]:
        return {
            "title": book.title,
            "blurb": book.blurb,
            "pages": book.pages,
            "publication_year": book.publication_year,
            "characters": [str(character_id) for character_id in book.characters],
        }
