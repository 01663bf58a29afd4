from lore_archive.domain.models.book import Book
from lore_archive.domain.ports.repositories.document_repository import DocumentRepository


class BookRepository(DocumentRepository[Book]):
    pass
