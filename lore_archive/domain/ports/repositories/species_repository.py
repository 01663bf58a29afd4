from lore_archive.domain.models.species import Species
from lore_archive.domain.ports.repositories.document_repository import DocumentRepository


class SpeciesRepository(DocumentRepository[Species]):
    pass
