from lore_archive.domain.models.poi import Poi
from lore_archive.domain.ports.repositories.document_repository import DocumentRepository


class PoiRepository(DocumentRepository[Poi]):
    pass
