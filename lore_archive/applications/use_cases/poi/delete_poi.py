from lore_archive.applications.services.identifiers import parse_id
from lore_archive.domain.exceptions import NotFoundError
from lore_archive.domain.ports.repositories.poi_repository import PoiRepository
from lore_archive.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class DeletePoiUseCase:
    def __init__(self, poi_repository: PoiRepository):
        self.poi_repository = poi_repository

    async def execute(self, poi_id: str) -> None:
        document_id = parse_id(poi_id, "point of interest")

        deleted = await self.poi_repository.delete(document_id)
        if not deleted:
            raise NotFoundError("point of interest")

        logger.info(f"Poi deleted: {document_id}")
