from lore_archive.applications.interfaces.dtos.poi import PoiPublic, PoiSchema
from lore_archive.applications.services.identifiers import parse_id
from lore_archive.domain.exceptions import NotFoundError
from lore_archive.domain.models.poi import Poi
from lore_archive.domain.ports.repositories.poi_repository import PoiRepository
from lore_archive.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class UpdatePoiUseCase:
    def __init__(self, poi_repository: PoiRepository):
        self.poi_repository = poi_repository

    async def execute(self, poi_id: str, poi_data: PoiSchema) -> PoiPublic:
        poi = Poi(id=parse_id(poi_id, "point of interest"), **poi_data.model_dump())

        updated = await self.poi_repository.update(poi)
        if not updated:
            raise NotFoundError("point of interest")

        logger.info(f"Poi updated: {updated.id}")
        return PoiPublic.model_validate(updated)
