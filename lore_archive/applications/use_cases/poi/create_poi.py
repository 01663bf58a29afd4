from lore_archive.applications.interfaces.dtos.poi import PoiPublic, PoiSchema
from lore_archive.domain.models.poi import Poi
from lore_archive.domain.ports.repositories.poi_repository import PoiRepository
from lore_archive.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreatePoiUseCase:
    def __init__(self, poi_repository: PoiRepository):
        self.poi_repository = poi_repository

    async def execute(self, poi_data: PoiSchema) -> PoiPublic:
        created = await self.poi_repository.create(Poi(**poi_data.model_dump()))
        logger.info(f"Poi created: {created.id}")

        return PoiPublic.model_validate(created)
