from lore_archive.applications.interfaces.dtos.species import SpeciesPublic, SpeciesSchema
from lore_archive.domain.models.species import Species
from lore_archive.domain.ports.repositories.species_repository import SpeciesRepository
from lore_archive.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateSpeciesUseCase:
    def __init__(self, species_repository: SpeciesRepository):
        self.species_repository = species_repository

    async def execute(self, species_data: SpeciesSchema) -> SpeciesPublic:
        created = await self.species_repository.create(Species(**species_data.model_dump()))
        logger.info(f"Species created: {created.id}")

        return SpeciesPublic.model_validate(created)
