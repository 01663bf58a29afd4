from lore_archive.applications.interfaces.dtos.species import SpeciesPublic, SpeciesSchema
from lore_archive.applications.services.identifiers import parse_id
from lore_archive.domain.exceptions import NotFoundError
from lore_archive.domain.models.species import Species
from lore_archive.domain.ports.repositories.species_repository import SpeciesRepository
from lore_archive.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class UpdateSpeciesUseCase:
    def __init__(self, species_repository: SpeciesRepository):
        self.species_repository = species_repository

    async def execute(self, species_id: str, species_data: SpeciesSchema) -> SpeciesPublic:
        species = Species(id=parse_id(species_id, "species"), **species_data.model_dump())

        updated = await self.species_repository.update(species)
        if not updated:
            raise NotFoundError("species")

        logger.info(f"Species updated: {updated.id}")
        return SpeciesPublic.model_validate(updated)
