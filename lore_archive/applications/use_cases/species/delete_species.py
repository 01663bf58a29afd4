from lore_archive.applications.services.identifiers import parse_id
from lore_archive.domain.exceptions import NotFoundError
from lore_archive.domain.ports.repositories.species_repository import SpeciesRepository
from lore_archive.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class DeleteSpeciesUseCase:
    def __init__(self, species_repository: SpeciesRepository):
        self.species_repository = species_repository

    async def execute(self, species_id: str) -> None:
        document_id = parse_id(species_id, "species")

        deleted = await self.species_repository.delete(document_id)
        if not deleted:
            raise NotFoundError("species")

        logger.info(f"Species deleted: {document_id}")
