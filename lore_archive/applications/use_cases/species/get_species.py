from lore_archive.applications.interfaces.dtos.species import SpeciesPublic
from lore_archive.applications.services.identifiers import parse_id
from lore_archive.domain.exceptions import NotFoundError
from lore_archive.domain.ports.repositories.species_repository import SpeciesRepository


class GetSpeciesUseCase:
    def __init__(self, species_repository: SpeciesRepository):
        self.species_repository = species_repository

    async def execute(self, species_id: str) -> SpeciesPublic:
        species = await self.species_repository.get_by_id(parse_id(species_id, "species"))
        if not species:
            raise NotFoundError("species")

        return SpeciesPublic.model_validate(species)
