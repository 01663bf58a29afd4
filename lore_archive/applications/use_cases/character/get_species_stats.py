from typing import List

from lore_archive.applications.interfaces.dtos.stats import SpeciesStats
from lore_archive.domain.ports.repositories.character_repository import CharacterRepository

UNKNOWN_SPECIES = "Unknown"


class GetSpeciesStatsUseCase:
    def __init__(self, character_repository: CharacterRepository):
        self.character_repository = character_repository

    async def execute(self) -> List[SpeciesStats]:
        counts = await self.character_repository.count_by_species()

        return [SpeciesStats(species=item.species_name or UNKNOWN_SPECIES, count=item.count) for item in counts]
