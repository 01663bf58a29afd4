from typing import Optional

from lore_archive.applications.interfaces.dtos.species import SpeciesPublic
from lore_archive.applications.services.listing import fetch_page
from lore_archive.domain.models.filters import FilterConfig, FilterConfigs, FilterType
from lore_archive.domain.models.pagination import PaginationResult
from lore_archive.domain.ports.repositories.species_repository import SpeciesRepository
from lore_archive.domain.services.filter_builder import RawParams

SPECIES_FILTERS: FilterConfigs = {
    "name": FilterConfig(field="name", type=FilterType.TEXT),
}


class GetAllSpeciesUseCase:
    def __init__(self, species_repository: SpeciesRepository):
        self.species_repository = species_repository

    async def execute(self, params: RawParams, max_limit: Optional[int] = None) -> PaginationResult[SpeciesPublic]:
        return await fetch_page(
            self.species_repository, params, SPECIES_FILTERS, SpeciesPublic.model_validate, max_limit
        )
