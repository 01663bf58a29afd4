from typing import Optional

from lore_archive.applications.interfaces.dtos.character import CharacterPublic
from lore_archive.applications.services.listing import fetch_page
from lore_archive.domain.models.filters import FilterConfig, FilterConfigs, FilterType
from lore_archive.domain.models.pagination import PaginationResult
from lore_archive.domain.ports.repositories.character_repository import CharacterRepository
from lore_archive.domain.services.filter_builder import RawParams

CHARACTER_FILTERS: FilterConfigs = {
    "name": FilterConfig(field="name", type=FilterType.TEXT),
    "species": FilterConfig(field="species", type=FilterType.ARRAY),
    "age_min": FilterConfig(field="age", type=FilterType.NUMBER),
    "age_max": FilterConfig(field="age", type=FilterType.NUMBER),
}


class GetCharactersUseCase:
    def __init__(self, character_repository: CharacterRepository):
        self.character_repository = character_repository

    async def execute(self, params: RawParams, max_limit: Optional[int] = None) -> PaginationResult[CharacterPublic]:
        return await fetch_page(
            self.character_repository, params, CHARACTER_FILTERS, CharacterPublic.model_validate, max_limit
        )
