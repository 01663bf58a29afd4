from typing import Optional

from lore_archive.applications.interfaces.dtos.poi import PoiPublic
from lore_archive.applications.services.listing import fetch_page
from lore_archive.domain.models.filters import FilterConfig, FilterConfigs, FilterType
from lore_archive.domain.models.pagination import PaginationResult
from lore_archive.domain.ports.repositories.poi_repository import PoiRepository
from lore_archive.domain.services.filter_builder import RawParams

POI_FILTERS: FilterConfigs = {
    "name": FilterConfig(field="name", type=FilterType.TEXT),
    "type": FilterConfig(field="type", type=FilterType.TEXT),
}


class GetPoisUseCase:
    def __init__(self, poi_repository: PoiRepository):
        self.poi_repository = poi_repository

    async def execute(self, params: RawParams, max_limit: Optional[int] = None) -> PaginationResult[PoiPublic]:
        return await fetch_page(self.poi_repository, params, POI_FILTERS, PoiPublic.model_validate, max_limit)
