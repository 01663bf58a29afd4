from lore_archive.applications.interfaces.dtos.poi import PoiPublic
from lore_archive.applications.services.identifiers import parse_id
from lore_archive.domain.exceptions import NotFoundError
from lore_archive.domain.ports.repositories.poi_repository import PoiRepository


class GetPoiUseCase:
    def __init__(self, poi_repository: PoiRepository):
        self.poi_repository = poi_repository

    async def execute(self, poi_id: str) -> PoiPublic:
        poi = await self.poi_repository.get_by_id(parse_id(poi_id, "point of interest"))
        if not poi:
            raise NotFoundError("point of interest")

        return PoiPublic.model_validate(poi)
