from typing import Any, Dict

from lore_archive.domain.models.poi import Poi as DomainPoi
from lore_archive.domain.ports.repositories.poi_repository import PoiRepository
from lore_archive.infrastructure.adapters.repositories.sqlalchemy_document_repository import (
    SQLAlchemyDocumentRepository,
)
from lore_archive.infrastructure.persistence.models import Poi as SQLPoi


class SQLAlchemyPoiRepository(SQLAlchemyDocumentRepository[DomainPoi], PoiRepository):
    sql_model = SQLPoi
    entity = "point of interest"
    entity_plural = "points of interest"

    def _to_domain(self, sql_poi: SQLPoi) -> DomainPoi:
        return DomainPoi(
            id=sql_poi.id,
            name=sql_poi.name,
            desc=sql_poi.desc,
            type=sql_poi.type,
            created_at=sql_poi.created_at,
            updated_at=sql_poi.updated_at,
        )

    def _to_values(self, poi: DomainPoi) -> Dict[str, Any]:
        return {"name": poi.name, "desc": poi.desc, "type": poi.type}
