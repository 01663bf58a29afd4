from typing import Any, Dict

from lore_archive.domain.models.species import Species as DomainSpecies
from lore_archive.domain.ports.repositories.species_repository import SpeciesRepository
from lore_archive.infrastructure.adapters.repositories.sqlalchemy_document_repository import (
    SQLAlchemyDocumentRepository,
)
from lore_archive.infrastructure.persistence.models import Species as SQLSpecies


class SQLAlchemySpeciesRepository(SQLAlchemyDocumentRepository[DomainSpecies], SpeciesRepository):
    sql_model = SQLSpecies
    entity = "species"
    entity_plural = "species"

    def _to_domain(self, sql_species: SQLSpecies) -> DomainSpecies:
        return DomainSpecies(
            id=sql_species.id,
            name=sql_species.name,
            desc=sql_species.desc,
            created_at=sql_species.created_at,
            updated_at=sql_species.updated_at,
        )

    def _to_values(self, species: DomainSpecies) -> Dict[str, Any]:
        return {"name": species.name, "desc": species.desc}
