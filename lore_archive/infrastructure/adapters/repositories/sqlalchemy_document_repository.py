import uuid
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from lore_archive.domain.exceptions import DuplicateEntryError, RepositoryError
from lore_archive.domain.models.filters import FilterPredicate
from lore_archive.domain.ports.repositories.document_repository import DocumentRepository
from lore_archive.infrastructure.logging.logger import Logger
from lore_archive.infrastructure.persistence.predicate import apply_predicate

logger = Logger.get_logger(__name__)

D = TypeVar("D")


class SQLAlchemyDocumentRepository(DocumentRepository[D]):
    """CRUD over one mapped table, newest documents first.

    Subclasses set ``sql_model`` and the entity names used in error messages,
    and convert between the mapped rows and the domain model.
    """

    sql_model: Any
    entity: str
    entity_plural: str

    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, row: Any) -> D:
        raise NotImplementedError

    def _to_values(self, document: D) -> Dict[str, Any]:
        raise NotImplementedError

    @asynccontextmanager
    async def _guard(self, operation: str, entity: str):
        try:
            yield
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(f"Integrity error on {operation} {entity}: {e.orig}")
            raise DuplicateEntryError() from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception(f"Database error on {operation} {entity}")
            raise RepositoryError(operation, entity) from e

    async def _get_row(self, document_id: uuid.UUID):
        return await self.session.scalar(select(self.sql_model).where(self.sql_model.id == document_id))

    async def get_by_id(self, document_id: uuid.UUID) -> Optional[D]:
        async with self._guard("fetch", self.entity):
            row = await self._get_row(document_id)
        return self._to_domain(row) if row else None

    async def find(self, predicate: FilterPredicate, skip: int = 0, limit: int = 10) -> List[D]:
        query = (
            apply_predicate(select(self.sql_model), self.sql_model, predicate)
            .order_by(self.sql_model.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        async with self._guard("fetch", self.entity_plural):
            rows = (await self.session.scalars(query)).all()
        return [self._to_domain(row) for row in rows]

    async def count(self, predicate: FilterPredicate) -> int:
        query = apply_predicate(select(func.count()).select_from(self.sql_model), self.sql_model, predicate)
        async with self._guard("fetch", self.entity_plural):
            total = await self.session.scalar(query)
        return total or 0

    async def create(self, document: D) -> D:
        row = self.sql_model(**self._to_values(document))
        async with self._guard("create", self.entity):
            self.session.add(row)
            await self.session.commit()
            await self.session.refresh(row)
        return self._to_domain(row)

    async def update(self, document: D) -> Optional[D]:
        async with self._guard("update", self.entity):
            row = await self._get_row(document.id)
            if not row:
                return None

            for key, value in self._to_values(document).items():
                setattr(row, key, value)

            await self.session.commit()
            await self.session.refresh(row)
        return self._to_domain(row)

    async def delete(self, document_id: uuid.UUID) -> bool:
        async with self._guard("delete", self.entity):
            row = await self._get_row(document_id)
            if not row:
                return False

            await self.session.delete(row)
            await self.session.commit()
        return True
