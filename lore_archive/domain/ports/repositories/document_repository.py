import uuid
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from lore_archive.domain.models.filters import FilterPredicate

T = TypeVar("T")


class DocumentRepository(ABC, Generic[T]):
    @abstractmethod
    async def get_by_id(self, document_id: uuid.UUID) -> Optional[T]:
        pass

    @abstractmethod
    async def find(self, predicate: FilterPredicate, skip: int = 0, limit: int = 10) -> List[T]:
        pass

    @abstractmethod
    async def count(self, predicate: FilterPredicate) -> int:
        pass

    @abstractmethod
    async def create(self, document: T) -> T:
        pass

    @abstractmethod
    async def update(self, document: T) -> Optional[T]:
        pass

    @abstractmethod
    async def delete(self, document_id: uuid.UUID) -> bool:
        pass
