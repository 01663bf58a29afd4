import uuid
from abc import abstractmethod
from typing import List, Optional

from lore_archive.domain.models.character import Character
from lore_archive.domain.models.stats import CharacterBooks, SpeciesCount
from lore_archive.domain.ports.repositories.document_repository import DocumentRepository


class CharacterRepository(DocumentRepository[Character]):
    @abstractmethod
    async def count_by_species(self) -> List[SpeciesCount]:
        """Character counts grouped by species, largest group first"""
        pass

    @abstractmethod
    async def get_book_appearances(self, character_id: uuid.UUID) -> Optional[CharacterBooks]:
        pass
