from lore_archive.applications.services.identifiers import parse_id
from lore_archive.domain.exceptions import NotFoundError
from lore_archive.domain.ports.repositories.character_repository import CharacterRepository
from lore_archive.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class DeleteCharacterUseCase:
    def __init__(self, character_repository: CharacterRepository):
        self.character_repository = character_repository

    async def execute(self, character_id: str) -> None:
        document_id = parse_id(character_id, "character")

        deleted = await self.character_repository.delete(document_id)
        if not deleted:
            raise NotFoundError("character")

        logger.info(f"Character deleted: {document_id}")
