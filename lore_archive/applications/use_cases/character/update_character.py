from lore_archive.applications.interfaces.dtos.character import CharacterPublic, CharacterSchema
from lore_archive.applications.services.identifiers import parse_id
from lore_archive.domain.exceptions import NotFoundError
from lore_archive.domain.models.character import Character
from lore_archive.domain.ports.repositories.character_repository import CharacterRepository
from lore_archive.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class UpdateCharacterUseCase:
    def __init__(self, character_repository: CharacterRepository):
        self.character_repository = character_repository

    async def execute(self, character_id: str, character_data: CharacterSchema) -> CharacterPublic:
        character = Character(id=parse_id(character_id, "character"), **character_data.model_dump())

        updated = await self.character_repository.update(character)
        if not updated:
            raise NotFoundError("character")

        logger.info(f"Character updated: {updated.id}")
        return CharacterPublic.model_validate(updated)
