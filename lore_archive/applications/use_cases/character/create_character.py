from lore_archive.applications.interfaces.dtos.character import CharacterPublic, CharacterSchema
from lore_archive.domain.models.character import Character
from lore_archive.domain.ports.repositories.character_repository import CharacterRepository
from lore_archive.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateCharacterUseCase:
    def __init__(self, character_repository: CharacterRepository):
        self.character_repository = character_repository

    async def execute(self, character_data: CharacterSchema) -> CharacterPublic:
        created = await self.character_repository.create(Character(**character_data.model_dump()))
        logger.info(f"Character created: {created.id}")

        return CharacterPublic.model_validate(created)
