from lore_archive.applications.interfaces.dtos.character import CharacterPublic
from lore_archive.applications.services.identifiers import parse_id
from lore_archive.domain.exceptions import NotFoundError
from lore_archive.domain.ports.repositories.character_repository import CharacterRepository


class GetCharacterUseCase:
    def __init__(self, character_repository: CharacterRepository):
        self.character_repository = character_repository

    async def execute(self, character_id: str) -> CharacterPublic:
        character = await self.character_repository.get_by_id(parse_id(character_id, "character"))
        if not character:
            raise NotFoundError("character")

        return CharacterPublic.model_validate(character)
