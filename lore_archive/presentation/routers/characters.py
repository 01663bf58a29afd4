from http import HTTPStatus
from typing import Annotated, List

from fastapi import APIRouter, Depends

from lore_archive.applications.interfaces.dtos.api_response import ApiResponse
from lore_archive.applications.interfaces.dtos.character import CharacterPublic, CharacterSchema
from lore_archive.applications.interfaces.dtos.stats import CharacterBookStats, SpeciesStats
from lore_archive.applications.use_cases.character.create_character import CreateCharacterUseCase
from lore_archive.applications.use_cases.character.delete_character import DeleteCharacterUseCase
from lore_archive.applications.use_cases.character.get_character import GetCharacterUseCase
from lore_archive.applications.use_cases.character.get_character_book_stats import GetCharacterBookStatsUseCase
from lore_archive.applications.use_cases.character.get_characters import GetCharactersUseCase
from lore_archive.applications.use_cases.character.get_species_stats import GetSpeciesStatsUseCase
from lore_archive.applications.use_cases.character.update_character import UpdateCharacterUseCase
from lore_archive.domain.models.pagination import PaginationResult
from lore_archive.domain.ports.repositories.character_repository import CharacterRepository
from lore_archive.domain.services.filter_builder import RawParams
from lore_archive.infrastructure.config.dependencies import (
    get_character_repository,
    get_max_page_limit,
    get_query_params,
)

router = APIRouter(prefix="/api/characters", tags=["characters"])

CharacterRepositoryDep = Annotated[CharacterRepository, Depends(get_character_repository)]
QueryParamsDep = Annotated[RawParams, Depends(get_query_params)]
MaxPageLimitDep = Annotated[int, Depends(get_max_page_limit)]


@router.get("", response_model=ApiResponse[PaginationResult[CharacterPublic]], response_model_exclude_none=True)
async def read_characters(
    params: QueryParamsDep, max_limit: MaxPageLimitDep, character_repository: CharacterRepositoryDep
):
    use_case = GetCharactersUseCase(character_repository)
    return ApiResponse(success=True, data=await use_case.execute(params, max_limit))


@router.get("/stats/species", response_model=ApiResponse[List[SpeciesStats]], response_model_exclude_none=True)
async def read_species_stats(character_repository: CharacterRepositoryDep):
    use_case = GetSpeciesStatsUseCase(character_repository)
    return ApiResponse(success=True, data=await use_case.execute())


@router.get("/{character_id}", response_model=ApiResponse[CharacterPublic], response_model_exclude_none=True)
async def read_character(character_id: str, character_repository: CharacterRepositoryDep):
    use_case = GetCharacterUseCase(character_repository)
    return ApiResponse(success=True, data=await use_case.execute(character_id))


@router.get(
    "/{character_id}/book-stats", response_model=ApiResponse[CharacterBookStats], response_model_exclude_none=True
)
async def read_character_book_stats(character_id: str, character_repository: CharacterRepositoryDep):
    use_case = GetCharacterBookStatsUseCase(character_repository)
    return ApiResponse(success=True, data=await use_case.execute(character_id))


@router.post(
    "", status_code=HTTPStatus.CREATED, response_model=ApiResponse[CharacterPublic], response_model_exclude_none=True
)
async def create_character(character: CharacterSchema, character_repository: CharacterRepositoryDep):
    use_case = CreateCharacterUseCase(character_repository)
    return ApiResponse(
        success=True, data=await use_case.execute(character), message="Character created successfully"
    )


@router.put("/{character_id}", response_model=ApiResponse[CharacterPublic], response_model_exclude_none=True)
async def update_character(
    character_id: str, character: CharacterSchema, character_repository: CharacterRepositoryDep
):
    use_case = UpdateCharacterUseCase(character_repository)
    return ApiResponse(
        success=True, data=await use_case.execute(character_id, character), message="Character updated successfully"
    )


@router.delete("/{character_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
async def delete_character(character_id: str, character_repository: CharacterRepositoryDep):
    use_case = DeleteCharacterUseCase(character_repository)
    await use_case.execute(character_id)
    return ApiResponse(success=True, message="Character deleted successfully")
