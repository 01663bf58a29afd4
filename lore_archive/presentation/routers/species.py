from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends

from lore_archive.applications.interfaces.dtos.api_response import ApiResponse
from lore_archive.applications.interfaces.dtos.species import SpeciesPublic, SpeciesSchema
from lore_archive.applications.use_cases.species.create_species import CreateSpeciesUseCase
from lore_archive.applications.use_cases.species.delete_species import DeleteSpeciesUseCase
from lore_archive.applications.use_cases.species.get_species import GetSpeciesUseCase
from lore_archive.applications.use_cases.species.get_all_species import GetAllSpeciesUseCase
from lore_archive.applications.use_cases.species.update_species import UpdateSpeciesUseCase
from lore_archive.domain.models.pagination import PaginationResult
from lore_archive.domain.ports.repositories.species_repository import SpeciesRepository
from lore_archive.domain.services.filter_builder import RawParams
from lore_archive.infrastructure.config.dependencies import get_species_repository, get_max_page_limit, get_query_params

router = APIRouter(prefix="/api/species", tags=["species"])

SpeciesRepositoryDep = Annotated[SpeciesRepository, Depends(get_species_repository)]
QueryParamsDep = Annotated[RawParams, Depends(get_query_params)]
MaxPageLimitDep = Annotated[int, Depends(get_max_page_limit)]


@router.get("", response_model=ApiResponse[PaginationResult[SpeciesPublic]], response_model_exclude_none=True)
async def read_all_species(params: QueryParamsDep, max_limit: MaxPageLimitDep, species_repository: SpeciesRepositoryDep):
    use_case = GetAllSpeciesUseCase(species_repository)
    return ApiResponse(success=True, data=await use_case.execute(params, max_limit))


@router.get("/{species_id}", response_model=ApiResponse[SpeciesPublic], response_model_exclude_none=True)
async def read_species(species_id: str, species_repository: SpeciesRepositoryDep):
    use_case = GetSpeciesUseCase(species_repository)
    return ApiResponse(success=True, data=await use_case.execute(species_id))


@router.post(
    "", status_code=HTTPStatus.CREATED, response_model=ApiResponse[SpeciesPublic], response_model_exclude_none=True
)
async def create_species(species: SpeciesSchema, species_repository: SpeciesRepositoryDep):
    use_case = CreateSpeciesUseCase(species_repository)
    return ApiResponse(success=True, data=await use_case.execute(species), message="Species created successfully")


@router.put("/{species_id}", response_model=ApiResponse[SpeciesPublic], response_model_exclude_none=True)
async def update_species(species_id: str, species: SpeciesSchema, species_repository: SpeciesRepositoryDep):
    use_case = UpdateSpeciesUseCase(species_repository)
    return ApiResponse(
        success=True, data=await use_case.execute(species_id, species), message="Species updated successfully"
    )


@router.delete("/{species_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
async def delete_species(species_id: str, species_repository: SpeciesRepositoryDep):
    use_case = DeleteSpeciesUseCase(species_repository)
    await use_case.execute(species_id)
    return ApiResponse(success=True, message="Species deleted successfully")
