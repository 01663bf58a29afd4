from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends

from lore_archive.applications.interfaces.dtos.api_response import ApiResponse
from lore_archive.applications.interfaces.dtos.poi import PoiPublic, PoiSchema
from lore_archive.applications.use_cases.poi.create_poi import CreatePoiUseCase
from lore_archive.applications.use_cases.poi.delete_poi import DeletePoiUseCase
from lore_archive.applications.use_cases.poi.get_poi import GetPoiUseCase
from lore_archive.applications.use_cases.poi.get_pois import GetPoisUseCase
from lore_archive.applications.use_cases.poi.update_poi import UpdatePoiUseCase
from lore_archive.domain.models.pagination import PaginationResult
from lore_archive.domain.ports.repositories.poi_repository import PoiRepository
from lore_archive.domain.services.filter_builder import RawParams
from lore_archive.infrastructure.config.dependencies import get_poi_repository, get_max_page_limit, get_query_params

router = APIRouter(prefix="/api/pois", tags=["pois"])

PoiRepositoryDep = Annotated[PoiRepository, Depends(get_poi_repository)]
QueryParamsDep = Annotated[RawParams, Depends(get_query_params)]
MaxPageLimitDep = Annotated[int, Depends(get_max_page_limit)]


@router.get("", response_model=ApiResponse[PaginationResult[PoiPublic]], response_model_exclude_none=True)
async def read_pois(params: QueryParamsDep, max_limit: MaxPageLimitDep, poi_repository: PoiRepositoryDep):
    use_case = GetPoisUseCase(poi_repository)
    return ApiResponse(success=True, data=await use_case.execute(params, max_limit))


@router.get("/{poi_id}", response_model=ApiResponse[PoiPublic], response_model_exclude_none=True)
async def read_poi(poi_id: str, poi_repository: PoiRepositoryDep):
    use_case = GetPoiUseCase(poi_repository)
    return ApiResponse(success=True, data=await use_case.execute(poi_id))


@router.post(
    "", status_code=HTTPStatus.CREATED, response_model=ApiResponse[PoiPublic], response_model_exclude_none=True
)
async def create_poi(poi: PoiSchema, poi_repository: PoiRepositoryDep):
    use_case = CreatePoiUseCase(poi_repository)
    return ApiResponse(success=True, data=await use_case.execute(poi), message="Point of interest created successfully")


@router.put("/{poi_id}", response_model=ApiResponse[PoiPublic], response_model_exclude_none=True)
async def update_poi(poi_id: str, poi: PoiSchema, poi_repository: PoiRepositoryDep):
    use_case = UpdatePoiUseCase(poi_repository)
    return ApiResponse(
        success=True, data=await use_case.execute(poi_id, poi), message="Point of interest updated successfully"
    )


@router.delete("/{poi_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
async def delete_poi(poi_id: str, poi_repository: PoiRepositoryDep):
    use_case = DeletePoiUseCase(poi_repository)
    await use_case.execute(poi_id)
    return ApiResponse(success=True, message="Point of interest deleted successfully")
