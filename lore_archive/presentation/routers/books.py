from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends

from lore_archive.applications.interfaces.dtos.api_response import ApiResponse
from lore_archive.applications.interfaces.dtos.book import BookMetadata, BookPublic, BookSchema
from lore_archive.applications.use_cases.book.create_book import CreateBookUseCase
from lore_archive.applications.use_cases.book.delete_book import DeleteBookUseCase
from lore_archive.applications.use_cases.book.get_book import GetBookUseCase
from lore_archive.applications.use_cases.book.get_book_metadata import GetBookMetadataUseCase
from lore_archive.applications.use_cases.book.get_books import GetBooksUseCase
from lore_archive.applications.use_cases.book.get_books_metadata import GetBooksMetadataUseCase
from lore_archive.applications.use_cases.book.update_book import UpdateBookUseCase
from lore_archive.domain.models.pagination import PaginationResult
from lore_archive.domain.ports.repositories.book_repository import BookRepository
from lore_archive.domain.services.filter_builder import RawParams
from lore_archive.infrastructure.config.dependencies import get_book_repository, get_max_page_limit, get_query_params

router = APIRouter(prefix="/api/books", tags=["books"])

BookRepositoryDep = Annotated[BookRepository, Depends(get_book_repository)]
QueryParamsDep = Annotated[RawParams, Depends(get_query_params)]
MaxPageLimitDep = Annotated[int, Depends(get_max_page_limit)]


@router.get("", response_model=ApiResponse[PaginationResult[BookPublic]], response_model_exclude_none=True)
async def read_books(params: QueryParamsDep, max_limit: MaxPageLimitDep, book_repository: BookRepositoryDep):
    use_case = GetBooksUseCase(book_repository)
    return ApiResponse(success=True, data=await use_case.execute(params, max_limit))


@router.get("/metadata", response_model=ApiResponse[PaginationResult[BookMetadata]], response_model_exclude_none=True)
async def read_books_metadata(params: QueryParamsDep, max_limit: MaxPageLimitDep, book_repository: BookRepositoryDep):
    use_case = GetBooksMetadataUseCase(book_repository)
    return ApiResponse(success=True, data=await use_case.execute(params, max_limit))


@router.get("/{book_id}", response_model=ApiResponse[BookPublic], response_model_exclude_none=True)
async def read_book(book_id: str, book_repository: BookRepositoryDep):
    use_case = GetBookUseCase(book_repository)
    return ApiResponse(success=True, data=await use_case.execute(book_id))


@router.get("/{book_id}/metadata", response_model=ApiResponse[BookMetadata], response_model_exclude_none=True)
async def read_book_metadata(book_id: str, book_repository: BookRepositoryDep):
    use_case = GetBookMetadataUseCase(book_repository)
    return ApiResponse(success=True, data=await use_case.execute(book_id))


@router.post(
    "", status_code=HTTPStatus.CREATED, response_model=ApiResponse[BookPublic], response_model_exclude_none=True
)
async def create_book(book: BookSchema, book_repository: BookRepositoryDep):
    use_case = CreateBookUseCase(book_repository)
    return ApiResponse(success=True, data=await use_case.execute(book), message="Book created successfully")


@router.put("/{book_id}", response_model=ApiResponse[BookPublic], response_model_exclude_none=True)
async def update_book(book_id: str, book: BookSchema, book_repository: BookRepositoryDep):
    use_case = UpdateBookUseCase(book_repository)
    return ApiResponse(success=True, data=await use_case.execute(book_id, book), message="Book updated successfully")


@router.delete("/{book_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
async def delete_book(book_id: str, book_repository: BookRepositoryDep):
    use_case = DeleteBookUseCase(book_repository)
    await use_case.execute(book_id)
    return ApiResponse(success=True, message="Book deleted successfully")
