from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PaginationOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    skip: int = Field(ge=0)

    def capped(self, max_limit: int) -> "PaginationOptions":
        """Return options whose limit does not exceed ``max_limit``, keeping the page."""
        if self.limit <= max_limit:
            return self
        return PaginationOptions(page=self.page, limit=max_limit, skip=(self.page - 1) * max_limit)


class PaginationResult(BaseModel, Generic[T]):
    model_config = ConfigDict(populate_by_name=True)

    data: List[T]
    total: int = Field(ge=0)
    page: int
    limit: int
    total_pages: int = Field(alias="totalPages")
