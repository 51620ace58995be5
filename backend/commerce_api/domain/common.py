"""
Shared API models: camelCase base, pagination, response envelopes
"""
import math
from decimal import Decimal
from typing import Annotated, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, computed_field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Decimal in memory, JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 10


class CamelModel(BaseModel):
    """
    Base for every DTO on the API boundary

    Serialises with camelCase keys and accepts both camelCase and
    snake_case on input. from_attributes allows building DTOs straight
    from ORM rows.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PaginationParameters(CamelModel):
    """Page window requested by the caller"""
    page_number: int = Field(1, ge=1, description="1-based page number")
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Items per page")


class PagedResult(CamelModel, Generic[T]):
    """
    One page of a filtered query plus the size of the whole filtered set

    total_count never depends on the page window, so a page past the end
    has no items but still reports how many rows matched.
    """
    items: List[T] = Field(default_factory=list)
    total_count: int = 0
    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @computed_field(alias="totalPages")
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.page_size else 0

    @computed_field(alias="hasPreviousPage")
    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @computed_field(alias="hasNextPage")
    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages


class ApiResponse(CamelModel, Generic[T]):
    """Envelope wrapping every successful (and domain-failed) payload"""
    success: bool
    message: str = ""
    data: Optional[T] = None
    errors: List[str] = Field(default_factory=list)

    @classmethod
    def success_response(cls, data: Optional[T] = None, message: str = "Operation completed successfully"):
        return cls(success=True, message=message, data=data)

    @classmethod
    def failure_response(cls, message: str, errors: Optional[List[str]] = None):
        return cls(success=False, message=message, errors=errors or [])


class ErrorResponse(CamelModel):
    """Body of every non-validation error response"""
    status_code: int
    message: str
    errors: List[str] = Field(default_factory=list)
    details: Optional[str] = None


class ValidationErrorResponse(CamelModel):
    """Body of a 400 caused by field rules: field name -> messages"""
    success: bool = False
    message: str = "Validation failed"
    errors: Dict[str, List[str]] = Field(default_factory=dict)
