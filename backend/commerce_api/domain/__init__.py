"""
Domain Layer - DTOs and business exceptions

Pydantic models shaped for the API boundary, distinct from the
SQLAlchemy entities in commerce_api.models.
"""
from commerce_api.domain.common import ApiResponse, ErrorResponse, PagedResult, PaginationParameters
from commerce_api.domain.customer import (
    CreateCustomerDto,
    CustomerDto,
    CustomerFilterDto,
    UpdateCustomerDto,
)
from commerce_api.domain.exceptions import ConflictError, DomainError, NotFoundError, ValidationFailedError
from commerce_api.domain.product import CreateProductDto, ProductDto, ProductFilterDto, UpdateProductDto

__all__ = [
    'ApiResponse', 'ErrorResponse', 'PagedResult', 'PaginationParameters',
    'ProductDto', 'CreateProductDto', 'UpdateProductDto', 'ProductFilterDto',
    'CustomerDto', 'CreateCustomerDto', 'UpdateCustomerDto', 'CustomerFilterDto',
    'DomainError', 'NotFoundError', 'ConflictError', 'ValidationFailedError',
]
