"""
FastAPI dependencies: per-request unit of work and services, query
parameter parsing for the list endpoints, and body validation
"""
import logging
from decimal import Decimal
from typing import Optional, Type, TypeVar

from fastapi import Depends, Query
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from commerce_api.core.database import get_session
from commerce_api.domain.common import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from commerce_api.domain.customer import CustomerFilterDto
from commerce_api.domain.exceptions import ValidationFailedError
from commerce_api.domain.product import ProductFilterDto
from commerce_api.repositories.unit_of_work import UnitOfWork
from commerce_api.services.customer_service import CustomerService
from commerce_api.services.product_service import ProductService
from commerce_api.validators import validate

DtoT = TypeVar("DtoT", bound=BaseModel)


async def get_unit_of_work(session: AsyncSession = Depends(get_session)) -> UnitOfWork:
    return UnitOfWork(session)


async def get_product_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> ProductService:
    return ProductService(uow, logging.getLogger("commerce_api.services.products"))


async def get_customer_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> CustomerService:
    return CustomerService(uow, logging.getLogger("commerce_api.services.customers"))


def validated_body(dto_type: Type[DtoT]):
    """
    Dependency that parses the JSON body as dto_type and runs its validator

    Raises ValidationFailedError (400) before the route body executes, so
    an invalid request never reaches the service or the database.
    """
    async def dependency(dto: dto_type) -> dto_type:  # type: ignore[valid-type]
        errors = validate(dto)
        if errors:
            raise ValidationFailedError(errors)
        return dto

    return dependency


def product_filter(
    page_number: int = Query(1, alias="pageNumber", ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize", ge=1, le=MAX_PAGE_SIZE),
    search_term: Optional[str] = Query(None, alias="searchTerm", description="Search in name or description"),
    category: Optional[str] = Query(None, description="Filter by category"),
    min_price: Optional[Decimal] = Query(None, alias="minPrice", description="Inclusive lower price bound"),
    max_price: Optional[Decimal] = Query(None, alias="maxPrice", description="Inclusive upper price bound"),
    is_active: Optional[bool] = Query(None, alias="isActive", description="Filter by active status"),
    sort_by: Optional[str] = Query(None, alias="sortBy", description="name, price, category or createdAt"),
    sort_descending: bool = Query(False, alias="sortDescending"),
) -> ProductFilterDto:
    return ProductFilterDto(
        page_number=page_number,
        page_size=page_size,
        search_term=search_term,
        category=category,
        min_price=min_price,
        max_price=max_price,
        is_active=is_active,
        sort_by=sort_by,
        sort_descending=sort_descending,
    )


def customer_filter(
    page_number: int = Query(1, alias="pageNumber", ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize", ge=1, le=MAX_PAGE_SIZE),
    search_term: Optional[str] = Query(None, alias="searchTerm", description="Search in names or email"),
    country: Optional[str] = Query(None, description="Filter by country"),
    city: Optional[str] = Query(None, description="Filter by city"),
    is_active: Optional[bool] = Query(None, alias="isActive", description="Filter by active status"),
    sort_by: Optional[str] = Query(
        None, alias="sortBy", description="firstName, lastName, email, country or createdAt"
    ),
    sort_descending: bool = Query(False, alias="sortDescending"),
) -> CustomerFilterDto:
    return CustomerFilterDto(
        page_number=page_number,
        page_size=page_size,
        search_term=search_term,
        country=country,
        city=city,
        is_active=is_active,
        sort_by=sort_by,
        sort_descending=sort_descending,
    )
