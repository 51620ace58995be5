"""
Product DTOs

ProductDto is what the API returns. Create/Update DTOs accept missing
fields; commerce_api.validators reports every rule violation of a request
in one response.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from .common import CamelModel, Money, PaginationParameters


class ProductDto(CamelModel):
    """
    Product as exposed by the API

    Fields:
        id: Internal product ID (assigned by the store)
        name: Product name
        description: Free text description
        price: Unit price (> 0)
        category: Catalogue category
        stock_quantity: Units on hand (>= 0)
        is_active: Whether product is listed
        created_at: When product was created
        updated_at: Last update, None until the first update
    """
    id: int = Field(..., description="Internal product ID")
    name: str = Field(..., description="Product name")
    description: str = Field("", description="Product description")
    price: Money = Field(..., description="Unit price")
    category: str = Field(..., description="Product category")
    stock_quantity: int = Field(0, description="Units on hand")
    is_active: bool = Field(True, description="Whether product is active")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")


class CreateProductDto(CamelModel):
    """Schema for creating a new product"""
    name: Optional[str] = None
    description: Optional[str] = ""
    price: Optional[Decimal] = None
    category: Optional[str] = None
    stock_quantity: Optional[int] = 0


class UpdateProductDto(CreateProductDto):
    """Schema for updating an existing product (full replacement)"""
    is_active: bool = True


class ProductFilterDto(PaginationParameters):
    """Query parameters of GET /products"""
    search_term: Optional[str] = None
    category: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    is_active: Optional[bool] = None
    sort_by: Optional[str] = None
    sort_descending: bool = False
