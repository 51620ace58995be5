"""
Customer DTOs
"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel, PaginationParameters


class CustomerDto(CamelModel):
    """Customer as exposed by the API"""
    id: int = Field(..., description="Customer ID")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    full_name: str = Field(..., description="First and last name")
    email: str = Field(..., description="Customer email (unique)")
    phone: Optional[str] = Field(None, description="Customer phone")
    address: Optional[str] = Field(None, description="Customer address")
    city: Optional[str] = Field(None, description="Customer city")
    country: Optional[str] = Field(None, description="Customer country")
    is_active: bool = Field(True, description="Whether customer is active")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")


class CreateCustomerDto(CamelModel):
    """Schema for creating a new customer"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None


class UpdateCustomerDto(CreateCustomerDto):
    """Schema for updating an existing customer (full replacement)"""
    is_active: bool = True


class CustomerFilterDto(PaginationParameters):
    """Query parameters of GET /customers"""
    search_term: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    is_active: Optional[bool] = None
    sort_by: Optional[str] = None
    sort_descending: bool = False
