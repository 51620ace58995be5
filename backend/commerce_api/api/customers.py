"""
Customers API Endpoints

Author: TM3
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from commerce_api.api.dependencies import customer_filter, get_customer_service, validated_body
from commerce_api.domain.common import ApiResponse, PagedResult
from commerce_api.domain.customer import CreateCustomerDto, CustomerDto, CustomerFilterDto, UpdateCustomerDto
from commerce_api.services.customer_service import CustomerService

router = APIRouter()


@router.get("", response_model=ApiResponse[PagedResult[CustomerDto]])
async def get_customers(
    filter_dto: CustomerFilterDto = Depends(customer_filter),
    service: CustomerService = Depends(get_customer_service),
):
    """Get customers with pagination, filtering and sorting"""
    result = await service.get_paged(filter_dto)
    return ApiResponse[PagedResult[CustomerDto]].success_response(result, "Customers retrieved successfully")


@router.get("/email/{email}", response_model=ApiResponse[CustomerDto])
async def get_customer_by_email(email: str, service: CustomerService = Depends(get_customer_service)):
    """Get a customer by email address"""
    customer = await service.get_by_email(email)
    return ApiResponse[CustomerDto].success_response(customer, "Customer retrieved successfully")


@router.get("/country/{country}", response_model=ApiResponse[List[CustomerDto]])
async def get_customers_by_country(country: str, service: CustomerService = Depends(get_customer_service)):
    """Get all customers from a country (not paged)"""
    customers = await service.get_by_country(country)
    return ApiResponse[List[CustomerDto]].success_response(customers, "Customers retrieved successfully")


@router.get("/{customer_id}", response_model=ApiResponse[CustomerDto])
async def get_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    """Get a customer by ID"""
    customer = await service.get_by_id(customer_id)
    return ApiResponse[CustomerDto].success_response(customer, "Customer retrieved successfully")


@router.post("", response_model=ApiResponse[CustomerDto], status_code=status.HTTP_201_CREATED)
async def create_customer(
    response: Response,
    dto: CreateCustomerDto = Depends(validated_body(CreateCustomerDto)),
    service: CustomerService = Depends(get_customer_service),
):
    """
    Create a new customer

    Returns 409 when the email is already registered.
    """
    customer = await service.create(dto)
    response.headers["Location"] = f"/api/v1/customers/{customer.id}"
    return ApiResponse[CustomerDto].success_response(customer, "Customer created successfully")


@router.put("/{customer_id}", response_model=ApiResponse[CustomerDto])
async def update_customer(
    customer_id: int,
    dto: UpdateCustomerDto = Depends(validated_body(UpdateCustomerDto)),
    service: CustomerService = Depends(get_customer_service),
):
    """
    Update an existing customer

    Keeping the customer's own email is allowed; taking another
    customer's email returns 409.
    """
    customer = await service.update(customer_id, dto)
    return ApiResponse[CustomerDto].success_response(customer, "Customer updated successfully")


@router.delete("/{customer_id}", response_model=ApiResponse)
async def delete_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    await service.delete(customer_id)
    return ApiResponse.success_response(message="Customer deleted successfully")
