"""
Products API Endpoints
Handles product catalogue CRUD and queries

Errors are not caught here: services raise domain exceptions and
commerce_api.api.errors maps them to status codes.

Author: TM3
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from commerce_api.api.dependencies import get_product_service, product_filter, validated_body
from commerce_api.domain.common import ApiResponse, PagedResult
from commerce_api.domain.product import CreateProductDto, ProductDto, ProductFilterDto, UpdateProductDto
from commerce_api.services.product_service import ProductService

router = APIRouter()


@router.get("", response_model=ApiResponse[PagedResult[ProductDto]])
async def get_products(
    filter_dto: ProductFilterDto = Depends(product_filter),
    service: ProductService = Depends(get_product_service),
):
    """
    Get products with pagination, filtering and sorting

    Without sortBy, items are ordered by id in the sortDescending
    direction; unknown sortBy values fall back to id ascending.
    """
    result = await service.get_paged(filter_dto)
    return ApiResponse[PagedResult[ProductDto]].success_response(result, "Products retrieved successfully")


@router.get("/category/{category}", response_model=ApiResponse[List[ProductDto]])
async def get_products_by_category(category: str, service: ProductService = Depends(get_product_service)):
    """
    Get all products in a category (not paged)

    Args:
        category: Exact category name, e.g. Electronics
    """
    products = await service.get_by_category(category)
    return ApiResponse[List[ProductDto]].success_response(products, "Products retrieved successfully")


@router.get("/{product_id}", response_model=ApiResponse[ProductDto])
async def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """Get a single product by ID"""
    product = await service.get_by_id(product_id)
    return ApiResponse[ProductDto].success_response(product, "Product retrieved successfully")


@router.post("", response_model=ApiResponse[ProductDto], status_code=status.HTTP_201_CREATED)
async def create_product(
    response: Response,
    dto: CreateProductDto = Depends(validated_body(CreateProductDto)),
    service: ProductService = Depends(get_product_service),
):
    """
    Create a new product

    New products are always active; id and createdAt are assigned on save.
    """
    product = await service.create(dto)
    response.headers["Location"] = f"/api/v1/products/{product.id}"
    return ApiResponse[ProductDto].success_response(product, "Product created successfully")


@router.put("/{product_id}", response_model=ApiResponse[ProductDto])
async def update_product(
    product_id: int,
    dto: UpdateProductDto = Depends(validated_body(UpdateProductDto)),
    service: ProductService = Depends(get_product_service),
):
    """Replace a product's fields; stamps updatedAt"""
    product = await service.update(product_id, dto)
    return ApiResponse[ProductDto].success_response(product, "Product updated successfully")


@router.delete("/{product_id}", response_model=ApiResponse)
async def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """Delete a product"""
    await service.delete(product_id)
    return ApiResponse.success_response(message="Product deleted successfully")
