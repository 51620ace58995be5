"""
Product Service - business rules for the product catalogue

Author: TM3
"""
import logging
from typing import List, Optional

from commerce_api.domain.common import PagedResult
from commerce_api.domain.exceptions import NotFoundError
from commerce_api.domain.product import CreateProductDto, ProductDto, ProductFilterDto, UpdateProductDto
from commerce_api.models.product import Product
from commerce_api.repositories.base import Predicate, all_of
from commerce_api.repositories.unit_of_work import UnitOfWork
from commerce_api.services.query_builder import has_text, resolve_sort, utcnow

# Lower-cased sortBy value -> column. Anything else sorts by id.
PRODUCT_SORT_COLUMNS = {
    "name": Product.name,
    "price": Product.price,
    "category": Product.category,
    "createdat": Product.created_at,
}


def build_product_filter(filter_dto: ProductFilterDto) -> Optional[Predicate]:
    """
    AND-combine one condition per filter field that is set

    searchTerm matches name or description, case-insensitively, on every
    database backend (lower(col) LIKE lower(term)).

    Returns:
        Predicate, or None when no filter field is set
    """
    conditions = []

    if has_text(filter_dto.search_term):
        term = filter_dto.search_term
        conditions.append(
            Product.name.icontains(term, autoescape=True)
            | Product.description.icontains(term, autoescape=True)
        )

    if has_text(filter_dto.category):
        conditions.append(Product.category == filter_dto.category)

    if filter_dto.min_price is not None:
        conditions.append(Product.price >= filter_dto.min_price)

    if filter_dto.max_price is not None:
        conditions.append(Product.price <= filter_dto.max_price)

    if filter_dto.is_active is not None:
        conditions.append(Product.is_active == filter_dto.is_active)

    return all_of(*conditions)


class ProductService:
    """
    CRUD and paged queries over products

    Each mutating call commits once through the unit of work.
    """

    def __init__(self, uow: UnitOfWork, logger: Optional[logging.Logger] = None):
        self.uow = uow
        self.logger = logger or logging.getLogger(__name__)

    async def _get_or_raise(self, product_id: int, action: str) -> Product:
        product = await self.uow.products.get_by_id(product_id)
        if product is None:
            self.logger.warning(f"Product with ID {product_id} not found{action}")
            raise NotFoundError("Product", product_id)
        return product

    async def get_by_id(self, product_id: int) -> ProductDto:
        self.logger.info(f"Getting product with ID: {product_id}")
        product = await self._get_or_raise(product_id, "")
        return ProductDto.model_validate(product)

    async def get_all(self) -> List[ProductDto]:
        self.logger.info("Getting all products")
        products = await self.uow.products.get_all()
        return [ProductDto.model_validate(p) for p in products]

    async def get_paged(self, filter_dto: ProductFilterDto) -> PagedResult[ProductDto]:
        """
        Page of products matching the filter

        Args:
            filter_dto: Filters, sort and page window

        Returns:
            PagedResult with the page items and the filtered total
        """
        self.logger.info(
            f"Getting paged products. Page: {filter_dto.page_number}, Size: {filter_dto.page_size}"
        )

        predicate = build_product_filter(filter_dto)
        order_by, ascending = resolve_sort(
            filter_dto.sort_by, filter_dto.sort_descending, PRODUCT_SORT_COLUMNS
        )

        items, total_count = await self.uow.products.get_paged(
            filter_dto.page_number,
            filter_dto.page_size,
            predicate,
            order_by,
            ascending,
        )

        return PagedResult[ProductDto](
            items=[ProductDto.model_validate(p) for p in items],
            total_count=total_count,
            page_number=filter_dto.page_number,
            page_size=filter_dto.page_size,
        )

    async def get_by_category(self, category: str) -> List[ProductDto]:
        self.logger.info(f"Getting products by category: {category}")
        products = await self.uow.products.get_by_category(category)
        return [ProductDto.model_validate(p) for p in products]

    async def create(self, dto: CreateProductDto) -> ProductDto:
        self.logger.info(f"Creating new product: {dto.name}")

        product = Product(
            name=dto.name,
            description=dto.description or "",
            price=dto.price,
            category=dto.category,
            stock_quantity=dto.stock_quantity or 0,
            is_active=True,
            created_at=utcnow(),
            updated_at=None,
        )

        created = await self.uow.products.add(product)
        await self.uow.save_changes()

        self.logger.info(f"Product created with ID: {created.id}")
        return ProductDto.model_validate(created)

    async def update(self, product_id: int, dto: UpdateProductDto) -> ProductDto:
        self.logger.info(f"Updating product with ID: {product_id}")

        product = await self._get_or_raise(product_id, " for update")

        product.name = dto.name
        product.description = dto.description or ""
        product.price = dto.price
        product.category = dto.category
        product.stock_quantity = dto.stock_quantity or 0
        product.is_active = dto.is_active
        product.updated_at = utcnow()

        await self.uow.products.update(product)
        await self.uow.save_changes()

        self.logger.info(f"Product with ID {product_id} updated successfully")
        return ProductDto.model_validate(product)

    async def delete(self, product_id: int) -> None:
        self.logger.info(f"Deleting product with ID: {product_id}")

        product = await self._get_or_raise(product_id, " for deletion")

        await self.uow.products.delete(product)
        await self.uow.save_changes()

        self.logger.info(f"Product with ID {product_id} deleted successfully")
