"""
Product Repository - Data Access Layer for Products

Author: TM3
"""
from typing import List

from commerce_api.models.product import Product
from commerce_api.repositories.base import Repository


class ProductRepository(Repository[Product]):
    """Repository for Product data access"""

    model = Product

    async def get_by_category(self, category: str) -> List[Product]:
        """
        Find all products in a category (exact match)

        Args:
            category: Category name

        Returns:
            List of products
        """
        return await self.find(Product.category == category)

