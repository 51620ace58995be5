"""
Database models
"""
from .product import Product
from .customer import Customer

__all__ = [
    "Product",
    "Customer",
]
