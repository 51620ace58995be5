"""
Repository Layer - Data Access

This layer handles all database queries and returns ORM entities.
Repositories abstract away SQL details from business logic.

Author: TM3
"""
from commerce_api.repositories.base import Repository, all_of
from commerce_api.repositories.product_repository import ProductRepository
from commerce_api.repositories.customer_repository import CustomerRepository
from commerce_api.repositories.unit_of_work import UnitOfWork

__all__ = [
    'Repository',
    'all_of',
    'ProductRepository',
    'CustomerRepository',
    'UnitOfWork',
]
