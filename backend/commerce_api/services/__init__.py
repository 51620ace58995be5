"""
Service Layer - business rules on top of the repositories
"""
from commerce_api.services.product_service import ProductService
from commerce_api.services.customer_service import CustomerService

__all__ = ['ProductService', 'CustomerService']
