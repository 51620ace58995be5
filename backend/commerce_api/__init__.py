"""
Commerce API - products and customers CRUD service
"""
__version__ = "1.0.0"
