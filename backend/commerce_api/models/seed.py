"""
Sample catalogue loaded into an empty database at startup (SEED_DATA=true)
"""
import logging
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .customer import Customer
from .product import Product

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    {"name": "Laptop Pro 15", "description": "High-performance laptop with 15-inch display",
     "price": Decimal("1299.99"), "category": "Electronics", "stock_quantity": 50},
    {"name": "Wireless Mouse", "description": "Ergonomic wireless mouse with precision tracking",
     "price": Decimal("49.99"), "category": "Electronics", "stock_quantity": 200},
    {"name": "USB-C Hub", "description": "7-in-1 USB-C hub with HDMI and card reader",
     "price": Decimal("79.99"), "category": "Electronics", "stock_quantity": 150},
    {"name": "Office Chair", "description": "Ergonomic office chair with lumbar support",
     "price": Decimal("299.99"), "category": "Furniture", "stock_quantity": 30},
    {"name": "Standing Desk", "description": "Electric standing desk with memory presets",
     "price": Decimal("599.99"), "category": "Furniture", "stock_quantity": 20},
]

SAMPLE_CUSTOMERS = [
    {"first_name": "John", "last_name": "Doe", "email": "john.doe@example.com", "phone": "+1-555-0101",
     "address": "123 Main St", "city": "New York", "country": "USA"},
    {"first_name": "Jane", "last_name": "Smith", "email": "jane.smith@example.com", "phone": "+1-555-0102",
     "address": "456 Oak Ave", "city": "Los Angeles", "country": "USA"},
    {"first_name": "Michael", "last_name": "Johnson", "email": "michael.johnson@example.com",
     "phone": "+44-20-1234-5678", "address": "789 Baker St", "city": "London", "country": "UK"},
]


async def seed_database(session_factory: async_sessionmaker[AsyncSession]) -> bool:
    """
    Insert the sample products and customers if both tables are empty

    Returns:
        True if rows were inserted
    """
    async with session_factory() as session:
        products = (await session.execute(select(func.count()).select_from(Product))).scalar_one()
        customers = (await session.execute(select(func.count()).select_from(Customer))).scalar_one()
        if products or customers:
            logger.debug("Database already has data, skipping seed")
            return False

        now = datetime.now(timezone.utc)
        session.add_all(Product(**row, is_active=True, created_at=now) for row in SAMPLE_PRODUCTS)
        session.add_all(Customer(**row, is_active=True, created_at=now) for row in SAMPLE_CUSTOMERS)
        await session.commit()

    logger.info(f"Seeded {len(SAMPLE_PRODUCTS)} products and {len(SAMPLE_CUSTOMERS)} customers")
    return True
