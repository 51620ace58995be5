"""
Unit of Work - one session, one commit per service operation
"""
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from commerce_api.repositories.customer_repository import CustomerRepository
from commerce_api.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Groups the repositories that share a request's AsyncSession

    Repositories stage changes; save_changes() commits them atomically.
    A failed commit is rolled back so the session stays usable, then the
    original error propagates.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self._products: Optional[ProductRepository] = None
        self._customers: Optional[CustomerRepository] = None

    @property
    def products(self) -> ProductRepository:
        if self._products is None:
            self._products = ProductRepository(self.session)
        return self._products

    @property
    def customers(self) -> CustomerRepository:
        if self._customers is None:
            self._customers = CustomerRepository(self.session)
        return self._customers

    async def save_changes(self) -> None:
        """Commit staged changes"""
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Commit failed, rolling back: {e}")
            await self.session.rollback()
            raise
