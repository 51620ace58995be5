"""
Customer Repository - Data Access Layer for Customers

Author: TM3
"""
from typing import List, Optional

from sqlalchemy import exists, select

from commerce_api.models.customer import Customer
from commerce_api.repositories.base import Repository


class CustomerRepository(Repository[Customer]):
    """Repository for Customer data access"""

    model = Customer

    async def get_by_email(self, email: str) -> Optional[Customer]:
        """
        Find customer by email (exact match)

        Returns:
            Customer or None if not found
        """
        result = await self.session.execute(select(Customer).where(Customer.email == email))
        return result.scalar_one_or_none()

    async def get_by_country(self, country: str) -> List[Customer]:
        return await self.find(Customer.country == country)

    async def email_exists(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """
        Check whether another customer already uses email

        Args:
            email: Address to look for
            exclude_id: Customer to ignore (the one being updated)

        Returns:
            True if a customer other than exclude_id has this email
        """
        condition = Customer.email == email
        if exclude_id is not None:
            condition = condition & (Customer.id != exclude_id)

        result = await self.session.execute(select(exists().where(condition)))
        return bool(result.scalar())
