"""
Customer Service - business rules for customers

Email must be unique across customers. The service checks before
writing so the common case gets a clean 409; the UNIQUE index on
customers.email catches the race where two requests pass the check at
the same time, and that IntegrityError is reported as the same conflict.

Author: TM3
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from commerce_api.domain.common import PagedResult
from commerce_api.domain.customer import CreateCustomerDto, CustomerDto, CustomerFilterDto, UpdateCustomerDto
from commerce_api.domain.exceptions import ConflictError, NotFoundError
from commerce_api.models.customer import Customer
from commerce_api.repositories.base import Predicate, all_of
from commerce_api.repositories.unit_of_work import UnitOfWork
from commerce_api.services.query_builder import has_text, resolve_sort, utcnow

CUSTOMER_SORT_COLUMNS = {
    "firstname": Customer.first_name,
    "lastname": Customer.last_name,
    "email": Customer.email,
    "country": Customer.country,
    "createdat": Customer.created_at,
}


def build_customer_filter(filter_dto: CustomerFilterDto) -> Optional[Predicate]:
    """
    AND-combine one condition per filter field that is set

    searchTerm matches first name, last name or email, ignoring case.
    """
    conditions = []

    if has_text(filter_dto.search_term):
        term = filter_dto.search_term
        conditions.append(
            Customer.first_name.icontains(term, autoescape=True)
            | Customer.last_name.icontains(term, autoescape=True)
            | Customer.email.icontains(term, autoescape=True)
        )

    if has_text(filter_dto.country):
        conditions.append(Customer.country == filter_dto.country)

    if has_text(filter_dto.city):
        conditions.append(Customer.city == filter_dto.city)

    if filter_dto.is_active is not None:
        conditions.append(Customer.is_active == filter_dto.is_active)

    return all_of(*conditions)


class CustomerService:
    """CRUD, lookups and paged queries over customers"""

    def __init__(self, uow: UnitOfWork, logger: Optional[logging.Logger] = None):
        self.uow = uow
        self.logger = logger or logging.getLogger(__name__)

    async def _get_or_raise(self, customer_id: int, action: str) -> Customer:
        customer = await self.uow.customers.get_by_id(customer_id)
        if customer is None:
            self.logger.warning(f"Customer with ID {customer_id} not found{action}")
            raise NotFoundError("Customer", customer_id)
        return customer

    async def _save_or_conflict(self, email: str) -> None:
        try:
            await self.uow.save_changes()
        except IntegrityError as e:
            self.logger.warning(f"Email {email} rejected by the database unique index")
            raise ConflictError("Customer", "Email", email) from e

    async def get_by_id(self, customer_id: int) -> CustomerDto:
        self.logger.info(f"Getting customer with ID: {customer_id}")
        customer = await self._get_or_raise(customer_id, "")
        return CustomerDto.model_validate(customer)

    async def get_by_email(self, email: str) -> CustomerDto:
        self.logger.info(f"Getting customer by email: {email}")

        customer = await self.uow.customers.get_by_email(email)
        if customer is None:
            self.logger.warning(f"Customer with email {email} not found")
            raise NotFoundError("Customer", email)

        return CustomerDto.model_validate(customer)

    async def get_all(self) -> List[CustomerDto]:
        self.logger.info("Getting all customers")
        customers = await self.uow.customers.get_all()
        return [CustomerDto.model_validate(c) for c in customers]

    async def get_paged(self, filter_dto: CustomerFilterDto) -> PagedResult[CustomerDto]:
        self.logger.info(
            f"Getting paged customers. Page: {filter_dto.page_number}, Size: {filter_dto.page_size}"
        )

        predicate = build_customer_filter(filter_dto)
        order_by, ascending = resolve_sort(
            filter_dto.sort_by, filter_dto.sort_descending, CUSTOMER_SORT_COLUMNS
        )

        items, total_count = await self.uow.customers.get_paged(
            filter_dto.page_number,
            filter_dto.page_size,
            predicate,
            order_by,
            ascending,
        )

        return PagedResult[CustomerDto](
            items=[CustomerDto.model_validate(c) for c in items],
            total_count=total_count,
            page_number=filter_dto.page_number,
            page_size=filter_dto.page_size,
        )

    async def get_by_country(self, country: str) -> List[CustomerDto]:
        self.logger.info(f"Getting customers by country: {country}")
        customers = await self.uow.customers.get_by_country(country)
        return [CustomerDto.model_validate(c) for c in customers]

    async def create(self, dto: CreateCustomerDto) -> CustomerDto:
        """
        Create a customer

        Raises:
            ConflictError: email already used by any customer
        """
        self.logger.info(f"Creating new customer: {dto.email}")

        if await self.uow.customers.email_exists(dto.email):
            self.logger.warning(f"Customer with email {dto.email} already exists")
            raise ConflictError("Customer", "Email", dto.email)

        customer = Customer(
            first_name=dto.first_name,
            last_name=dto.last_name,
            email=dto.email,
            phone=dto.phone,
            address=dto.address,
            city=dto.city,
            country=dto.country,
            is_active=True,
            created_at=utcnow(),
            updated_at=None,
        )

        created = await self.uow.customers.add(customer)
        await self._save_or_conflict(dto.email)

        self.logger.info(f"Customer created with ID: {created.id}")
        return CustomerDto.model_validate(created)

    async def update(self, customer_id: int, dto: UpdateCustomerDto) -> CustomerDto:
        """
        Overwrite a customer's fields

        Raises:
            NotFoundError: no customer with customer_id
            ConflictError: email belongs to a different customer
        """
        self.logger.info(f"Updating customer with ID: {customer_id}")

        customer = await self._get_or_raise(customer_id, " for update")

        if await self.uow.customers.email_exists(dto.email, exclude_id=customer_id):
            self.logger.warning(f"Another customer with email {dto.email} already exists")
            raise ConflictError("Customer", "Email", dto.email)

        customer.first_name = dto.first_name
        customer.last_name = dto.last_name
        customer.email = dto.email
        customer.phone = dto.phone
        customer.address = dto.address
        customer.city = dto.city
        customer.country = dto.country
        customer.is_active = dto.is_active
        customer.updated_at = utcnow()

        await self.uow.customers.update(customer)
        await self._save_or_conflict(dto.email)

        self.logger.info(f"Customer with ID {customer_id} updated successfully")
        return CustomerDto.model_validate(customer)

    async def delete(self, customer_id: int) -> None:
        self.logger.info(f"Deleting customer with ID: {customer_id}")

        customer = await self._get_or_raise(customer_id, " for deletion")

        await self.uow.customers.delete(customer)
        await self.uow.save_changes()

        self.logger.info(f"Customer with ID {customer_id} deleted successfully")
