"""
Field validation for create/update DTOs

Each validator is a pure function: DTO in, ``{field: [messages]}`` out.
An empty dict means the DTO is valid. Every rule runs, so one response
lists every problem with the request. Field names are the camelCase
names used on the wire.

Validators are looked up through the VALIDATORS registry (DTO type ->
function); the API layer runs them before a request reaches a service.
"""
import re
from typing import Callable, Dict, List, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel

from commerce_api.domain.customer import CreateCustomerDto, UpdateCustomerDto
from commerce_api.domain.product import CreateProductDto, UpdateProductDto

ValidationErrors = Dict[str, List[str]]

# Validation patterns
PHONE_PATTERN = re.compile(r"^[\d\s\+\-\(\)]*$")

PRODUCT_NAME_MAX_LENGTH = 200
PRODUCT_DESCRIPTION_MAX_LENGTH = 2000
PRODUCT_CATEGORY_MAX_LENGTH = 100
CUSTOMER_NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 20
ADDRESS_MAX_LENGTH = 500
CITY_MAX_LENGTH = 100
COUNTRY_MAX_LENGTH = 100


def _add(errors: ValidationErrors, field: str, message: str) -> None:
    errors.setdefault(field, []).append(message)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def _required_text(errors: ValidationErrors, field: str, label: str, value: Optional[str], max_length: int) -> None:
    if _is_blank(value):
        _add(errors, field, f"{label} is required")
    if value is not None and len(value) > max_length:
        _add(errors, field, f"{label} must not exceed {max_length} characters")


def _optional_text(errors: ValidationErrors, field: str, label: str, value: Optional[str], max_length: int) -> None:
    if value is not None and len(value) > max_length:
        _add(errors, field, f"{label} must not exceed {max_length} characters")


def validate_product(dto: CreateProductDto) -> ValidationErrors:
    """
    Rules shared by product create and update

    - name: required, max 200
    - description: max 2000
    - price: required, > 0
    - category: required, max 100
    - stockQuantity: >= 0
    """
    errors: ValidationErrors = {}

    _required_text(errors, "name", "Product name", dto.name, PRODUCT_NAME_MAX_LENGTH)
    _optional_text(errors, "description", "Description", dto.description, PRODUCT_DESCRIPTION_MAX_LENGTH)

    if dto.price is None:
        _add(errors, "price", "Price is required")
    elif dto.price <= 0:
        _add(errors, "price", "Price must be greater than 0")

    _required_text(errors, "category", "Category", dto.category, PRODUCT_CATEGORY_MAX_LENGTH)

    if dto.stock_quantity is not None and dto.stock_quantity < 0:
        _add(errors, "stockQuantity", "Stock quantity cannot be negative")

    return errors


def validate_customer(dto: CreateCustomerDto) -> ValidationErrors:
    """
    Rules shared by customer create and update

    - firstName / lastName: required, max 100
    - email: required, valid syntax per email-validator (no DNS lookup), max 255
    - phone: optional, max 20, digits, spaces and + - ( ) only
    - address max 500, city max 100, country max 100
    """
    errors: ValidationErrors = {}

    _required_text(errors, "firstName", "First name", dto.first_name, CUSTOMER_NAME_MAX_LENGTH)
    _required_text(errors, "lastName", "Last name", dto.last_name, CUSTOMER_NAME_MAX_LENGTH)

    if _is_blank(dto.email):
        _add(errors, "email", "Email is required")
    else:
        try:
            validate_email(dto.email, check_deliverability=False)
        except EmailNotValidError as e:
            _add(errors, "email", str(e))
        if len(dto.email) > EMAIL_MAX_LENGTH:
            _add(errors, "email", f"Email must not exceed {EMAIL_MAX_LENGTH} characters")

    if dto.phone:
        if len(dto.phone) > PHONE_MAX_LENGTH:
            _add(errors, "phone", f"Phone must not exceed {PHONE_MAX_LENGTH} characters")
        if not PHONE_PATTERN.match(dto.phone):
            _add(errors, "phone", "Phone number contains invalid characters")

    _optional_text(errors, "address", "Address", dto.address, ADDRESS_MAX_LENGTH)
    _optional_text(errors, "city", "City", dto.city, CITY_MAX_LENGTH)
    _optional_text(errors, "country", "Country", dto.country, COUNTRY_MAX_LENGTH)

    return errors


VALIDATORS: Dict[type, Callable[[BaseModel], ValidationErrors]] = {
    CreateProductDto: validate_product,
    UpdateProductDto: validate_product,
    CreateCustomerDto: validate_customer,
    UpdateCustomerDto: validate_customer,
}


def validate(dto: BaseModel) -> ValidationErrors:
    """
    Run the validator registered for type(dto)

    Raises:
        LookupError: no validator registered for this DTO type
    """
    validator = VALIDATORS.get(type(dto))
    if validator is None:
        raise LookupError(f"No validator registered for {type(dto).__name__}")
    return validator(dto)
