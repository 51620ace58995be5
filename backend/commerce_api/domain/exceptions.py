"""
Domain exceptions

These exceptions represent business-level errors and are independent
of infrastructure concerns (HTTP, database, etc.). They are translated
into HTTP responses in one place: commerce_api.api.errors.
"""
from typing import Any, Dict, List, Optional


class DomainError(Exception):
    """Base exception for business rule violations (HTTP 400)"""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(DomainError):
    """Raised when a lookup by id or natural key finds nothing"""

    def __init__(self, entity_name: str, key: Any):
        self.entity_name = entity_name
        self.key = key
        super().__init__(
            message=f'Entity "{entity_name}" ({key}) was not found.',
            details={"entity": entity_name, "key": key},
        )


class ConflictError(DomainError):
    """Raised when a uniqueness constraint would be violated"""

    def __init__(self, entity_name: str, conflict_field: str, value: Any):
        self.entity_name = entity_name
        self.conflict_field = conflict_field
        self.value = value
        super().__init__(
            message=f"{entity_name} with {conflict_field} '{value}' already exists.",
            details={"entity": entity_name, "field": conflict_field, "value": value},
        )


class ValidationFailedError(DomainError):
    """Raised at the API boundary when a DTO breaks field rules"""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        super().__init__(message="One or more validation errors occurred.", details={"errors": errors})
