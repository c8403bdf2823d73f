"""
Domain Layer - Core building blocks

- Value Objects: status enums and money helpers
- Exceptions: Domain-specific error handling
"""

from app.core.domain.exceptions import (
    AuthorizationException,
    BusinessRuleViolationException,
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    InsufficientStockException,
    IntegrationException,
    InvalidOperationException,
    ValidationException,
)
from app.core.domain.value_objects import StatusEnum, to_money

__all__ = [
    # Value Objects
    "StatusEnum",
    "to_money",
    # Exceptions
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "BusinessRuleViolationException",
    "InsufficientStockException",
    "InvalidOperationException",
    "AuthorizationException",
    "DuplicateEntityException",
    "IntegrationException",
]
