"""
Domain Exceptions

Errors raised by the application services when a request breaks a shop,
catalog, cart or order rule. app.api.exception_handlers turns them into
JSON error responses; nothing below the API layer knows about HTTP.
"""

from typing import Any


def _compact(**values: Any) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


class DomainException(Exception):
    """
    Base class of every DreamShops error.

    Attributes:
        message: Text shown to API clients
        code: Stable machine-readable code (e.g. "INSUFFICIENT_STOCK")
        details: Extra context serialized with the error
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class ValidationException(DomainException):
    """Invalid input that passed schema validation: unknown enum value, bad quantity, rejected upload."""

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        self.field = field
        super().__init__(message, "VALIDATION_ERROR", {**(details or {}), **_compact(field=field)})


class EntityNotFoundException(DomainException):
    def __init__(self, entity_type: str, entity_id: Any, message: str | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            message or f"{entity_type} with ID {entity_id} not found",
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class DuplicateEntityException(DomainException):
    """A unique value (email, shop name, product name within a shop...) is already taken."""

    def __init__(self, entity_type: str, field: str, value: Any, message: str | None = None):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(
            message or f"{entity_type} with {field}='{value}' already exists",
            "DUPLICATE_ENTITY",
            {"entity_type": entity_type, "field": field, "value": str(value)},
        )


class BusinessRuleViolationException(DomainException):
    """
    A named business rule rejected the operation.

    The rule name (e.g. "single_shop_cart", "category_cycle") is always
    included in the details so clients can branch on it.
    """

    def __init__(self, rule: str, message: str | None = None, details: dict[str, Any] | None = None):
        self.rule = rule
        super().__init__(
            message or f"Business rule violated: {rule}",
            "BUSINESS_RULE_VIOLATION",
            {**(details or {}), "rule": rule},
        )


class InsufficientStockException(DomainException):
    """A cart line asks for more units than the product has in inventory."""

    def __init__(self, product_id: int, requested: int, available: int):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for product {product_id}. Requested: {requested}, Available: {available}",
            "INSUFFICIENT_STOCK",
            {"product_id": product_id, "requested": requested, "available": available},
        )


class InvalidOperationException(DomainException):
    """The entity's current state does not allow the operation (e.g. cancelling a shipped order)."""

    def __init__(self, operation: str, current_state: str, message: str | None = None):
        self.operation = operation
        self.current_state = current_state
        super().__init__(
            message or f"Cannot perform '{operation}' in state '{current_state}'",
            "INVALID_OPERATION",
            {"operation": operation, "current_state": current_state},
        )


class AuthorizationException(DomainException):
    """The authenticated user is neither the owner of the resource nor an admin."""

    def __init__(self, operation: str, resource: str | None = None, user_id: int | None = None):
        self.operation = operation
        self.resource = resource
        self.user_id = user_id
        target = f" on '{resource}'" if resource else ""
        super().__init__(
            f"Not authorized to perform '{operation}'{target}",
            "AUTHORIZATION_ERROR",
            {"operation": operation, "resource": resource},
        )


class IntegrationException(DomainException):
    """A call to an external service (Cloudinary) failed."""

    def __init__(self, service: str, message: str, original_error: Exception | None = None):
        self.service = service
        self.original_error = original_error
        super().__init__(
            message,
            "INTEGRATION_ERROR",
            _compact(service=service, original_error=str(original_error) if original_error else None),
        )
