"""
Address Type Value Object
"""

from app.core.domain import StatusEnum, ValidationException


class AddressType(StatusEnum):
    """Purpose of a saved address. Each type keeps its own default address."""

    SHIPPING = "SHIPPING"
    BILLING = "BILLING"
    BOTH = "BOTH"

    @classmethod
    def resolve(cls, value: str | None) -> "AddressType":
        """
        Parse a user-supplied address type.

        Raises:
            ValidationException: when the value is missing or not a known type
        """
        if value is None or not value.strip():
            raise ValidationException("Address type is required", field="address_type")
        try:
            return cls.from_string(value)
        except ValueError as e:
            raise ValidationException(
                f"Invalid address type: {value}. Allowed values: {', '.join(cls.values())}",
                field="address_type",
            ) from e
