"""
Order Status Value Object for E-commerce Domain

Represents the lifecycle states of an order with transition rules.
"""

from app.core.domain import StatusEnum


class OrderStatus(StatusEnum):
    """
    Order lifecycle states.

    Valid transitions:
    - PENDING -> CONFIRMED (confirm action), CANCELLED (cancel action, restocks inventory)
    - CONFIRMED -> PROCESSING, SHIPPED, IN_TRANSIT, DELIVERED (status update)
    - PROCESSING, SHIPPED, IN_TRANSIT -> PROCESSING, SHIPPED, IN_TRANSIT, DELIVERED
    - DELIVERED, CANCELLED -> (terminal states)

    PENDING is never a valid target.
    """

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    IN_TRANSIT = "IN_TRANSIT"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @classmethod
    def fulfillment_statuses(cls) -> list["OrderStatus"]:
        """Statuses reachable through the generic status update action."""
        return [cls.PROCESSING, cls.SHIPPED, cls.IN_TRANSIT, cls.DELIVERED]

    def can_transition_to(self, new_status: "OrderStatus") -> bool:
        """
        Check if transition to new status is valid.

        Args:
            new_status: Target status

        Returns:
            True if transition is allowed
        """
        return new_status in _TRANSITIONS[self]

    def get_valid_transitions(self) -> list["OrderStatus"]:
        """
        Get list of valid next statuses.

        Returns:
            List of OrderStatus that can be transitioned to
        """
        return list(_TRANSITIONS[self])

    def is_terminal(self) -> bool:
        """Check if this is a terminal (final) state."""
        return not _TRANSITIONS[self]

    def can_be_confirmed(self) -> bool:
        return self == OrderStatus.PENDING

    def can_be_cancelled(self) -> bool:
        """Only orders that have not been confirmed can be cancelled."""
        return self == OrderStatus.PENDING


_TRANSITIONS: dict[OrderStatus, list[OrderStatus]] = {
    OrderStatus.PENDING: [OrderStatus.CONFIRMED, OrderStatus.CANCELLED],
    OrderStatus.CONFIRMED: OrderStatus.fulfillment_statuses(),
    OrderStatus.PROCESSING: OrderStatus.fulfillment_statuses(),
    OrderStatus.SHIPPED: OrderStatus.fulfillment_statuses(),
    OrderStatus.IN_TRANSIT: OrderStatus.fulfillment_statuses(),
    OrderStatus.DELIVERED: [],
    OrderStatus.CANCELLED: [],
}
