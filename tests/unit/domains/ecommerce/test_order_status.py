"""
Unit Tests for the OrderStatus state machine
"""

import pytest

from app.domains.ecommerce.domain.value_objects import OrderStatus


class TestOrderStatusTransitions:
    def test_pending_can_only_be_confirmed_or_cancelled(self):
        assert OrderStatus.PENDING.get_valid_transitions() == [OrderStatus.CONFIRMED, OrderStatus.CANCELLED]
        assert OrderStatus.PENDING.can_be_confirmed()
        assert OrderStatus.PENDING.can_be_cancelled()
        assert not OrderStatus.PENDING.can_transition_to(OrderStatus.SHIPPED)

    @pytest.mark.parametrize(
        "status",
        [OrderStatus.CONFIRMED, OrderStatus.PROCESSING, OrderStatus.SHIPPED, OrderStatus.IN_TRANSIT],
    )
    def test_fulfilment_statuses_move_freely_between_each_other(self, status):
        for target in OrderStatus.fulfillment_statuses():
            assert status.can_transition_to(target)
        assert not status.can_transition_to(OrderStatus.PENDING)
        assert not status.can_transition_to(OrderStatus.CANCELLED)
        assert not status.can_be_cancelled()

    @pytest.mark.parametrize("status", [OrderStatus.DELIVERED, OrderStatus.CANCELLED])
    def test_terminal_statuses(self, status):
        assert status.is_terminal()
        assert status.get_valid_transitions() == []

    def test_nothing_goes_back_to_pending(self):
        assert all(not status.can_transition_to(OrderStatus.PENDING) for status in OrderStatus)

    def test_from_string_is_case_insensitive(self):
        assert OrderStatus.from_string(" shipped ") == OrderStatus.SHIPPED
        with pytest.raises(ValueError):
            OrderStatus.from_string("LOST")
