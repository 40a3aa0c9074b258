"""
Tests for orders and their status
"""

import pytest

from minimarket.cart import Cart
from minimarket.customer import IndividualCustomer
from minimarket.order import Order, OrderStatus
from minimarket.payment import CardPayment
from minimarket.sink import MemorySink
from minimarket.exceptions import InvalidArgument


class TestOrder:
    """Test cases for Order"""

    def setup_method(self):
        """Set up test fixtures"""
        self.sink = MemorySink()
        self.order = Order(1, Cart(), sink=self.sink)

    def test_initial_status(self):
        """Test that new orders are preparing"""
        assert self.order.status == "Preparing"
        assert self.order.status == OrderStatus.PREPARING

    def test_update_status_with_enum(self):
        """Test status update with an enum member"""
        self.order.update_status(OrderStatus.CONFIRMED)
        assert self.order.status == "Confirmed"
        assert type(self.order.status) is str

    def test_update_status_with_text(self):
        """Test status update with a free label"""
        self.order.update_status("Onaylandı")
        assert self.order.status == "Onaylandı"

    def test_update_status_notifies_sink(self):
        """Test the status notification"""
        self.order.update_status("Confirmed")
        assert self.sink.lines == ["Order status updated: Confirmed"]

    def test_no_transition_guard(self):
        """Test that any status can follow any other"""
        self.order.update_status(OrderStatus.DELIVERED)
        self.order.update_status(OrderStatus.PREPARING)
        assert self.order.status == "Preparing"

    def test_repeated_updates_overwrite(self):
        """Test that only the last status is kept"""
        for status in ["Confirmed", "Delivered", "Confirmed"]:
            self.order.update_status(status)
        assert self.order.status == "Confirmed"
        assert len(self.sink.lines) == 3

    def test_non_text_status_rejected(self):
        """Test that statuses must be text"""
        with pytest.raises(InvalidArgument):
            self.order.update_status(2)
        assert self.order.status == "Preparing"

    def test_requires_cart(self):
        """Test that an order needs a cart"""
        with pytest.raises(InvalidArgument):
            Order(1, None)

    def test_requires_integer_id(self):
        """Test that the order id must be an integer"""
        with pytest.raises(InvalidArgument):
            Order("1", Cart())

    def test_record_payment(self):
        """Test attaching a receipt"""
        assert not self.order.is_paid
        receipt = CardPayment().settle(10)
        self.order.record_payment(receipt)
        assert self.order.is_paid
        assert self.order.receipt is receipt

    def test_record_payment_requires_receipt(self):
        """Test that record_payment validates its argument"""
        with pytest.raises(InvalidArgument):
            self.order.record_payment("paid")

    def test_customer_optional(self):
        """Test attaching a customer"""
        customer = IndividualCustomer(1, "Ayşe", "111")
        order = Order(2, Cart(), customer=customer)
        assert order.customer is customer
        assert self.order.customer is None

    def test_falsy_sink_is_kept(self):
        """Test that a sink evaluating to False still receives notifications"""
        class SizedSink(MemorySink):
            def __len__(self):
                return len(self.lines)

        sink = SizedSink()
        order = Order(3, Cart(), sink=sink)
        order.update_status(OrderStatus.DELIVERED)

        assert order.sink is sink
        assert sink.lines == ["Order status updated: Delivered"]
