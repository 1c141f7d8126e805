"""Tests for the Cart aggregate: items, snapshots and checkout reset."""

import pytest
from protean.exceptions import ValidationError
from qkart.cart.cart import Cart
from qkart.cart.events import (
    CartCheckedOut,
    CartCreated,
    CartItemAdded,
    CartItemQuantityUpdated,
    CartItemRemoved,
)
from qkart.catalogue.product import Product


def _make_cart():
    return Cart.create(email="crio-user@gmail.com")


def _make_product(cost=100.0, name="Running Shoes"):
    return Product.add(name=name, cost=cost, category="Fashion")


class TestCreateCart:
    def test_new_cart_is_empty(self):
        cart = _make_cart()
        assert cart.email == "crio-user@gmail.com"
        assert len(cart.items) == 0

    def test_new_cart_uses_default_payment_option(self):
        cart = _make_cart()
        assert cart.payment_option == "PAYMENT_OPTION_DEFAULT"

    def test_explicit_payment_option(self):
        cart = Cart.create(email="crio-user@gmail.com", payment_option="PAYMENT_OPTION_CARD")
        assert cart.payment_option == "PAYMENT_OPTION_CARD"

    def test_create_raises_event(self):
        cart = _make_cart()
        created = [e for e in cart._events if isinstance(e, CartCreated)]
        assert len(created) == 1
        assert created[0].email == "crio-user@gmail.com"


class TestAddItem:
    def test_add_item(self):
        cart = _make_cart()
        product = _make_product()
        cart.add_item(product.snapshot(), 2)

        assert len(cart.items) == 1
        assert cart.items[0].product.product_id == str(product.id)
        assert cart.items[0].quantity == 2

    def test_items_keep_insertion_order(self):
        cart = _make_cart()
        first = _make_product(name="First")
        second = _make_product(name="Second")
        cart.add_item(first.snapshot(), 1)
        cart.add_item(second.snapshot(), 1)

        assert [item.product.name for item in cart.items] == ["First", "Second"]

    def test_add_item_raises_event(self):
        cart = _make_cart()
        product = _make_product(cost=40.0)
        cart._events.clear()
        cart.add_item(product.snapshot(), 3)

        assert len(cart._events) == 1
        event = cart._events[0]
        assert isinstance(event, CartItemAdded)
        assert event.product_id == str(product.id)
        assert event.cost == 40.0
        assert event.quantity == 3

    def test_same_product_cannot_be_added_twice(self):
        cart = _make_cart()
        product = _make_product()
        cart.add_item(product.snapshot(), 1)

        with pytest.raises(ValidationError):
            cart.add_item(product.snapshot(), 4)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 1

    def test_has_product(self):
        cart = _make_cart()
        product = _make_product()
        assert not cart.has_product(product.id)

        cart.add_item(product.snapshot(), 1)
        assert cart.has_product(product.id)
        assert cart.has_product(str(product.id))


class TestUpdateItemQuantity:
    def test_quantity_is_overwritten(self):
        cart = _make_cart()
        product = _make_product()
        cart.add_item(product.snapshot(), 2)
        cart.update_item_quantity(product.id, 5)

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 5

    def test_update_raises_event(self):
        cart = _make_cart()
        product = _make_product()
        cart.add_item(product.snapshot(), 2)
        cart._events.clear()
        cart.update_item_quantity(product.id, 7)

        event = cart._events[0]
        assert isinstance(event, CartItemQuantityUpdated)
        assert event.previous_quantity == 2
        assert event.new_quantity == 7

    def test_update_product_not_in_cart(self):
        cart = _make_cart()
        with pytest.raises(ValidationError):
            cart.update_item_quantity("missing-product", 5)


class TestRemoveItem:
    def test_remove_item(self):
        cart = _make_cart()
        shoes = _make_product(name="Shoes")
        socks = _make_product(name="Socks")
        cart.add_item(shoes.snapshot(), 1)
        cart.add_item(socks.snapshot(), 1)

        cart.remove_item(shoes.id)

        assert len(cart.items) == 1
        assert cart.items[0].product.name == "Socks"

    def test_remove_raises_event(self):
        cart = _make_cart()
        product = _make_product()
        cart.add_item(product.snapshot(), 1)
        cart._events.clear()
        cart.remove_item(product.id)

        assert isinstance(cart._events[0], CartItemRemoved)

    def test_remove_twice_fails(self):
        cart = _make_cart()
        product = _make_product()
        cart.add_item(product.snapshot(), 1)
        cart.remove_item(product.id)

        with pytest.raises(ValidationError):
            cart.remove_item(product.id)


class TestTotalCost:
    def test_empty_cart_costs_nothing(self):
        assert _make_cart().total_cost() == 0

    def test_total_is_cost_times_quantity(self):
        cart = _make_cart()
        cart.add_item(_make_product(cost=100.0).snapshot(), 2)
        cart.add_item(_make_product(cost=15.5).snapshot(), 4)
        assert cart.total_cost() == 262.0

    def test_total_uses_snapshot_cost(self):
        cart = _make_cart()
        product = _make_product(cost=100.0)
        cart.add_item(product.snapshot(), 2)

        product.change_cost(999.0)

        assert cart.total_cost() == 200.0


class TestCompleteCheckout:
    def test_cart_is_emptied(self):
        cart = _make_cart()
        cart.add_item(_make_product(name="Shoes").snapshot(), 1)
        cart.add_item(_make_product(name="Socks").snapshot(), 3)

        cart.complete_checkout(cart.total_cost())

        assert len(cart.items) == 0

    def test_checkout_raises_event(self):
        cart = _make_cart()
        cart.add_item(_make_product(cost=100.0).snapshot(), 2)
        cart._events.clear()

        cart.complete_checkout(200.0)

        events = [e for e in cart._events if isinstance(e, CartCheckedOut)]
        assert len(events) == 1
        assert events[0].total_cost == 200.0
        assert events[0].item_count == 1
        assert events[0].payment_option == "PAYMENT_OPTION_DEFAULT"
