"""Cart aggregate: one cart per user email, holding product snapshots.

Carts are created lazily on the first add and are never deleted; checkout
only empties them. Items keep insertion order and a cart never holds two
items for the same product.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Integer, String, ValueObject

from qkart.cart.events import (
    CartCheckedOut,
    CartCreated,
    CartItemAdded,
    CartItemQuantityUpdated,
    CartItemRemoved,
)
from qkart.catalogue.product import ProductSnapshot
from qkart.config import settings
from qkart.domain import qkart


@qkart.entity(part_of="Cart")
class CartItem:
    product = ValueObject(ProductSnapshot, required=True)
    quantity = Integer(required=True, min_value=1)

    @property
    def cost(self):
        return self.product.cost * self.quantity


@qkart.aggregate
class Cart:
    email = String(required=True, max_length=254, unique=True)
    items = HasMany(CartItem)
    payment_option = String(max_length=100)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_item_per_product(self):
        product_ids = [item.product.product_id for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear only once in a cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, email, payment_option=None):
        now = datetime.now(UTC)
        cart = cls(
            email=email,
            payment_option=payment_option or settings.default_payment_option,
            created_at=now,
            updated_at=now,
        )
        cart.raise_(
            CartCreated(
                cart_id=str(cart.id),
                email=email,
                payment_option=cart.payment_option,
            )
        )
        return cart

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def find_item(self, product_id):
        return next((i for i in self.items if i.product.product_id == str(product_id)), None)

    def has_product(self, product_id) -> bool:
        return self.find_item(product_id) is not None

    def add_item(self, snapshot, quantity):
        """Append a product snapshot with its quantity."""
        if self.has_product(snapshot.product_id):
            raise ValidationError({"product_id": ["Product already in cart"]})

        self.add_items(CartItem(product=snapshot, quantity=quantity))
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                email=self.email,
                product_id=snapshot.product_id,
                cost=snapshot.cost,
                quantity=quantity,
            )
        )

    def update_item_quantity(self, product_id, quantity):
        """Overwrite the quantity of an item already in the cart."""
        item = self.find_item(product_id)
        if item is None:
            raise ValidationError({"product_id": ["Product not in cart"]})

        previous_quantity = item.quantity
        item.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemQuantityUpdated(
                cart_id=str(self.id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )

    def remove_item(self, product_id):
        item = self.find_item(product_id)
        if item is None:
            raise ValidationError({"product_id": ["Product not in cart"]})

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartItemRemoved(cart_id=str(self.id), product_id=str(product_id)))

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def total_cost(self) -> float:
        """Sum of snapshot cost times quantity over all items."""
        return sum(item.cost for item in self.items)

    def complete_checkout(self, total_cost):
        """Empty the cart once the user's wallet has been debited."""
        item_count = len(self.items)
        for item in list(self.items):
            self.remove_items(item)

        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            CartCheckedOut(
                cart_id=str(self.id),
                email=self.email,
                total_cost=total_cost,
                item_count=item_count,
                payment_option=self.payment_option,
                checked_out_at=now,
            )
        )


@qkart.repository(part_of=Cart)
class CartRepository:
    def find_by_email(self, email) -> Cart | None:
        carts = self._dao.query.filter(email=email).all().items
        return carts[0] if carts else None
