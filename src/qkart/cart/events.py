"""Domain events for the Cart aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from qkart.domain import qkart


@qkart.event(part_of="Cart")
class CartCreated:
    """A cart was created for a user on their first add."""

    __version__ = 1

    cart_id = Identifier(required=True)
    email = String(required=True)
    payment_option = String()


@qkart.event(part_of="Cart")
class CartItemAdded:
    """A product snapshot was added to the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    email = String(required=True)
    product_id = Identifier(required=True)
    cost = Float(required=True)
    quantity = Integer(required=True)


@qkart.event(part_of="Cart")
class CartItemQuantityUpdated:
    """The quantity of a cart item was overwritten."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@qkart.event(part_of="Cart")
class CartItemRemoved:
    """An item was removed from the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)


@qkart.event(part_of="Cart")
class CartCheckedOut:
    """The cart was paid for from the user's wallet and emptied."""

    __version__ = 1

    cart_id = Identifier(required=True)
    email = String(required=True)
    total_cost = Float(required=True)
    item_count = Integer(required=True)
    payment_option = String()
    checked_out_at = DateTime(required=True)
