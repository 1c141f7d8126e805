"""Read side of the cart: fetch a user's cart by email."""

from protean.utils.globals import current_domain

from qkart.cart.cart import Cart
from qkart.errors import CART_NOT_FOUND, CartError


def get_cart(email) -> Cart:
    """Return the user's cart, failing with NotFound when none exists."""
    cart = current_domain.repository_for(Cart).find_by_email(email)
    if cart is None:
        raise CartError.not_found(CART_NOT_FOUND)
    return cart
