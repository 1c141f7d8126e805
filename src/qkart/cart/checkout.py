"""Checkout: pay for the cart from the user's wallet and empty it.

Guards are evaluated in this order, and the first failure wins:

    1. the user has a cart                      (404)
    2. the cart has at least one item           (400)
    3. the user record exists                   (404)
    4. the user has set a non-default address   (400)
    5. the wallet covers the cart's total cost  (400)

The total is computed from the product snapshots stored in the cart, never
from the live catalogue. The wallet debit and the cart reset are saved in
the same unit of work.
"""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from qkart.cart.cart import Cart
from qkart.domain import qkart
from qkart.errors import (
    ADDRESS_NOT_SET,
    CART_IS_EMPTY,
    CART_NOT_FOUND,
    INSUFFICIENT_BALANCE,
    USER_NOT_FOUND,
    CartError,
    rejected,
)
from qkart.identity.user import User

logger = structlog.get_logger(__name__)


@qkart.command(part_of="Cart")
class Checkout:
    email = String(required=True, max_length=254)


@qkart.command_handler(part_of=Cart)
class CheckoutHandler:
    @handle(Checkout)
    def checkout(self, command):
        email = command.email
        cart_repo = current_domain.repository_for(Cart)
        user_repo = current_domain.repository_for(User)

        cart = cart_repo.find_by_email(email)
        if cart is None:
            raise rejected(CartError.not_found(CART_NOT_FOUND), email=email)

        if not cart.items:
            raise rejected(CartError.invalid_request(CART_IS_EMPTY), email=email)

        user = user_repo.find_by_email(email)
        if user is None:
            raise rejected(CartError.not_found(USER_NOT_FOUND), email=email)

        if not user.has_set_non_default_address():
            raise rejected(CartError.invalid_request(ADDRESS_NOT_SET), email=email)

        total_cost = cart.total_cost()
        if total_cost > user.wallet_money:
            raise rejected(
                CartError.invalid_request(INSUFFICIENT_BALANCE),
                email=email,
                total_cost=total_cost,
                wallet_money=user.wallet_money,
            )

        user.debit_wallet(total_cost)
        cart.complete_checkout(total_cost)

        user_repo.add(user)
        cart_repo.add(cart)

        logger.info("Checkout completed", email=email, total_cost=total_cost, balance=user.wallet_money)
