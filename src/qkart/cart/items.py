"""Cart item management: commands and handler.

Adding an item is two steps, each in its own unit of work. ``CreateCart``
makes sure the user has a cart and commits it, then ``AddItemToCart`` runs
its guards. A rejected add therefore leaves an empty cart behind but never a
partial item change. Callers go through :func:`add_item_to_cart`.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from qkart.cart.cart import Cart
from qkart.catalogue.product import Product
from qkart.domain import qkart
from qkart.errors import (
    CART_NOT_CREATED,
    PRODUCT_ALREADY_IN_CART,
    PRODUCT_NOT_IN_CART,
    PRODUCT_NOT_IN_DATABASE,
    CartError,
    rejected,
)

logger = structlog.get_logger(__name__)


@qkart.command(part_of="Cart")
class CreateCart:
    email = String(required=True, max_length=254)


@qkart.command(part_of="Cart")
class AddItemToCart:
    email = String(required=True, max_length=254)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@qkart.command(part_of="Cart")
class UpdateCartItem:
    email = String(required=True, max_length=254)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@qkart.command(part_of="Cart")
class RemoveCartItem:
    email = String(required=True, max_length=254)
    product_id = Identifier(required=True)


def _create_cart(repo, email):
    cart = Cart.create(email=email)
    try:
        repo.add(cart)
    except ValidationError:
        # Another request created the cart first; the unique email wins.
        existing = repo.find_by_email(email)
        if existing is None:
            raise
        return existing

    logger.info("Cart created", email=email, cart_id=str(cart.id))
    return cart


def _find_product(product_id):
    return current_domain.repository_for(Product).find_by_id(product_id)


def add_item_to_cart(email, product_id, quantity):
    """Add a product to the user's cart, creating the cart first if needed.

    The cart is committed before the item guards run, so it survives a
    rejected add.
    """
    current_domain.process(CreateCart(email=email), asynchronous=False)
    return current_domain.process(
        AddItemToCart(email=email, product_id=product_id, quantity=quantity),
        asynchronous=False,
    )


@qkart.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        try:
            repo = current_domain.repository_for(Cart)
            cart = repo.find_by_email(command.email)
            if cart is None:
                cart = _create_cart(repo, command.email)
        except Exception as exc:
            logger.exception("Creating cart failed", email=command.email)
            raise CartError.internal(str(exc)) from exc

        return cart

    @handle(AddItemToCart)
    def add_item(self, command):
        try:
            repo = current_domain.repository_for(Cart)
            cart = repo.find_by_email(command.email)
            if cart is None:
                raise rejected(CartError.invalid_request(CART_NOT_CREATED), email=command.email)

            if cart.has_product(command.product_id):
                raise rejected(
                    CartError.invalid_request(PRODUCT_ALREADY_IN_CART),
                    email=command.email,
                    product_id=str(command.product_id),
                )

            product = _find_product(command.product_id)
            if product is None:
                raise rejected(
                    CartError.invalid_request(PRODUCT_NOT_IN_DATABASE),
                    email=command.email,
                    product_id=str(command.product_id),
                )

            cart.add_item(product.snapshot(), command.quantity)
            repo.add(cart)
        except CartError:
            raise
        except Exception as exc:
            logger.exception("Adding product to cart failed", email=command.email, product_id=str(command.product_id))
            raise CartError.internal(str(exc)) from exc

        logger.info(
            "Product added to cart",
            email=command.email,
            product_id=str(command.product_id),
            quantity=command.quantity,
        )
        return cart

    @handle(UpdateCartItem)
    def update_item(self, command):
        repo = current_domain.repository_for(Cart)
        cart = self._load_cart_holding(repo, command.email, command.product_id)

        cart.update_item_quantity(command.product_id, command.quantity)
        repo.add(cart)
        logger.info(
            "Cart item quantity updated",
            email=command.email,
            product_id=str(command.product_id),
            quantity=command.quantity,
        )
        return cart

    @handle(RemoveCartItem)
    def remove_item(self, command):
        repo = current_domain.repository_for(Cart)
        cart = self._load_cart_holding(repo, command.email, command.product_id)

        cart.remove_item(command.product_id)
        repo.add(cart)
        logger.info("Product removed from cart", email=command.email, product_id=str(command.product_id))

    def _load_cart_holding(self, repo, email, product_id):
        """Load the user's cart, insisting that it exists and already holds the product."""
        context = {"email": email, "product_id": str(product_id)}

        cart = repo.find_by_email(email)
        if cart is None:
            raise rejected(CartError.invalid_request(CART_NOT_CREATED), **context)

        if _find_product(product_id) is None:
            raise rejected(CartError.invalid_request(PRODUCT_NOT_IN_DATABASE), **context)

        if not cart.has_product(product_id):
            raise rejected(CartError.invalid_request(PRODUCT_NOT_IN_CART), **context)

        return cart
