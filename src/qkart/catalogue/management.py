"""Catalogue management: adding products and changing their cost."""

import structlog
from protean import handle
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from qkart.catalogue.product import Product
from qkart.domain import qkart
from qkart.errors import PRODUCT_NOT_FOUND, CartError

logger = structlog.get_logger(__name__)


@qkart.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=255)
    category = String(max_length=100)
    cost = Float(required=True, min_value=0.0)
    rating = Float(min_value=0.0, max_value=5.0)
    image = String(max_length=2048)


@qkart.command(part_of="Product")
class ChangeProductCost:
    product_id = Identifier(required=True)
    cost = Float(required=True, min_value=0.0)


@qkart.command_handler(part_of=Product)
class ManageProductsHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.add(
            name=command.name,
            cost=command.cost,
            category=command.category,
            rating=command.rating,
            image=command.image,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Product added", product_id=str(product.id), cost=product.cost)
        return str(product.id)

    @handle(ChangeProductCost)
    def change_product_cost(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.find_by_id(command.product_id)
        if product is None:
            raise CartError.not_found(PRODUCT_NOT_FOUND)

        product.change_cost(command.cost)
        repo.add(product)
        logger.info("Product cost changed", product_id=str(product.id), cost=product.cost)


def get_product(product_id) -> Product:
    """Fetch a catalogue product, failing with NotFound when it does not exist."""
    product = current_domain.repository_for(Product).find_by_id(product_id)
    if product is None:
        raise CartError.not_found(PRODUCT_NOT_FOUND)
    return product
